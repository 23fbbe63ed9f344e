from .banking import BankingPort
from .hmrc import HmrcPort

__all__ = ["BankingPort", "HmrcPort"]
