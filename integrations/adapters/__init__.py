from .base import EdgeFunctionClient, EdgeFunctionError
from .edge_banking import EdgeFunctionBankingAdapter
from .edge_hmrc import EdgeFunctionHmrcAdapter

__all__ = [
    "EdgeFunctionBankingAdapter",
    "EdgeFunctionClient",
    "EdgeFunctionError",
    "EdgeFunctionHmrcAdapter",
]
