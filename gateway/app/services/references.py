import time
from typing import Optional


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


def mock_reference(prefix: str, now_ms: Optional[int] = None) -> str:
    """
    Synthetic acknowledgement id, "<PREFIX>-<epoch millis>".

    Two calls in the same millisecond collide; nothing correlates ids
    across requests.
    """
    return f"{prefix}-{epoch_millis() if now_ms is None else now_ms}"
