"""
Utility helpers shared across routers/services.
"""

from datetime import datetime, timezone
import time
from typing import Optional


def now_ms() -> int:
    """Current time as epoch milliseconds (the unit stored in createdAt)."""
    return int(time.time() * 1000)


def fmt_date(ts: Optional[int]) -> str:
    """
    Formata um timestamp em ms como "YYYY-MM-DD HH:MM" (UTC).
    """
    if ts is None:
        return ""
    moment = datetime.fromtimestamp(ts / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M")


def fmt_delta(delta: int) -> str:
    return f"+{delta}" if delta > 0 else str(delta)
