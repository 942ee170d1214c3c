"""Domain helpers for parsing and validating ledger input."""
from __future__ import annotations

from typing import Any, Iterable, Optional

TIER_DEFAULT_BASE = {1: 70, 2: 55, 3: 45}
ALLOWED_DELTAS = (-10, -5, 5, 10)
NO_NOTE = "(no note)"


def parse_int(value: Any) -> Optional[int]:
    """
    Coerce loosely typed input (form strings, JSON numbers) into an int.

    Returns None when the value is blank or not an integral number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        number = float(raw)
    except ValueError:
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return int(number) if number.is_integer() else None


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_tier(value: Any) -> Optional[int]:
    tier = parse_int(value)
    return tier if tier in TIER_DEFAULT_BASE else None


def parse_delta(value: Any) -> Optional[int]:
    delta = parse_int(value)
    return delta if delta in ALLOWED_DELTAS else None


def default_base(tier: int) -> int:
    return TIER_DEFAULT_BASE[tier]


def clean_name(value: Any) -> str:
    return str(value if value is not None else "").strip()


def clean_note(value: Any) -> str:
    note = str(value if value is not None else "").strip()
    return note or NO_NOTE


def next_id(items: Iterable[Any]) -> int:
    """1 for an empty collection, otherwise the highest id plus one."""
    ids = [item.id for item in items]
    return max(ids) + 1 if ids else 1
