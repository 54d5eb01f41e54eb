"""Lenient parsing for path and query values.

Ids that are not integers match nothing, and a limit that is not a number
selects nothing, so these routes answer 404/204/[] instead of 400.
"""

from typing import Optional


def parse_id(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def parse_limit(raw: Optional[str], default: int) -> int:
    if raw is None or raw == "":
        return default
    try:
        return max(int(raw), 0)
    except ValueError:
        return 0
