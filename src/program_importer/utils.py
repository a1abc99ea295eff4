"""Utility functions."""
from typing import List, Optional


def to_int(s: Optional[str]) -> Optional[int]:
    """Convert string to int, returning None if conversion fails."""
    try:
        return int(s) if s is not None else None
    except ValueError:
        return None


def inclusive_range(start: int, end: int) -> List[int]:
    """Expand a 'start-end' pair like [WEEKS 1-3] into [1, 2, 3]."""
    return list(range(start, end + 1))
