"""Indexing with a fallback to the first element."""

from __future__ import annotations

from collections.abc import Sequence


def get_val(values: Sequence[int], idx: int) -> int:
    """Return ``values[idx]``; else the first element; else 0 for an empty sequence."""
    if 0 <= idx < len(values):
        return values[idx]
    if values:
        return values[0]
    return 0