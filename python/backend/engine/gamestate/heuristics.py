"""Distance estimates used to rank board states."""

from __future__ import annotations

from typing import Sequence


def manhattan_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """Sum of absolute per-axis differences between *a* and *b*."""
    if len(a) != len(b):
        raise ValueError(f"Dimension mismatch: {len(a)} vs {len(b)}.")
    return sum(abs(x - y) for x, y in zip(a, b))
