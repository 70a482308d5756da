"""
Frequency point enumeration.

Extracts the occupied cells of a label grid and pairs up cells that share a
frequency. Both locator stages consume these helpers; neither filters by label
value before pairing.
"""

from collections import Counter
from typing import Any, Dict, Iterator, List, Tuple

import numpy as np

from grid_utils.coords import Coord

FrequencyPoint = Tuple[Coord, Any]


def frequency_points(grid: np.ndarray) -> List[FrequencyPoint]:
    """
    List every occupied cell with its label, in row-major order.

    Input:
      grid: H×W object array; None marks an empty cell

    Output:
      [((r, c), label), ...]  (empty list for an all-empty grid)
    """
    H, W = grid.shape
    points: List[FrequencyPoint] = []

    for r in range(H):
        for c in range(W):
            label = grid[r, c]
            if label is not None:
                points.append(((r, c), label))

    return points


def same_frequency_pairs(points: List[FrequencyPoint]) -> Iterator[Tuple[Coord, Coord]]:
    """
    Yield each unordered pair (a, b) of points with equal labels.

    Pairs come out with a before b in enumeration order (i < j), so every
    pair is visited exactly once.
    """
    n = len(points)
    for i in range(n - 1):
        a, label_a = points[i]
        for j in range(i + 1, n):
            b, label_b = points[j]
            if label_a != label_b:
                continue
            yield a, b


def frequency_counts(points: List[FrequencyPoint]) -> Dict[Any, int]:
    """Occupied-cell count per label."""
    return dict(Counter(label for _, label in points))
