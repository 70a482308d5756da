"""
Checked coordinate arithmetic shared by the locator stages.

Coordinates are (row, col) pairs of non-negative ints. Any subtraction whose
result would go negative yields None instead of a value; callers drop such
candidates silently.

Used by:
  - 02_antinodes/step.py (reflections 2a - b, 2b - a)
  - 03_harmonics/step.py (a*(h+1) - b*h, b*(h+1) - a*h)
"""

from typing import Optional, Tuple

import numpy as np

Coord = Tuple[int, int]


def checked_sub(x: int, y: int) -> Optional[int]:
    """Return x - y, or None when the result would be negative."""
    if x < y:
        return None
    return x - y


def checked_sub_coord(a: Coord, b: Coord) -> Optional[Coord]:
    """
    Componentwise checked subtraction a - b.

    Returns:
        (row, col) or None if either component underflows
    """
    row = checked_sub(a[0], b[0])
    col = checked_sub(a[1], b[1])
    if row is None or col is None:
        return None
    return (row, col)


def scale(a: Coord, k: int) -> Coord:
    """Componentwise multiply by a non-negative integer."""
    return (a[0] * k, a[1] * k)


def in_bounds(coord: Coord, shape: Tuple[int, int]) -> bool:
    H, W = shape
    r, c = coord
    return 0 <= r < H and 0 <= c < W


def mark(grid: np.ndarray, coord: Coord) -> bool:
    """
    Set grid[coord] = True if coord lies inside the grid.

    Out-of-range coordinates leave the grid untouched.

    Returns:
        True if the cell was inside the grid (whether or not it was already set)
    """
    if not in_bounds(coord, grid.shape):
        return False
    grid[coord[0], coord[1]] = True
    return True
