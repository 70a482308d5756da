#!/usr/bin/env python3
"""
Manual test for grid_utils: checked coordinate arithmetic and frequency points.

Tests basic semantics on small synthetic grids.
"""

import sys
from pathlib import Path

import numpy as np

# Add project root to sys.path so grid_utils can be found
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from grid_utils.coords import checked_sub, checked_sub_coord, scale, in_bounds, mark
from grid_utils.points import frequency_points, same_frequency_pairs, frequency_counts


def _label_grid(rows):
    """Build an object grid from strings, '.' = empty."""
    H = len(rows)
    W = len(rows[0]) if H else 0
    g = np.empty((H, W), dtype=object)
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            g[r, c] = None if ch == "." else ch
    return g


def test_checked_sub():
    """Negative results are absent, never wrapped."""
    assert checked_sub(5, 3) == 2
    assert checked_sub(3, 3) == 0
    assert checked_sub(2, 3) is None, "2 - 3 must be discarded"

    assert checked_sub_coord((4, 6), (1, 2)) == (3, 4)
    assert checked_sub_coord((4, 1), (1, 2)) is None, "col underflow discards the coord"
    assert checked_sub_coord((0, 5), (1, 0)) is None, "row underflow discards the coord"

    print("✅ PASS: checked subtraction")


def test_scale_and_bounds():
    assert scale((2, 3), 0) == (0, 0)
    assert scale((2, 3), 3) == (6, 9)

    assert in_bounds((0, 0), (2, 3))
    assert in_bounds((1, 2), (2, 3))
    assert not in_bounds((2, 0), (2, 3))
    assert not in_bounds((0, 3), (2, 3))
    assert not in_bounds((0, 0), (0, 0))

    print("✅ PASS: scale and bounds")


def test_mark_ignores_out_of_range():
    grid = np.zeros((2, 3), dtype=bool)

    assert mark(grid, (1, 2)) is True
    assert mark(grid, (1, 2)) is True, "re-marking an in-bounds cell still counts as in-bounds"
    assert mark(grid, (2, 0)) is False
    assert mark(grid, (0, 7)) is False

    assert grid.sum() == 1, f"expected one marked cell, got {grid.sum()}"
    assert grid[1, 2]

    print("✅ PASS: mark() ignores out-of-range coords")


def test_frequency_points_row_major():
    grid = _label_grid([
        "a..b",
        "....",
        ".a.A",
    ])

    points = frequency_points(grid)
    assert points == [((0, 0), "a"), ((0, 3), "b"), ((2, 1), "a"), ((2, 3), "A")], \
        f"unexpected points {points}"

    counts = frequency_counts(points)
    assert counts == {"a": 2, "b": 1, "A": 1}, f"unexpected counts {counts}"

    print("✅ PASS: frequency points in row-major order")


def test_frequency_points_empty():
    assert frequency_points(_label_grid(["...", "..."])) == []
    assert frequency_points(np.empty((0, 0), dtype=object)) == []

    print("✅ PASS: empty grids yield no points")


def test_same_frequency_pairs():
    grid = _label_grid([
        "a.b",
        ".a.",
        "b.a",
    ])
    pairs = list(same_frequency_pairs(frequency_points(grid)))

    # a: (0,0) (1,1) (2,2) -> 3 pairs, b: (0,2) (2,0) -> 1 pair
    assert len(pairs) == 4, f"expected 4 pairs, got {pairs}"
    assert ((0, 0), (1, 1)) in pairs
    assert ((0, 0), (2, 2)) in pairs
    assert ((1, 1), (2, 2)) in pairs
    assert ((0, 2), (2, 0)) in pairs

    # Label case matters: 'a' and 'A' are distinct frequencies
    grid = _label_grid(["a.A"])
    assert list(same_frequency_pairs(frequency_points(grid))) == []

    print("✅ PASS: same-frequency pairs")


if __name__ == "__main__":
    test_checked_sub()
    test_scale_and_bounds()
    test_mark_ignores_out_of_range()
    test_frequency_points_row_major()
    test_frequency_points_empty()
    test_same_frequency_pairs()

    print("\n" + "=" * 60)
    print("🎉 ALL GRID_UTILS TESTS PASSED!")
    print("=" * 60)
