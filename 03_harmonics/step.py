"""
03_harmonics: harmonic rule, every grid point on the line through a pair.

Stage: harmonics
For each same-frequency pair (a, b), walks a*(h+1) - b*h and b*(h+1) - a*h
for h = 0, 1, 2, ... until both sides have left the grid.
"""

from typing import Any, Dict
import logging

import numpy as np

from grid_utils.coords import checked_sub_coord, mark, scale
from grid_utils.points import frequency_points, same_frequency_pairs


def _mark_line(antinodes: np.ndarray, a, b) -> int:
    """
    Mark every in-bounds harmonic of the pair (a, b).

    h = 0 yields a and b themselves. Each further step moves one separation
    vector outward on both sides; the walk stops after the first step where
    neither side lands inside the grid.

    Returns:
      number of harmonic steps that marked at least one cell
    """
    assert a != b, f"pair endpoints must differ, got {a} twice"

    H, W = antinodes.shape
    steps = 0

    # A non-zero integer step leaves an H×W grid within max(H, W) moves.
    for harmonic in range(max(H, W) + 1):
        candidates = [
            checked_sub_coord(scale(a, harmonic + 1), scale(b, harmonic)),
            checked_sub_coord(scale(b, harmonic + 1), scale(a, harmonic)),
        ]

        any_added = False
        for coord in candidates:
            if coord is None:
                continue
            if mark(antinodes, coord):
                any_added = True

        if not any_added:
            break
        steps += 1

    return steps


def locate_grid(grid: np.ndarray) -> np.ndarray:
    """
    Harmonic antinode locator over a bare label grid.

    Input:
      grid: H×W object array (None = empty, otherwise a label)

    Output:
      antinodes: H×W bool array, fresh per call
    """
    antinodes = np.zeros(grid.shape, dtype=bool)

    points = frequency_points(grid)
    if len(points) <= 1:
        return antinodes

    for a, b in same_frequency_pairs(points):
        _mark_line(antinodes, a, b)

    return antinodes


def locate(present: Dict[str, Any], trace: bool = False) -> np.ndarray:
    """
    Stage: harmonics (part 2)

    Input:
      present: from 01_present.load
      trace: if True, log per-pair harmonic depth and the marked count.

    Output:
      antinodes: H×W bool array, same shape as present["grid"]
    """
    grid = present["grid"]

    if trace:
        logging.info(f"[harmonics] locate() called on shape={list(grid.shape)}")

    antinodes = locate_grid(grid)

    if trace:
        scratch = np.zeros(grid.shape, dtype=bool)
        for a, b in same_frequency_pairs(frequency_points(grid)):
            steps = _mark_line(scratch, a, b)
            logging.info(f"[harmonics] pair {a}-{b}: {steps} harmonic steps")
        logging.info(f"[harmonics] marked={int(np.count_nonzero(antinodes))}")

    return antinodes
