"""
02_antinodes: basic rule, reflect each antenna through its partner.

Stage: antinodes
For every same-frequency pair (a, b), marks 2a - b and 2b - a.
"""

from typing import Any, Dict, List
import logging

import numpy as np

from grid_utils.coords import Coord, checked_sub_coord, mark, scale
from grid_utils.points import frequency_points, same_frequency_pairs


def _reflections(a, b) -> List[Coord]:
    """2a - b and 2b - a, minus any that underflow."""
    candidates = [
        checked_sub_coord(scale(a, 2), b),
        checked_sub_coord(scale(b, 2), a),
    ]
    return [coord for coord in candidates if coord is not None]


def locate_grid(grid: np.ndarray) -> np.ndarray:
    """
    Basic antinode locator over a bare label grid.

    Input:
      grid: H×W object array (None = empty, otherwise a label)

    Output:
      antinodes: H×W bool array, fresh per call

    Candidates with a negative component are dropped; candidates past the
    bottom/right edge are ignored by mark().
    """
    antinodes = np.zeros(grid.shape, dtype=bool)

    points = frequency_points(grid)
    if len(points) <= 1:
        return antinodes

    for a, b in same_frequency_pairs(points):
        for coord in _reflections(a, b):
            mark(antinodes, coord)

    return antinodes


def locate(present: Dict[str, Any], trace: bool = False) -> np.ndarray:
    """
    Stage: antinodes (part 1)

    Input:
      present: from 01_present.load
      trace: if True, log pair and antinode counts.

    Output:
      antinodes: H×W bool array, same shape as present["grid"]
    """
    grid = present["grid"]

    if trace:
        logging.info(f"[antinodes] locate() called on shape={list(grid.shape)}")

    antinodes = locate_grid(grid)

    if trace:
        n_pairs = sum(1 for _ in same_frequency_pairs(frequency_points(grid)))
        logging.info(f"[antinodes] same-frequency pairs={n_pairs}")
        logging.info(f"[antinodes] marked={int(np.count_nonzero(antinodes))}")

    return antinodes
