"""
04_render: print the maps and count antinodes.

Stage: render
Turns label and antinode grids back into text and tallies part 1 / part 2.
"""

from typing import Any, Callable, Dict
import logging

import numpy as np


def _grid_to_str(grid: np.ndarray, cell_fn: Callable[[Any], str]) -> str:
    """One line per row, each terminated by a newline."""
    H, W = grid.shape
    lines = []
    for r in range(H):
        lines.append("".join(cell_fn(grid[r, c]) for c in range(W)) + "\n")
    return "".join(lines)


def render_labels(grid: np.ndarray, empty: str = ".") -> str:
    return _grid_to_str(grid, lambda cell: empty if cell is None else str(cell))


def render_antinodes(antinodes: np.ndarray, mark: str = "#", empty: str = ".") -> str:
    return _grid_to_str(antinodes, lambda cell: mark if cell else empty)


def count(antinodes: np.ndarray) -> int:
    """Number of marked cells."""
    return int(np.count_nonzero(antinodes))


def report(present: Dict[str, Any], antinodes: np.ndarray,
           harmonics: np.ndarray, trace: bool = False) -> Dict[str, Any]:
    """
    Stage: render

    Input:
      present: from 01_present.load
      antinodes: from 02_antinodes.locate (may be None if part 1 was skipped)
      harmonics: from 03_harmonics.locate (may be None if part 2 was skipped)
      trace: if True, log both counts.

    Output:
      {
        "input_text": str,
        "part1": int or None,
        "part1_text": str or None,
        "part2": int or None,
        "part2_text": str or None,
      }
    """
    if trace:
        logging.info("[render] report() called")

    result = {
        "input_text": render_labels(present["grid"], present.get("empty", ".")),
        "part1": None,
        "part1_text": None,
        "part2": None,
        "part2_text": None,
    }

    if antinodes is not None:
        result["part1"] = count(antinodes)
        result["part1_text"] = render_antinodes(antinodes)

    if harmonics is not None:
        result["part2"] = count(harmonics)
        result["part2_text"] = render_antinodes(harmonics)

    if trace:
        logging.info(f"[render] part1={result['part1']} part2={result['part2']}")

    return result
