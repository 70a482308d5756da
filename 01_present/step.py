"""
01_present: Load the antenna map into awareness.

Stage: present
Parses the input text into an immutable label grid (None = empty cell).
"""

from typing import Any, Dict, List, Optional
import logging

import numpy as np

from grid_utils.points import frequency_points, frequency_counts


def _to_grid(lines: List[str], empty: str) -> np.ndarray:
    """
    Convert text lines to a validated, read-only label grid.

    Validates:
    - All rows must have the same length

    Returns:
        np.ndarray[object] of shape (H, W); cells hold a 1-char label or None

    Raises:
        ValueError if rows are ragged
    """
    H = len(lines)
    W = len(lines[0]) if H > 0 else 0

    for r, line in enumerate(lines):
        if len(line) != W:
            raise ValueError(
                f"Grid must be rectangular: row {r} has length {len(line)}, expected {W}"
            )

    g = np.empty((H, W), dtype=object)
    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            g[r, c] = None if ch == empty else ch

    g.flags.writeable = False
    return g


def load(input_bundle: Dict[str, Any], trace: bool = False) -> Dict[str, Any]:
    """
    Stage: present (awareness)

    Input:
      input_bundle: {
        "name": str,         # where the text came from (file path or "<stdin>")
        "text": str,         # raw map text, one grid row per line
        "empty": str,        # optional, single-char empty marker (default ".")
      }
      trace: if True, log shape and frequency counts.

    Output:
      present: {
        "name": str,
        "grid": np.ndarray[object] (H, W), read-only,
        "shape": [H, W],
        "frequencies": [sorted distinct labels],
        "counts": {label: occupied cell count},
        "empty": str,
      }

    Raises:
      ValueError: if the empty marker is not a single character or rows are ragged
    """
    name = input_bundle.get("name", "<stdin>")
    text = input_bundle["text"]
    empty: Optional[str] = input_bundle.get("empty", ".")

    if trace:
        logging.info(f"[present] load() called for {name}")

    if empty is None or len(empty) != 1:
        raise ValueError(f"Empty marker must be a single character, got {empty!r}")

    grid = _to_grid(text.splitlines(), empty)
    H, W = grid.shape

    counts = frequency_counts(frequency_points(grid))
    frequencies = sorted(counts.keys())

    present = {
        "name": name,
        "grid": grid,
        "shape": [int(H), int(W)],
        "frequencies": frequencies,
        "counts": counts,
        "empty": empty,
    }

    if trace:
        logging.info(f"[present] shape={present['shape']}")
        logging.info(f"[present] frequencies={frequencies}")
        logging.info(f"[present] counts={counts}")

    return present
