#!/usr/bin/env python3
"""
run.py: orchestrator for the antinode locator.

Wires the four stages:
  present → antinodes → harmonics → render

Zero algorithmic logic; pure sequencing.
"""

import argparse
import logging
import sys
from pathlib import Path

# Note: Python module names cannot start with digits, so we use importlib
import importlib.util

def _import_stage_step(stage_name):
    """Helper to import step.py from stages with numeric prefixes."""
    spec = importlib.util.spec_from_file_location(
        f"{stage_name}.step",
        Path(__file__).parent / stage_name / "step.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

# Load stage modules
_present = _import_stage_step("01_present")
_antinodes = _import_stage_step("02_antinodes")
_harmonics = _import_stage_step("03_harmonics")
_render = _import_stage_step("04_render")

# Extract stage functions
load_present = _present.load
locate_antinodes = _antinodes.locate
locate_harmonics = _harmonics.locate
build_report = _render.report


def run_pipeline(text: str, name: str = "<stdin>", empty: str = ".",
                 parts=(1, 2), trace: bool = False):
    """
    Execute the pipeline on one antenna map.

    Args:
        text: raw map text
        name: label for logging (file path or "<stdin>")
        empty: single-character empty-cell marker
        parts: which locators to run (1 = basic, 2 = harmonic)
        trace: enable debug logging

    Returns:
        report dict from 04_render.report

    Raises:
        ValueError: if the map is not rectangular or the empty marker is invalid
    """
    input_bundle = {
        "name": name,
        "text": text,
        "empty": empty,
    }

    if trace:
        logging.info("[present] parsing map")
    present = load_present(input_bundle, trace=trace)

    antinodes = None
    if 1 in parts:
        if trace:
            logging.info("[antinodes] locating basic antinodes")
        antinodes = locate_antinodes(present, trace=trace)

    harmonics = None
    if 2 in parts:
        if trace:
            logging.info("[harmonics] locating harmonic antinodes")
        harmonics = locate_harmonics(present, trace=trace)

    return build_report(present, antinodes, harmonics, trace=trace)


def format_report(report, counts_only: bool = False) -> str:
    """Lay out the report the way the CLI prints it."""
    out = []
    if not counts_only:
        out.append(f"input arr:\n{report['input_text']}")

    if report["part1"] is not None:
        if not counts_only:
            out.append(f"antinodes:\n{report['part1_text']}")
        out.append(f"part 1: {report['part1']}")

    if report["part2"] is not None:
        if not counts_only:
            out.append(f"antinodes with harmonics:\n{report['part2_text']}")
        out.append(f"part 2: {report['part2']}")

    return "\n".join(out)


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Antinode locator (basic and harmonic antenna alignment)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py < input.txt
  python run.py --input data/input.txt --part 2 --counts-only
  python run.py --input data/input.txt --empty _ --trace
        """,
    )

    parser.add_argument(
        "--input",
        default=None,
        help="Path to the map text (default: read standard input)",
    )

    parser.add_argument(
        "--empty",
        default=".",
        help="Character marking an empty cell (default: .)",
    )

    parser.add_argument(
        "--part",
        type=int,
        choices=[1, 2],
        default=None,
        help="Run only part 1 (basic) or part 2 (harmonic) (default: both)",
    )

    parser.add_argument(
        "--counts-only",
        action="store_true",
        help="Print only the antinode counts, not the grids",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    # Configure logging
    if args.trace:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
        )

    parts = (args.part,) if args.part is not None else (1, 2)

    try:
        if args.input is None:
            name = "<stdin>"
            text = sys.stdin.read()
        else:
            input_file = Path(args.input)
            if not input_file.exists():
                raise FileNotFoundError(f"Input file not found: {args.input}")
            name = args.input
            text = input_file.read_text()

        report = run_pipeline(text, name=name, empty=args.empty,
                              parts=parts, trace=args.trace)
        print(format_report(report, counts_only=args.counts_only))

    except Exception as e:
        logging.error(f"Pipeline error: {e}")
        raise


if __name__ == "__main__":
    main()
