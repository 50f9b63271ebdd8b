"""Day 1 - print both dial passwords for a puzzle input.

Run with:

    aoc-day1 day1_input.txt
    aoc-day1 --debug          # uses day1_input_test.txt and prints every move
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from advent_of_code.dial import (
    INITIAL_POSITION,
    N_POSITION,
    DialState,
    Instruction,
    Tallies,
    parse_instructions,
    trace,
)

INPUT_FILE = "day1_input.txt"
INPUT_TEST_FILE = "day1_input_test.txt"


def load_rotations(filename: str) -> List[Instruction]:
    """Load rotations from file. Blank lines are ignored."""
    with open(filename, "r", encoding="utf-8") as file:
        return parse_instructions(file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count how often the safe dial points at 0",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help=f"Puzzle input file (default: {INPUT_FILE}, or {INPUT_TEST_FILE} with --debug)",
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Print the dial position after every rotation",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=INITIAL_POSITION,
        help=f"Initial dial position (default: {INITIAL_POSITION})",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=N_POSITION,
        help=f"Number of positions on the dial (default: {N_POSITION})",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    input_file = args.input or (INPUT_TEST_FILE if args.debug else INPUT_FILE)

    try:
        DialState(args.start, args.size)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        rotations = load_rotations(input_file)
    except (OSError, ValueError) as e:
        # ValueError covers malformed rotations and undecodable bytes
        print(f"Error: {input_file}: {e}", file=sys.stderr)
        return 1

    print(f"Info - number of rotations: {len(rotations)}")
    if rotations:
        signed = [rotation.rotation for rotation in rotations]
        print(f"Info - max rotations: {max(signed)}; min rotations: {min(signed)}")

    print(f"The dial starts by pointing at {args.start}.")

    totals = Tallies()
    for step in trace(rotations, args.start, args.size):
        totals = step.totals
        if args.debug:
            print(
                f"The dial is rotated {step.instruction} to point at "
                f"{step.state.position} - passing 0 {step.delta.crossings} times."
            )

    print(f"Password [old]: {totals.landings} - [new]: {totals.crossings}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
