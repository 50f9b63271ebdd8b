#!/usr/bin/env python3
"""
Dial Crossing Correctness Verification

This script verifies that the closed-form crossing count used by the dial
simulator agrees with a click-by-click simulation, step by step, over a
deterministic random sequence of rotations.

Usage:
    python verify_correctness.py              # Verify with default settings
    python verify_correctness.py --verbose    # Show every step
    python verify_correctness.py --count 5000 --max-magnitude 1000
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import List

from advent_of_code.dial import (
    INITIAL_POSITION,
    N_POSITION,
    DialState,
    Direction,
    Instruction,
    Tallies,
    brute_force_rotate,
    rotate,
)

# Configuration
COUNT = 1000
MAX_MAGNITUDE = 500
SEED = 42


def generate_instructions(
    count: int = COUNT, max_magnitude: int = MAX_MAGNITUDE, seed: int = SEED
) -> List[Instruction]:
    """Generate a deterministic list of rotations, zero and multi-lap moves included."""
    rng = random.Random(seed)
    directions = list(Direction)
    return [
        Instruction(rng.choice(directions), rng.randint(0, max_magnitude))
        for _ in range(count)
    ]


class VerificationRunner:
    def __init__(self, verbose=False):
        self.verbose = verbose
        self.mismatches = []

    def run(
        self,
        instructions: List[Instruction],
        start: int = INITIAL_POSITION,
        size: int = N_POSITION,
    ) -> bool:
        """Step both implementations side by side and report any disagreement."""
        print("Dial Crossing Correctness Verification")
        print(f"Rotations: {len(instructions)}")
        print(f"Dial: {size} positions, starting at {start}\n")

        closed_state = reference_state = DialState(start, size)
        closed_totals = reference_totals = Tallies()
        self.mismatches = []

        for index, instruction in enumerate(instructions, start=1):
            previous = closed_state.position
            closed_state, closed_delta = rotate(closed_state, instruction)
            reference_state, reference_delta = brute_force_rotate(
                reference_state, instruction
            )
            closed_totals = closed_totals + closed_delta
            reference_totals = reference_totals + reference_delta

            if self.verbose:
                print(
                    f"  {index:>5}: {previous:>3} {str(instruction):>6} -> "
                    f"{closed_state.position:>3}  crossings={closed_delta.crossings}"
                )

            if (closed_state, closed_delta) != (reference_state, reference_delta):
                self.mismatches.append(index)
                if len(self.mismatches) == 1:
                    print(f"  ✗ First difference at step {index}: {previous} {instruction}")
                    print(f"    Closed form: {closed_state.position} {closed_delta}")
                    print(f"    Reference:   {reference_state.position} {reference_delta}")
                # Resync so later steps are compared from the same position
                closed_state = reference_state

        return self.report(closed_totals, reference_totals)

    def report(self, closed_totals: Tallies, reference_totals: Tallies) -> bool:
        print("\n" + "=" * 70)
        print("Correctness Verification Results")
        print("=" * 70)
        print(f"  Closed form: landings={closed_totals.landings} crossings={closed_totals.crossings}")
        print(f"  Reference:   landings={reference_totals.landings} crossings={reference_totals.crossings}")
        print("\n" + "=" * 70)

        if not self.mismatches and closed_totals == reference_totals:
            print("✓ CLOSED FORM MATCHES CLICK-BY-CLICK SIMULATION")
            print("=" * 70)
            return True
        else:
            print(f"✗ CORRECTNESS VERIFICATION FAILED ({len(self.mismatches)} mismatching steps)")
            print("=" * 70)
            return False


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Verify the closed-form dial crossing count",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show every rotation"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=COUNT,
        help=f"Number of rotations (default: {COUNT})"
    )
    parser.add_argument(
        "--max-magnitude",
        type=int,
        default=MAX_MAGNITUDE,
        help=f"Largest rotation magnitude (default: {MAX_MAGNITUDE})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=SEED,
        help=f"Random seed (default: {SEED})"
    )
    parser.add_argument(
        "--start",
        type=int,
        default=INITIAL_POSITION,
        help=f"Initial dial position (default: {INITIAL_POSITION})"
    )
    parser.add_argument(
        "--size",
        type=int,
        default=N_POSITION,
        help=f"Number of positions on the dial (default: {N_POSITION})"
    )

    args = parser.parse_args(argv)

    instructions = generate_instructions(args.count, args.max_magnitude, args.seed)
    runner = VerificationRunner(verbose=args.verbose)
    success = runner.run(instructions, start=args.start, size=args.size)

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
