"""Day 1 - Rotation/Dial Problem

The dial has ``N_POSITION`` positions and starts at ``INITIAL_POSITION``.
Each rotation moves it left (towards lower numbers) or right. Two passwords
are counted over a whole sequence:

- landings: rotations that leave the dial pointing exactly at 0
- crossings: every click that brings the dial onto 0, full laps included
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

import numpy as np

INITIAL_POSITION: int = 50
N_POSITION: int = 100

INSTRUCTION_PATTERN = re.compile(r"^(?P<direction>[RL])(?P<magnitude>[0-9]+)$")


class InstructionParseError(ValueError):
    """Raised when a rotation line is not of the form ``L<n>`` / ``R<n>``."""

    def __init__(self, text: str, line_number: int | None = None):
        self.text = text
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}invalid rotation {text!r}")


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"

    @property
    def sign(self) -> int:
        match self:
            case Direction.LEFT:
                return -1
            case Direction.RIGHT:
                return 1


@dataclass(frozen=True)
class Instruction:
    direction: Direction
    magnitude: int

    def __post_init__(self):
        if self.magnitude < 0:
            raise ValueError(f"magnitude must be non-negative, got {self.magnitude}")

    @property
    def rotation(self) -> int:
        """Signed rotation: L prefix = negative, R prefix = positive."""
        return self.direction.sign * self.magnitude

    def __str__(self) -> str:
        return f"{self.direction.value}{self.magnitude}"


@dataclass(frozen=True)
class DialState:
    position: int = INITIAL_POSITION
    size: int = N_POSITION

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"dial size must be positive, got {self.size}")
        if not 0 <= self.position < self.size:
            raise ValueError(
                f"position {self.position} is outside the dial [0, {self.size})"
            )


@dataclass(frozen=True)
class Tallies:
    landings: int = 0
    crossings: int = 0

    def __add__(self, other: Tallies) -> Tallies:
        return Tallies(
            self.landings + other.landings, self.crossings + other.crossings
        )

    def __iter__(self):
        # Allows ``landings, crossings = simulate(...)``
        yield self.landings
        yield self.crossings


@dataclass(frozen=True)
class Step:
    """One move of the dial, as yielded by :func:`trace`."""

    instruction: Instruction
    state: DialState
    delta: Tallies
    totals: Tallies


def parse_instruction(text: str) -> Instruction:
    """Parse a single ``R48`` / ``L5`` style rotation."""
    match = INSTRUCTION_PATTERN.match(text.strip())
    if match is None:
        raise InstructionParseError(text)
    return Instruction(
        Direction(match.group("direction")), int(match.group("magnitude"))
    )


def parse_instructions(lines: Iterable[str]) -> List[Instruction]:
    """Parse rotation lines, skipping blanks and aborting on the first bad one."""
    instructions: List[Instruction] = []
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            instructions.append(parse_instruction(line))
        except InstructionParseError:
            raise InstructionParseError(line, line_number) from None
    return instructions


def count_crossings(position: int, instruction: Instruction, size: int = N_POSITION) -> int:
    """Closed-form count of the clicks in one move that point the dial at 0.

    Every full lap passes 0 exactly once. The remaining partial move reaches 0
    only if it is at least as long as the distance from ``position`` to 0 in
    the direction of travel; a dial already sitting on 0 has a full lap to go.
    """
    laps, rest = divmod(instruction.magnitude, size)
    if position == 0:
        return laps
    match instruction.direction:
        case Direction.RIGHT:
            distance_to_zero = size - position
        case Direction.LEFT:
            distance_to_zero = position
    return laps + (1 if rest >= distance_to_zero else 0)


def rotate(state: DialState, instruction: Instruction) -> Tuple[DialState, Tallies]:
    """Apply one rotation, returning the new state and the tallies it adds."""
    new_position = (state.position + instruction.rotation) % state.size
    delta = Tallies(
        landings=1 if new_position == 0 else 0,
        crossings=count_crossings(state.position, instruction, state.size),
    )
    return DialState(new_position, state.size), delta


def trace(
    instructions: Iterable[Instruction],
    start: int = INITIAL_POSITION,
    size: int = N_POSITION,
) -> Iterator[Step]:
    state = DialState(start, size)
    totals = Tallies()
    for instruction in instructions:
        state, delta = rotate(state, instruction)
        totals = totals + delta
        yield Step(instruction, state, delta, totals)


def simulate(
    instructions: Iterable[Instruction],
    start: int = INITIAL_POSITION,
    size: int = N_POSITION,
) -> Tallies:
    """Run every rotation from ``start`` and return the final tallies."""
    totals = Tallies()
    for step in trace(instructions, start, size):
        totals = step.totals
    return totals


def brute_force_rotate(
    state: DialState, instruction: Instruction
) -> Tuple[DialState, Tallies]:
    """Reference implementation of :func:`rotate` that turns the dial click by click."""
    clicks = np.arange(1, instruction.magnitude + 1, dtype=np.int64)
    positions = (state.position + instruction.direction.sign * clicks) % state.size
    new_position = int(positions[-1]) if positions.size else state.position
    delta = Tallies(
        landings=1 if new_position == 0 else 0,
        crossings=int(np.count_nonzero(positions == 0)),
    )
    return DialState(new_position, state.size), delta


def brute_force_simulate(
    instructions: Iterable[Instruction],
    start: int = INITIAL_POSITION,
    size: int = N_POSITION,
) -> Tallies:
    state = DialState(start, size)
    totals = Tallies()
    for instruction in instructions:
        state, delta = brute_force_rotate(state, instruction)
        totals = totals + delta
    return totals
