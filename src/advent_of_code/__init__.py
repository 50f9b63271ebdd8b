"""Advent of Code puzzle solutions."""

from advent_of_code.dial import (
    Direction,
    DialState,
    Instruction,
    InstructionParseError,
    Tallies,
    parse_instruction,
    parse_instructions,
    simulate,
    trace,
)

__all__ = [
    "Direction",
    "DialState",
    "Instruction",
    "InstructionParseError",
    "Tallies",
    "parse_instruction",
    "parse_instructions",
    "simulate",
    "trace",
]
