"""Advent of Code solutions."""

from .day1 import INITIAL_POSITION, N_POSITION, Part, solve
from .dial import Dial, ZeroCounter
from .instructions import (
    Direction,
    DirectionParseError,
    Instruction,
    InstructionParseError,
    load_instructions,
    parse_instructions,
)

__all__ = [
    "INITIAL_POSITION",
    "N_POSITION",
    "Dial",
    "Direction",
    "DirectionParseError",
    "Instruction",
    "InstructionParseError",
    "Part",
    "ZeroCounter",
    "load_instructions",
    "parse_instructions",
    "solve",
]
