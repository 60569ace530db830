"""Day 1 - Rotation/Dial Problem"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable

from loguru import logger

from .dial import ZeroCounter
from .instructions import Instruction, load_instructions

INITIAL_POSITION: int = 50
N_POSITION: int = 100


class Part(Enum):
    ONE = "one"
    TWO = "two"

    @classmethod
    def parse(cls, text: str) -> Part:
        aliases = {"1": cls.ONE, "2": cls.TWO}
        text = text.strip().lower()
        if text in aliases:
            return aliases[text]
        return cls(text)


def solve(instructions: Iterable[Instruction]) -> ZeroCounter:
    counter = ZeroCounter(INITIAL_POSITION, N_POSITION)
    logger.debug(f"The dial starts by pointing at {INITIAL_POSITION}.")
    for instruction in instructions:
        counter.execute(instruction)
    return counter


def day1(filename: str | Path, part: Part) -> int:
    """Run the dial over the instructions in ``filename`` and return the password.

    Part one counts moves that end on zero; part two counts every time the
    dial touches zero, including during a move.
    """
    instructions = load_instructions(filename)

    if instructions:
        values = [instruction.value for instruction in instructions]
        logger.info(
            f"Number of rotations: {len(instructions)}; "
            f"max rotation: {max(values)}; min rotation: {min(values)}"
        )

    counter = solve(instructions)
    logger.info(
        f"Landed on zero {counter.landed_on_zero_count} times, "
        f"crossed zero {counter.crossed_zero_count} times"
    )

    if part is Part.ONE:
        return counter.landed_on_zero_count
    return counter.crossed_zero_count
