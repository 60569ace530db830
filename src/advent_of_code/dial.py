"""Day 1 - circular dial simulation and zero counting."""

from __future__ import annotations

from loguru import logger

from .instructions import Direction, Instruction


class Dial:
    def __init__(self, position: int, modulus: int):
        if modulus <= 0:
            raise ValueError(f"modulus must be positive, got {modulus}")
        self.modulus = modulus
        # Python's % is floor modulo, so negative values wrap correctly
        self.position = position % modulus

    def apply(self, direction: Direction, value: int) -> None:
        if direction is Direction.LEFT:
            self.position = (self.position - value) % self.modulus
        else:
            self.position = (self.position + value) % self.modulus

    def ticks_to_first_zero(self, direction: Direction) -> int:
        """Single steps needed to reach 0 moving in ``direction``.

        Standing on 0 counts as a full revolution away, never 0 ticks.
        """
        if direction is Direction.LEFT:
            ticks = self.position
        else:
            ticks = (self.modulus - self.position) % self.modulus
        return ticks if ticks else self.modulus

    def count_zero_crossings(self, direction: Direction, value: int) -> int:
        """How often a move of ``value`` from the current position touches 0."""
        ticks = self.ticks_to_first_zero(direction)
        if value < ticks:
            return 0
        return 1 + (value - ticks) // self.modulus

    def __repr__(self) -> str:
        return f"Dial(position={self.position}, modulus={self.modulus})"


class ZeroCounter:
    """A dial plus the two zero counters accumulated while moving it."""

    def __init__(self, position: int, modulus: int):
        self.dial = Dial(position, modulus)
        self.landed_on_zero_count = 0
        self.crossed_zero_count = 0

    def execute(self, instruction: Instruction) -> None:
        direction, value = instruction.direction, instruction.value

        # crossings must be counted against the position before the move
        self.crossed_zero_count += self.dial.count_zero_crossings(direction, value)
        self.dial.apply(direction, value)
        if self.dial.position == 0:
            self.landed_on_zero_count += 1

        logger.debug(
            f"The dial is rotated {instruction} to point at {self.dial.position}."
        )

    @property
    def position(self) -> int:
        return self.dial.position
