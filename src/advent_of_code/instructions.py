"""Day 1 - parse dial rotation instructions such as ``L68`` or ``R48``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DirectionParseError(ValueError):
    """Raised when the leading letter of an instruction is not L or R."""

    def __init__(self, text: str):
        super().__init__(f"Unable to parse direction: {text!r}")
        self.text = text


class InstructionParseError(ValueError):
    """Raised for a line that is not ``<direction><non-negative int>``."""

    def __init__(self, line: str, line_number: int | None = None):
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Unable to parse instruction{where}: {line!r}")
        self.line = line
        self.line_number = line_number


def _is_integer(text: str) -> bool:
    # stricter than int(), which also takes "1_0", " 5" and non-ASCII digits
    digits = text[1:] if text[:1] in ("+", "-") else text
    return digits.isascii() and digits.isdigit()


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def parse(cls, text: str) -> Direction:
        try:
            return cls(text.upper())
        except ValueError:
            raise DirectionParseError(text) from None


@dataclass(frozen=True)
class Instruction:
    direction: Direction
    value: int

    @classmethod
    def parse(cls, line: str) -> Instruction:
        """Parse one instruction. Negative magnitudes are rejected."""
        if len(line) < 2:
            raise InstructionParseError(line)

        dir_str, val_str = line[:1], line[1:]
        try:
            direction = Direction.parse(dir_str)
            if not _is_integer(val_str):
                raise ValueError(f"invalid magnitude: {val_str!r}")
            value = int(val_str)
        except ValueError as exc:
            raise InstructionParseError(line) from exc

        if value < 0:
            raise InstructionParseError(line)
        return cls(direction, value)

    def __str__(self) -> str:
        return f"{self.direction.value}{self.value}"


def parse_instructions(text: str) -> list[Instruction]:
    """Parse every non-empty line of ``text`` in order.

    The first bad line aborts the whole parse; the raised
    InstructionParseError carries its 1-based line number.
    """
    instructions: list[Instruction] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            instructions.append(Instruction.parse(line))
        except InstructionParseError as exc:
            raise InstructionParseError(line, line_number) from exc
    return instructions


def load_instructions(filename: str | Path) -> list[Instruction]:
    with open(filename, "r", encoding="utf-8") as file:
        try:
            text = file.read()
        except UnicodeDecodeError as exc:
            raise OSError(f"{filename} is not valid UTF-8: {exc}") from exc
    return parse_instructions(text)
