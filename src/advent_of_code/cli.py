#!/usr/bin/env python3
"""
Advent of Code runner

Usage:
    python -m advent_of_code input.txt --day 1              # Part one
    python -m advent_of_code input.txt --day 1 --part two   # Part two
    python -m advent_of_code input.txt -d 1 -p 2 --verbose  # Trace every rotation
"""

import argparse
import sys

from loguru import logger

from .config import ConfigError, load_settings
from .day1 import Part, day1
from .instructions import InstructionParseError
from .log import setup_logging

DAYS = {
    1: day1,
}


def part_arg(text):
    try:
        return Part.parse(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid part {text!r} (choose one or two)"
        ) from None


def day_arg(text):
    try:
        day = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid day {text!r}") from None
    if day not in DAYS:
        raise argparse.ArgumentTypeError("Please use a valid day")
    return day


def build_parser():
    parser = argparse.ArgumentParser(
        prog="advent-of-code",
        description="Solve an Advent of Code puzzle for the given input file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="Path to input file")
    parser.add_argument(
        "--day", "-d",
        type=day_arg,
        required=True,
        metavar="DAY",
        help="Which day to use",
    )
    parser.add_argument(
        "--part", "-p",
        type=part_arg,
        default=Part.ONE,
        metavar="PART",
        help="Which part to solve, one or two (default: one)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="TOML settings file (default: advent_of_code.toml if present)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every rotation of the dial",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (ConfigError, OSError) as e:
        setup_logging()
        logger.error(f"Could not load settings: {e}")
        sys.exit(1)

    level = "DEBUG" if args.verbose or settings.debug else settings.log_level
    try:
        setup_logging(level, settings.log_file)
    except OSError as e:
        logger.error(f"Could not open log file {settings.log_file}: {e}")
        sys.exit(1)

    solver = DAYS[args.day]
    try:
        result = solver(args.input, args.part)
    except (InstructionParseError, OSError) as e:
        logger.error(f"{e}")
        sys.exit(1)

    print(f"The answer to day {args.day}, input {args.input}, is: \n\t {result}")
