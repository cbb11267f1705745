"""
The world's most trivial calculator, built on `Result`.

```
python -m combparse.calculator + 2 3        # result: 5
python -m combparse.calculator / 2 3        # failed: / isn't a valid operation
```
"""

from __future__ import annotations
from typing import Sequence

import argparse
import enum
import logging
import sys

from combparse.result import Result, Ok, not_a_number, invalid_operation, not_enough_input

log = logging.getLogger(__name__)


class Operation(enum.Enum):
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"


def integer(text: str) -> Result[int]:
    """
    Fails with `NotANumber` if the text isn't an integer.

    Only an optional sign followed by decimal digits is accepted. No surrounding whitespace, no `_` separators.
    """
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits.isdecimal():
        return not_a_number(f"{text} is not a number")
    try:
        return Ok(int(text))
    except ValueError:
        # longer than the interpreter's int conversion limit
        return not_a_number(f"{text} is not a number")

def operation(text: str) -> Result[Operation]:
    """Fails with `InvalidOperation` if the text isn't one of `+`, `-` or `*`."""
    try:
        return Ok(Operation(text))
    except ValueError:
        return invalid_operation(f"{text} isn't a valid operation")

def calculate(op: Operation, n: int, m: int) -> int:
    match op:
        case Operation.PLUS:
            return n + m
        case Operation.MINUS:
            return n - m
        case Operation.MULTIPLY:
            return n * m

def attempt(op: str, n: str, m: str) -> Result[int]:
    """Parses the operation, then `n`, then `m`, and calculates. The first failure wins."""
    return operation(op).bind(
        lambda op_: integer(n).bind(
            lambda n_: integer(m).map(
                lambda m_: calculate(op_, n_, m_)
            )
        )
    )

def run(args: Sequence[str]) -> Result[int]:
    """Expects exactly `[operation, n, m]`, otherwise fails with `NotEnoughInput`."""
    match list(args):
        case [op, n, m]:
            return attempt(op, n, m)
        case _:
            return not_enough_input()

def render(result: Result[int]) -> str:
    return result.fold(
        lambda error: f"failed: {error.describe()}",
        lambda value: f"result: {value}",
    )


def build_parser() -> argparse.ArgumentParser:
    """
    Only the options are declared. The operands are collected with `parse_known_args()`, so operands like `-x` or `-1e5` reach `run()` in order instead of being rejected as unknown options.
    """
    parser = argparse.ArgumentParser(
        prog="combparse-calc",
        usage="%(prog)s [-h] [--log-level LEVEL] OPERATION N M",
        description="Compute `n <operation> m`. The operation is one of +, - or *.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser

def main(argv: Sequence[str] | None = None) -> int:
    ns, operands = build_parser().parse_known_args(argv)
    logging.basicConfig(level=ns.log_level)
    log.debug("Calculator arguments: %r", operands)
    result = run(operands)
    print(render(result))
    return 0 if isinstance(result, Ok) else 1


if __name__ == "__main__":
    sys.exit(main())
