"""
The typed failure reasons, and the exception used when a failure has to become an error.
"""

from __future__ import annotations
from typing import Final

from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    """
    Base of the closed set of failure reasons:
    - `NotANumber`
    - `InvalidOperation`
    - `UnexpectedInput`
    - `NotEnoughInput`

    Compared by value.
    """

    def describe(self) -> str:
        return type(self).__name__

@dataclass(frozen=True)
class NotANumber(Error):
    text: str

    def describe(self) -> str:
        return self.text

@dataclass(frozen=True)
class InvalidOperation(Error):
    text: str

    def describe(self) -> str:
        return self.text

@dataclass(frozen=True)
class UnexpectedInput(Error):
    """`text` is the offending token, usually a single character."""
    text: str

    def describe(self) -> str:
        return f"Unexpected input: {self.text!r}"

@dataclass(frozen=True)
class NotEnoughInput(Error):
    """The input ran out."""

    def describe(self) -> str:
        return "Not enough input."


NOT_ENOUGH_INPUT: Final[NotEnoughInput] = NotEnoughInput()


class ParseError(Exception):
    """
    Raised when a `Fail` is unwrapped.

    Parsers themselves never raise this, they return `Fail` values. Use `Result.unwrap()` at the edge of your program if you'd rather have an exception.
    """

    def __init__(self, error: Error) -> None:
        super().__init__(error.describe())
        self.error: Final[Error] = error
