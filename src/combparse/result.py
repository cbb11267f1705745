"""
The `Result` type: either `Ok(value)` or `Fail(error)`.

Failures are values. Nothing in here raises, except `Result.unwrap()`.

```
r = integer("12")
if r:
    ... # `r` is an `Ok` object
else:
    ... # `r` is a `Fail` object
```
"""

from __future__ import annotations
from typing import Any, Literal, TypeVar, Generic, Callable, Iterable

from dataclasses import dataclass

from combparse.errors import (
    Error,
    NotANumber,
    InvalidOperation,
    UnexpectedInput,
    NOT_ENOUGH_INPUT,
    ParseError,
)


_T = TypeVar("_T")
_U = TypeVar("_U")
_X = TypeVar("_X")



class Result(Generic[_T]):
    """
    Don't instantiate directly. Use `Ok`, `Fail` or the constructor functions of this module.

    When used for typing: `Result[ValueType]`
    """

    def fold(self, on_fail: Callable[[Error], _X], on_ok: Callable[[_T], _X]) -> _X:
        """Applies exactly one of the functions, depending on the variant."""
        match self:
            case Ok(value):
                return on_ok(value)
            case Fail(error):
                return on_fail(error)

    def map(self, f: Callable[[_T], _U]) -> Result[_U]:
        """
        `Ok(v)` becomes `Ok(f(v))`. A `Fail` is returned as-is.

        ```
        Ok(1).map(lambda x: x + 10)             # Ok(11)
        ```
        """
        return self.fold(Fail, lambda value: Ok(f(value)))

    def bind(self, f: Callable[[_T], Result[_U]]) -> Result[_U]:
        """
        `Ok(v)` becomes `f(v)`. A `Fail` short-circuits, `f` is never called.

        ```
        Ok(1).bind(lambda x: Ok(x + 10))        # Ok(11)
        Ok(1).bind(lambda x: not_enough_input())  # Fail(NotEnoughInput())
        ```
        """
        return self.fold(Fail, f)

    def get_or_else(self, default: Callable[[], _T]) -> _T:
        """
        The value of an `Ok`, otherwise `default()`.

        `default` is only called on a `Fail`.
        """
        return self.fold(lambda _: default(), lambda value: value)

    def or_else(self, alternative: Callable[[], Result[_T]]) -> Result[_T]:
        """
        Choice. This result if it's an `Ok`, otherwise `alternative()` if that's an `Ok`.

        If both fail, the first failure is kept and the alternative's failure is discarded.

        ```
        Ok(1).or_else(lambda: Ok(10))                                   # Ok(1)
        not_enough_input().or_else(lambda: Ok(10))                      # Ok(10)
        not_enough_input().or_else(lambda: unexpected_input("?"))       # Fail(NotEnoughInput())
        ```
        """
        if self:
            return self
        other = alternative()
        return other if other else self

    def unwrap(self) -> _T:
        """The value of an `Ok`. Raises a `ParseError` for a `Fail`."""
        def raise_error(error: Error) -> _T:
            raise ParseError(error)
        return self.fold(raise_error, lambda value: value)

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_fail(self) -> bool:
        return isinstance(self, Fail)

@dataclass(frozen=True)
class Ok(Result[_T]):
    value: _T

    def __bool__(self) -> Literal[True]:
        return True

@dataclass(frozen=True)
class Fail(Result[_T]):
    error: Error

    def __bool__(self) -> Literal[False]:
        return False



def ok(value: _T) -> Result[_T]:
    return Ok(value)

def fail(error: Error) -> Result[Any]:
    return Fail(error)

def not_a_number(text: str) -> Result[Any]:
    return Fail(NotANumber(text))

def invalid_operation(text: str) -> Result[Any]:
    return Fail(InvalidOperation(text))

def unexpected_input(text: str) -> Result[Any]:
    return Fail(UnexpectedInput(text))

def not_enough_input() -> Result[Any]:
    return Fail(NOT_ENOUGH_INPUT)


def sequence(results: Iterable[Result[_T]]) -> Result[list[_T]]:
    """
    Turns a sequence of results into a result of a list.

    `Ok` with every value in the original order if all of them are `Ok`, otherwise the leftmost `Fail`.

    ```
    sequence([Ok(1), Ok(2), Ok(3)])                     # Ok([1, 2, 3])
    sequence([Ok(1), not_enough_input(), Ok(3)])        # Fail(NotEnoughInput())
    ```
    """
    values: list[_T] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Fail(error):
                return Fail(error)
    return Ok(values)
