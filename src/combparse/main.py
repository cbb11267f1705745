"""
The implementations of the main classes and combinators.
"""

from __future__ import annotations
from typing import Any, TypeVar, Generic, Callable, Sequence, Union

from dataclasses import dataclass

from combparse.errors import (
    Error,
    UnexpectedInput,
    NOT_ENOUGH_INPUT,
)
from combparse.result import Result, Ok, Fail


_T = TypeVar("_T")
_U = TypeVar("_U")



@dataclass(frozen=True)
class ParseState(Generic[_T]):
    """
    The remaining input, and the value that was parsed from the consumed part.

    `input` is always a suffix of the string that was fed into the parser.
    """
    input: str
    value: _T


class Parser(Generic[_T]):
    """
    Wraps a function from the input string to a `Result` of a `ParseState`.

    Parsers hold no state, so they can be reused and shared freely. Every combinator returns a new parser.

    ```
    p = natural.bind(lambda n: exactly(",").and_then(natural).map(lambda m: (n, m)))
    p.run("12,34 rest")     # Ok(ParseState(" rest", (12, 34)))
    ```

    When used for typing: `Parser[ValueType]`
    """

    def __init__(self, run: Callable[[str], Result[ParseState[_T]]]) -> None:
        self._run: Callable[[str], Result[ParseState[_T]]] = run

    def run(self, input: str) -> Result[ParseState[_T]]:
        """Runs the parser on the input."""
        return self._run(input)

    def parse(self, input: str) -> Result[_T]:
        """Runs the parser on the input, and discards the remaining input."""
        return self._run(input).map(lambda state: state.value)

    def map(self, f: Callable[[_T], _U]) -> Parser[_U]:
        """
        Applies `f` to the parsed value. The remaining input stays the same.

        ```
        any_char.map(str.upper).run("hello")    # Ok(ParseState("ello", "H"))
        ```
        """
        return Parser(lambda input: self._run(input).map(
            lambda state: ParseState(state.input, f(state.value))
        ))

    def bind(self, f: Callable[[_T], Parser[_U]]) -> Parser[_U]:
        """
        Runs this parser, then feeds its value into `f` and runs the returned parser on the remaining input.

        If this parser fails, its failure is returned and `f` is never called.
        """
        def inner(input: str) -> Result[ParseState[_U]]:
            match self._run(input):
                case Ok(state):
                    return f(state.value).run(state.input)
                case failure:
                    return Fail(failure.error)
        return Parser(inner)

    def and_then(self, next: ParserParam[_U]) -> Parser[_U]:
        """
        Runs this parser, discards its value, then runs `next` on the remaining input.

        `next` can be a parser, or a function with no parameters that returns one. (For recursive grammars.)

        Same as `self >> next`.
        """
        get_next = convert_parser_parameter(next)
        return self.bind(lambda _: get_next())

    def or_else(self, alt: ParserParam[_T]) -> Parser[_T]:
        """
        Choice. Runs this parser, and if it fails, runs `alt` on the same input.

        A failed branch never consumes input. If both fail, the failure of this parser (the first one) is returned.

        `alt` can be a parser, or a function with no parameters that returns one. It's only evaluated if this parser fails.

        Same as `self | alt`.
        """
        get_alt = convert_parser_parameter(alt)
        def inner(input: str) -> Result[ParseState[_T]]:
            first = self._run(input)
            if first:
                return first
            second = get_alt().run(input)
            return second if second else first
        return Parser(inner)

    def __rshift__(self, next: ParserParam[_U]) -> Parser[_U]:
        return self.and_then(next)

    def __or__(self, alt: ParserParam[_T]) -> Parser[_T]:
        return self.or_else(alt)

    def __repr__(self) -> str:
        return f"<Parser {getattr(self._run, '__qualname__', self._run)!r}>"


ParserParam = Union[Parser[_T], Callable[[], Parser[_T]]]

def convert_parser_parameter(parser: ParserParam[_T]) -> Callable[[], Parser[_T]]:
    if isinstance(parser, Parser):
        return lambda: parser
    else:
        assert callable(parser)
        return parser



# primitives

def always(value: _T) -> Parser[_T]:
    """
    Always succeeds with the value. Consumes nothing.

    ```
    always(5).run("hello")      # Ok(ParseState("hello", 5))
    ```
    """
    return Parser(lambda input: Ok(ParseState(input, value)))

def never(error: Error) -> Parser[Any]:
    """
    Always fails with the error. Consumes nothing.

    ```
    never(NOT_ENOUGH_INPUT).run("hello")    # Fail(NotEnoughInput())
    ```
    """
    return Parser(lambda input: Fail(error))

def _any_char(input: str) -> Result[ParseState[str]]:
    if not input:
        return Fail(NOT_ENOUGH_INPUT)
    return Ok(ParseState(input[1:], input[0]))

any_char: Parser[str] = Parser(_any_char)
"""
Takes one character off the input. Fails with `NotEnoughInput` if the input is empty.

```
any_char.run("hello")   # Ok(ParseState("ello", "h"))
```
"""

def satisfying(predicate: Callable[[str], bool]) -> Parser[str]:
    """
    Takes one character off the input if it satisfies the predicate.

    Fails with `UnexpectedInput` carrying the character if it doesn't, or with `NotEnoughInput` if the input is empty.

    ```
    satisfying(str.isdecimal).run("1hello")     # Ok(ParseState("hello", "1"))
    satisfying(str.isdecimal).run("hello")      # Fail(UnexpectedInput("h"))
    ```
    """
    def inner(input: str) -> Result[ParseState[str]]:
        match _any_char(input):
            case Ok(state):
                if predicate(state.value):
                    return Ok(state)
                return Fail(UnexpectedInput(state.value))
            case failure:
                return failure
    return Parser(inner)

def exactly(char: str) -> Parser[str]:
    """
    Takes one character off the input if it's equal to `char`.

    ```
    exactly("h").run("hello")   # Ok(ParseState("ello", "h"))
    ```
    """
    if len(char) != 1:
        raise ValueError("Expected a single character.")
    return satisfying(lambda c: c == char)



# derived combinators

def zero_or_more(parser: Parser[_T]) -> Parser[list[_T]]:
    """
    Runs the parser repeatedly until it fails. Never fails.

    Every successful run of `parser` must consume input, otherwise this never stops.

    ```
    zero_or_more(any_char).run("hello")     # Ok(ParseState("", ["h", "e", "l", "l", "o"]))
    zero_or_more(any_char).run("")          # Ok(ParseState("", []))
    ```
    """
    def inner(input: str) -> Result[ParseState[list[_T]]]:
        values: list[_T] = []
        while True:
            match parser.run(input):
                case Ok(state):
                    values.append(state.value)
                    input = state.input
                case _:
                    return Ok(ParseState(input, values))
    return Parser(inner)

def one_or_more(parser: Parser[_T]) -> Parser[list[_T]]:
    """
    Runs the parser at least once, then repeatedly until it fails.

    Fails with `NotEnoughInput` if the input is empty, or with the parser's failure if the first run fails.

    ```
    one_or_more(any_char).run("hello")      # Ok(ParseState("", ["h", "e", "l", "l", "o"]))
    one_or_more(any_char).run("")           # Fail(NotEnoughInput())
    ```
    """
    rest = zero_or_more(parser)
    repeated = parser.bind(lambda first: rest.map(lambda others: [first, *others]))
    def inner(input: str) -> Result[ParseState[list[_T]]]:
        if not input:
            return Fail(NOT_ENOUGH_INPUT)
        return repeated.run(input)
    return Parser(inner)

def sequence_of(parsers: Sequence[Parser[_T]]) -> Parser[list[_T]]:
    """
    Runs the parsers in order, each on the input the previous one left. Produces the list of their values.

    Fails with the failure of the first parser that fails.

    ```
    sequence_of([any_char, any_char, any_char]).run("hello")            # Ok(ParseState("lo", ["h", "e", "l"]))
    sequence_of([any_char, never(NOT_ENOUGH_INPUT), any_char]).run("hello")   # Fail(NotEnoughInput())
    ```
    """
    parsers = tuple(parsers)
    def inner(input: str) -> Result[ParseState[list[_T]]]:
        values: list[_T] = []
        for parser in parsers:
            match parser.run(input):
                case Ok(state):
                    values.append(state.value)
                    input = state.input
                case failure:
                    return Fail(failure.error)
        return Ok(ParseState(input, values))
    return Parser(inner)

def exactly_n(n: int, parser: Parser[_T]) -> Parser[list[_T]]:
    """
    Runs the parser exactly `n` times.

    ```
    exactly_n(5, any_char).run("hello")     # Ok(ParseState("", ["h", "e", "l", "l", "o"]))
    exactly_n(6, any_char).run("hello")     # Fail(NotEnoughInput())
    ```
    """
    if n < 0:
        raise ValueError("The count can't be negative.")
    return sequence_of([parser] * n)
