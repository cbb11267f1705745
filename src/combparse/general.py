"""
General purpose parsers, built from the combinators. Can also be used as examples.
"""

from __future__ import annotations

import combparse.const as const
from combparse.errors import NotANumber
from combparse.main import Parser, always, never, satisfying, one_or_more

# characters

digit: Parser[str] = satisfying(str.isdecimal)
"""
```
digit.run("123hello")   # Ok(ParseState("23hello", "1"))
digit.run("hello")      # Fail(UnexpectedInput("h"))
```
"""

lower: Parser[str] = satisfying(str.islower)
upper: Parser[str] = satisfying(str.isupper)

alpha: Parser[str] = lower | upper
"""
```
alpha.run("hello")      # Ok(ParseState("ello", "h"))
alpha.run("?hello")     # Fail(UnexpectedInput("?"))
```
"""

space: Parser[str] = satisfying(const.is_space)
"""A single space separator character. Doesn't match tabs or line breaks."""

# runs

def _to_natural(digits: list[str]) -> Parser[int]:
    text = "".join(digits)
    try:
        return always(int(text))
    except ValueError:
        # longer than the interpreter's int conversion limit
        return never(NotANumber(text))

natural: Parser[int] = one_or_more(digit).bind(_to_natural)
"""
Zero or a positive integer.

Fails with `NotANumber` if the digit run is too long to convert.

```
natural.run("123hello")     # Ok(ParseState("hello", 123))
natural.run("hello")        # Fail(UnexpectedInput("h"))
```
"""

spaces1: Parser[str] = one_or_more(space).map("".join)
"""
One or more spaces, up to the first non-space.

```
spaces1.run("    hello")    # Ok(ParseState("hello", "    "))
spaces1.run("hello")        # Fail(UnexpectedInput("h"))
```
"""
