"""
A parser for line-oriented personnel records.

Each line looks like:
```
<name> <age> <phone> <address>
Fred 32 123.456-1213# 301 cobblestone
```
- `name`: an upper case letter followed by letters.
- `age`: a natural number.
- `phone`: digits, dots or hyphens, starting with a digit and ending with `#`.
- `address`: a street number, a single space, then the street name.

The fields are separated by one or more spaces.
"""

from __future__ import annotations
from typing import Final, Sequence

from dataclasses import dataclass
import logging

import combparse.const as const
from combparse.main import Parser, exactly, zero_or_more, exactly_n
from combparse.general import digit, upper, alpha, space, natural, spaces1
from combparse.result import Result

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Address:
    number: int
    street: str

@dataclass(frozen=True)
class Person:
    name: str
    age: int
    phone: str
    address: Address


name: Parser[str] = upper.bind(
    lambda first: zero_or_more(alpha).map(lambda rest: first + "".join(rest))
)

phone: Parser[str] = digit.bind(
    lambda first: zero_or_more(digit | exactly(".") | exactly("-")).bind(
        lambda rest: exactly(const.PHONE_TERMINATOR).map(lambda _: first + "".join(rest))
    )
)
"""The terminating `#` is consumed, but isn't part of the value."""

address: Parser[Address] = natural.bind(
    lambda number: (space >> zero_or_more(alpha)).map(
        lambda street: Address(number, "".join(street))
    )
)

person: Parser[Person] = name.bind(
    lambda name_: spaces1 >> natural.bind(
        lambda age: spaces1 >> phone.bind(
            lambda phone_: spaces1 >> address.map(
                lambda address_: Person(name_, age, phone_, address_)
            )
        )
    )
)

_record: Parser[Person] = person.bind(
    lambda p: zero_or_more(exactly(const.RECORD_SEPARATOR)).map(lambda _: p)
)


def parse_all(lines: Sequence[str]) -> Result[list[Person]]:
    """
    Parses one record per line.

    Returns every record in order, or the failure of the first record that doesn't parse.

    ```
    parse_all(DATA)     # Ok([Person("Fred", 32, ...), ...])
    ```
    """
    log.debug("Parsing %d records.", len(lines))
    result = exactly_n(len(lines), _record).parse(const.RECORD_SEPARATOR.join(lines))
    if not result:
        log.debug("Record parsing failed: %s", result.fold(lambda error: error.describe(), repr))
    return result


DATA: Final[tuple[str, ...]] = (
    "Fred 32 123.456-1213# 301 cobblestone",
    "Barney 31 123.456.1214# 303 cobblestone",
    "Homer 39 555.123.939# 742 evergreen",
    "Flanders 39 555.123.939# 744 evergreen",
)
