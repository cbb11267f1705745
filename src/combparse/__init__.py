"""
A small parser combinator library.

See the objects for more explanations.

See the `combparse.general` and `combparse.records` modules for parsers you can use as examples.

Defining parsers:
```
pair: Parser[tuple[int, int]] = natural.bind(
    lambda n: (exactly(",") >> natural).map(lambda m: (n, m))
)
```

Using parsers:
```
result = pair.run("12,34 rest")
if result:
    ... # `result` is an `Ok` object, `result.value` is a `ParseState`
else:
    ... # `result` is a `Fail` object, `result.error` is the reason
```

Failures are values. `Result.unwrap()` raises a `ParseError` if you'd rather have an exception.
"""

import combparse.const as const
import combparse.errors
from combparse.errors import (
    Error,
    NotANumber,
    InvalidOperation,
    UnexpectedInput,
    NotEnoughInput,
    NOT_ENOUGH_INPUT,
    ParseError,
)
import combparse.result
from combparse.result import (
    Result,
    Ok,
    Fail,
    sequence,
)
import combparse.main
from combparse.main import (
    ParseState,
    Parser,
    always,
    never,
    any_char,
    satisfying,
    exactly,
    zero_or_more,
    one_or_more,
    sequence_of,
    exactly_n,
)
import combparse.general as general
from combparse.general import (
    digit,
    lower,
    upper,
    alpha,
    space,
    natural,
    spaces1,
)
import combparse.records as records
