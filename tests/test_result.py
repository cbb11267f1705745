from __future__ import annotations

from typing import Any, Callable

from hypothesis import given
from hypothesis import strategies as st
import pytest

from combparse.errors import (
    NOT_ENOUGH_INPUT,
    Error,
    InvalidOperation,
    NotANumber,
    NotEnoughInput,
    ParseError,
    UnexpectedInput,
)
from combparse.result import (
    Fail,
    Ok,
    Result,
    fail,
    invalid_operation,
    not_a_number,
    not_enough_input,
    ok,
    sequence,
    unexpected_input,
)

pytestmark = pytest.mark.unit

errors: st.SearchStrategy[Error] = st.one_of(
    st.builds(NotANumber, st.text()),
    st.builds(InvalidOperation, st.text()),
    st.builds(UnexpectedInput, st.text(max_size=1)),
    st.just(NOT_ENOUGH_INPUT),
)
results: st.SearchStrategy[Result[int]] = st.one_of(
    st.builds(Ok, st.integers()),
    st.builds(Fail, errors),
)


def _halve(x: int) -> Result[int]:
    return Ok(x // 2) if x % 2 == 0 else Fail(NotANumber(f"{x} is odd"))


def _positive(x: int) -> Result[int]:
    return Ok(x) if x > 0 else Fail(UnexpectedInput(str(x)))


def _always_fails(x: int) -> Result[int]:
    return Fail(NOT_ENOUGH_INPUT)


binders: st.SearchStrategy[Callable[[int], Result[int]]] = st.sampled_from(
    [_halve, _positive, _always_fails, lambda x: Ok(x + 1)]
)


def _explode(*_: Any) -> Any:
    raise AssertionError("should not be evaluated")


# fold


def test_fold_applies_ok_function_to_ok() -> None:
    assert Ok(1).fold(lambda _: 0, lambda x: x) == 1


def test_fold_applies_fail_function_to_fail() -> None:
    assert Fail(NOT_ENOUGH_INPUT).fold(lambda _: 0, lambda x: x) == 0


# map


@given(results)
def test_map_identity_law(r: Result[int]) -> None:
    assert r.map(lambda x: x) == r


@given(results)
def test_map_composition_law(r: Result[int]) -> None:
    def f(x: int) -> int:
        return x * 3

    def g(x: int) -> str:
        return str(x)

    assert r.map(lambda x: g(f(x))) == r.map(f).map(g)


def test_map_transforms_ok_value() -> None:
    assert Ok(1).map(lambda x: x + 10) == Ok(11)


@given(errors)
def test_map_leaves_fail_untouched(error: Error) -> None:
    assert Fail(error).map(_explode) == Fail(error)


# bind


@given(results, binders, binders)
def test_bind_associativity_law(
    r: Result[int],
    f: Callable[[int], Result[int]],
    g: Callable[[int], Result[int]],
) -> None:
    assert r.bind(f).bind(g) == r.bind(lambda v: f(v).bind(g))


def test_bind_chains_ok() -> None:
    assert Ok(1).bind(lambda x: Ok(x + 10)) == Ok(11)
    assert Ok(1).bind(lambda x: not_enough_input()) == Fail(NOT_ENOUGH_INPUT)


def test_bind_short_circuits_on_fail() -> None:
    assert Fail(NOT_ENOUGH_INPUT).bind(_explode) == Fail(NOT_ENOUGH_INPUT)


def test_bind_keeps_first_failure() -> None:
    r = Fail(NOT_ENOUGH_INPUT).bind(lambda x: unexpected_input("?"))
    assert r == Fail(NOT_ENOUGH_INPUT)


# get_or_else


def test_get_or_else_unwraps_ok_without_evaluating_default() -> None:
    assert Ok(1).get_or_else(_explode) == 1


def test_get_or_else_evaluates_default_on_fail() -> None:
    assert Fail(NOT_ENOUGH_INPUT).get_or_else(lambda: 10) == 10


# or_else


def test_or_else_keeps_ok_without_evaluating_alternative() -> None:
    assert Ok(1).or_else(_explode) == Ok(1)
    assert Ok(1).or_else(lambda: Ok(10)) == Ok(1)
    assert Ok(1).or_else(lambda: not_enough_input()) == Ok(1)


def test_or_else_takes_alternative_on_fail() -> None:
    assert not_enough_input().or_else(lambda: Ok(10)) == Ok(10)


def test_or_else_keeps_first_failure_when_both_fail() -> None:
    r = not_enough_input().or_else(lambda: unexpected_input("?"))
    assert r == Fail(NOT_ENOUGH_INPUT)


@given(errors, errors)
def test_or_else_first_failure_property(first: Error, second: Error) -> None:
    assert Fail(first).or_else(lambda: Fail(second)) == Fail(first)


# sequence


@given(st.lists(st.integers()))
def test_sequence_all_ok_preserves_order(values: list[int]) -> None:
    assert sequence([Ok(v) for v in values]) == Ok(values)


@given(st.lists(results, min_size=1))
def test_sequence_surfaces_leftmost_failure(rs: list[Result[int]]) -> None:
    failures = [r for r in rs if not r]
    if failures:
        assert sequence(rs) == failures[0]
    else:
        assert sequence(rs) == Ok([r.unwrap() for r in rs])


def test_sequence_examples() -> None:
    assert sequence([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])
    assert sequence([Ok(1), not_enough_input(), Ok(3)]) == Fail(NOT_ENOUGH_INPUT)
    assert sequence([Ok(1), not_a_number("a"), unexpected_input("b")]) == Fail(NotANumber("a"))
    assert sequence([]) == Ok([])


def test_sequence_accepts_generators() -> None:
    assert sequence(Ok(i) for i in range(3)) == Ok([0, 1, 2])


# variants and helpers


def test_truthiness_matches_variant() -> None:
    assert Ok(0)
    assert Ok(None).is_ok()
    assert not Fail(NOT_ENOUGH_INPUT)
    assert Fail(NOT_ENOUGH_INPUT).is_fail()


def test_unwrap_returns_ok_value() -> None:
    assert Ok("x").unwrap() == "x"


def test_unwrap_raises_parse_error_with_typed_error() -> None:
    with pytest.raises(ParseError) as exc:
        invalid_operation("/ isn't a valid operation").unwrap()

    assert exc.value.error == InvalidOperation("/ isn't a valid operation")
    assert str(exc.value) == "/ isn't a valid operation"


def test_constructors_build_expected_variants() -> None:
    assert ok(3) == Ok(3)
    assert fail(NOT_ENOUGH_INPUT) == Fail(NotEnoughInput())
    assert not_a_number("x") == Fail(NotANumber("x"))
    assert invalid_operation("/") == Fail(InvalidOperation("/"))
    assert unexpected_input("h") == Fail(UnexpectedInput("h"))
    assert not_enough_input() == Fail(NOT_ENOUGH_INPUT)


def test_errors_compare_by_value() -> None:
    assert UnexpectedInput("h") == UnexpectedInput("h")
    assert UnexpectedInput("h") != UnexpectedInput("i")
    assert NotANumber("h") != InvalidOperation("h")
    assert NotEnoughInput() == NOT_ENOUGH_INPUT
