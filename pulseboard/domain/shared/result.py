"""Result type for operations that can fail in expected ways.

Validation errors, missing records and storage problems are returned as
values instead of raised, so callers at the interface edge decide how to
report them (CLI exit code, HTTP status).

Example usage:
    >>> def parse_priority(raw: str) -> Result[int, str]:
    ...     if not raw.isdigit():
    ...         return Err(f"Priority must be a number, got {raw!r}")
    ...     return Ok(int(raw))
    ...
    >>> unwrap_or(parse_priority("x"), 3)
    3
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome carrying `value`."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome carrying `error` (usually a message string)."""

    error: E


# Union instead of | because the TypeVars are unbound at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    return isinstance(result, Err)


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Chain a second fallible step onto a successful result.

    Args:
        result: Outcome of the first step.
        fn: Next step, only called when `result` is Ok.

    Returns:
        The next step's Result, or the original Err untouched.
    """
    if isinstance(result, Ok):
        return fn(result.value)
    return result


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """Return the Ok value, or `default` for an Err."""
    if isinstance(result, Ok):
        return result.value
    return default
