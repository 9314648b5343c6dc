"""Result type for explicit success/failure values.

A ``Result`` is either ``Ok`` (carrying a success value) or ``Err`` (carrying
an error value). Both variants share the same shape: a boolean ``success``
discriminant and a single ``value`` payload whose meaning depends on it.
Functions return a ``Result`` instead of raising, and callers branch on
``is_ok``/``is_err`` or on structural pattern matching.

Usage:
    from tagged_result import err, is_ok, ok

    def find_user(user_id: int) -> Result[dict, str]:
        if user_id == 1:
            return ok({"id": 1, "name": "John"})
        return err("User not found")

    result = find_user(1)
    if is_ok(result):
        print(result.value["name"])
"""

from dataclasses import dataclass, field
from typing import Generic, Literal, Union

from typing_extensions import TypeIs, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E", default=str)  # Error type


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T
    success: Literal[True] = field(default=True, init=False)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    value: E
    success: Literal[False] = field(default=False, init=False)

    def __repr__(self) -> str:
        return f"Err({self.value!r})"


# Type alias for clearer function signatures
Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    """Wrap a value in a success result."""
    return Ok(value)


def err(value: E) -> Err[E]:
    """Wrap a value in an error result.

    The returned ``Err`` has no success payload type, so it is assignable to
    ``Result[T, E]`` for any ``T``.
    """
    return Err(value)


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Check if a result is a success.

    Narrows ``result`` to ``Ok[T]`` when true and to ``Err[E]`` otherwise.
    """
    return result.success


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    """Check if a result is an error.

    Narrows ``result`` to ``Err[E]`` when true and to ``Ok[T]`` otherwise.
    """
    return not result.success
