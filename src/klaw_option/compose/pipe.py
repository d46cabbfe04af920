"""pipe() function for composing steps over Option values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from klaw_option.types.option import NothingType, Option, Some, return_

__all__ = ['pipe']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')


def _lift(value: Any) -> Option[Any]:
    """Lift a plain value with return_, leaving Options untouched."""
    if isinstance(value, Some | NothingType):
        return value
    return return_(value)


# Overloads for type inference (up to 5 steps)
@overload
def pipe(value: Any, /) -> Option[Any]: ...
@overload
def pipe(value: Any, fn1: Callable[[Option[Any]], T1], /) -> T1: ...
@overload
def pipe(value: Any, fn1: Callable[[Option[Any]], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(
    value: Any, fn1: Callable[[Option[Any]], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> T3: ...
@overload
def pipe(
    value: Any,
    fn1: Callable[[Option[Any]], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(
    value: Any,
    fn1: Callable[[Option[Any]], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...


def pipe(value: Any, *fns: Callable[..., Any]) -> Any:
    """Thread an Option through a sequence of steps, left to right.

    A plain starting value is lifted with ``return_`` first, so ``None``
    starts the pipeline as Nothing. Each step receives the previous step's
    result unchanged; the curried forms ``map(f)`` and ``bind(f)`` are the
    usual steps, and a final step may unwrap to a plain value.

    Args:
        value: The starting value or Option.
        *fns: Steps to apply in order.

    Returns:
        The result of the last step (the lifted value if there are none).

    Example:
        ```python
        pipe(5, map(lambda x: x + 1), map(lambda x: x * 2))
        # Some(value=12)

        pipe(None, map(lambda x: x + 1))
        # NothingType()

        pipe({'id': 2}, map(lambda r: r['id']), lambda o: or_else(o, 0))
        # 2
        ```
    """
    current: Any = _lift(value)
    for fn in fns:
        current = fn(current)
    return current
