"""@optional and @safe decorators for lifting plain functions into Option."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from klaw_option._logging import get_logger, is_logging_configured
from klaw_option.curry import function_name
from klaw_option.types.option import Nothing, NothingType, Some, return_

__all__ = ['optional', 'safe']

P = ParamSpec('P')
T = TypeVar('T')

logger = get_logger(__name__)


def optional[**P, T](func: Callable[P, T | None]) -> Callable[P, Some[T] | NothingType]:
    """Decorator that lifts a nullable return value into an Option.

    A ``None`` return becomes Nothing, anything else Some.

    Example:
        ```python
        @optional
        def find(users: dict[int, str], uid: int) -> str | None:
            return users.get(uid)

        find({1: 'ada'}, 1)
        # Some(value='ada')
        find({1: 'ada'}, 2)
        # NothingType()
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Some[T] | NothingType:
        return return_(wrapped(*args, **kwargs))

    return wrapper(func)  # type: ignore[return-value]


@overload
def safe[**P, T](
    func: Callable[P, T | None],
) -> Callable[P, Some[T] | NothingType]: ...


@overload
def safe(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T | None]], Callable[P, Some[T] | NothingType]]: ...


def safe[**P, T](
    func: Callable[P, T | None] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that turns raised exceptions into Nothing.

    Normal returns are lifted like ``@optional``. Exceptions outside
    ``exceptions`` still propagate.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(KeyError, ValueError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Option[T] instead of T.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def parse(text: str) -> int:
            return int(text)

        parse('42')
        # Some(value=42)
        parse('forty-two')
        # NothingType()
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Some[T] | NothingType:
        try:
            value = wrapped(*args, **kwargs)
        except catch as e:
            if is_logging_configured():
                logger.debug('safe.exception_suppressed', function=function_name(wrapped), error=repr(e))
            return Nothing
        return return_(value)

    if func is not None:
        return wrapper(func)
    return wrapper
