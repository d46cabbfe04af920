"""Function-style API over Option.

Every operation takes the Option as its first argument, which reads well in
``pipe`` chains. ``map`` and ``bind`` also accept just the function and return
a reusable one-argument step:

    ```python
    from klaw_option import Some, bind, map, pipe, return_

    half = lambda x: return_(x // 2 if x % 2 == 0 else None)
    pipe(Some(3), map(lambda x: x + 1), bind(half))
    # Some(value=2)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, overload

from klaw_option._logging import get_logger, is_logging_configured
from klaw_option.errors import TO_RESULT_REASON
from klaw_option.types.option import Nothing, NothingType, Option, Some, return_
from klaw_option.types.result import Err, Ok, Result

__all__ = [
    'appl',
    'bind',
    'expect',
    'flatten',
    'flatten_enum',
    'from_result',
    'map',
    'or_else',
    'or_else_with',
    'return_',
    'to_bool',
    'to_result',
    'traverse',
    'unwrap',
]

logger = get_logger(__name__)

_MISSING: Any = object()


def _check(option: object, operation: str) -> None:
    if not isinstance(option, Some | NothingType):
        msg = f'{operation}() expects an Option, got {type(option).__name__}'
        raise TypeError(msg)


def _check_callable(f: object, operation: str) -> None:
    if not callable(f):
        msg = f'{operation}() expects a callable, got {type(f).__name__}'
        raise TypeError(msg)


@overload
def map[T, U](f: Callable[[T], U], /) -> Callable[[Option[T]], Option[U]]: ...
@overload
def map[T, U](option: Option[T], f: Callable[[T], U], /) -> Option[U]: ...
def map(option: Any, f: Any = _MISSING, /) -> Any:  # noqa: A001
    """Transform the value inside an Option if present.

    Called with only a function, returns ``option -> map(option, f)``.

    Args:
        option: The Option to transform.
        f: Function applied to the value. Not called for Nothing.

    Returns:
        Option: Some(f(value)) for Some, Nothing for Nothing.
    """
    if f is _MISSING:
        _check_callable(option, 'map')
        fn = option

        def mapper(opt: Option[Any]) -> Option[Any]:
            return map(opt, fn)

        return mapper
    _check(option, 'map')
    _check_callable(f, 'map')
    return option.map(f)


@overload
def bind[T, U](f: Callable[[T], Option[U]], /) -> Callable[[Option[T]], Option[U]]: ...
@overload
def bind[T, U](option: Option[T], f: Callable[[T], Option[U]], /) -> Option[U]: ...
def bind(option: Any, f: Any = _MISSING, /) -> Any:
    """Chain a computation that may itself produce Nothing.

    Called with only a function, returns ``option -> bind(option, f)``.

    Args:
        option: The Option to chain from.
        f: Function taking the value and returning an Option.

    Returns:
        Option: f(value) for Some, Nothing for Nothing (f not called).
    """
    if f is _MISSING:
        _check_callable(option, 'bind')
        fn = option

        def binder(opt: Option[Any]) -> Option[Any]:
            return bind(opt, fn)

        return binder
    _check(option, 'bind')
    _check_callable(f, 'bind')
    return option.and_then(f)


def appl(function_option: Option[Callable[..., Any]], value_option: Option[Any]) -> Option[Any]:
    """Apply the function inside one Option to the value inside another.

    Multi-argument functions are fed one ``appl`` at a time:

        ```python
        add3 = Some(lambda a, b, c: a + b + c)
        appl(appl(appl(add3, Some(1)), Some(2)), Some(3))
        # Some(value=6)
        ```

    Nothing anywhere in the chain gives Nothing, as does applying an argument
    to a function that takes none.
    """
    _check(function_option, 'appl')
    _check(value_option, 'appl')
    return function_option.appl(value_option)


def flatten(option: Option[Any]) -> Option[Any]:
    """Collapse ``Some(Some(...Some(x)))`` to ``Some(x)``; any Nothing inside gives Nothing."""
    _check(option, 'flatten')
    return option.flatten()


def flatten_enum(collection: Any) -> Option[Any]:
    """Turn a collection of Options into an Option of the collection.

    Lists and tuples keep their order and container type; mappings keep every
    key and come back as a dict. Any element that is not Some (including
    values that are not Options at all) makes the result Nothing, and the
    scan stops there.

    Any other input (strings, sets, generators, scalars) gives Nothing.

    Examples:
        >>> flatten_enum([Some(1), Some(2), Some(3)])
        Some(value=[1, 2, 3])
        >>> flatten_enum({'a': Some(1), 'b': Nothing})
        NothingType()
    """
    if isinstance(collection, Mapping):
        values: dict[Any, Any] = {}
        for key, item in collection.items():
            if not isinstance(item, Some):
                return Nothing
            values[key] = item.value
        return Some(values)

    if isinstance(collection, list | tuple):
        items: list[Any] = []
        for item in collection:
            if not isinstance(item, Some):
                return Nothing
            items.append(item.value)
        return Some(items if isinstance(collection, list) else tuple(items))

    if is_logging_configured():
        logger.debug('flatten_enum.unsupported_shape', type=type(collection).__name__)
    return Nothing


def traverse[U, T](xs: Iterable[U], f: Callable[[U], Option[T]]) -> Option[list[T]]:
    """Map a function over an iterable and collect the results, short-circuiting on Nothing.

    Args:
        xs: Values to map over. Consumed lazily; stops at the first Nothing.
        f: Function that takes a value and returns an Option.

    Returns:
        Some with the list of unwrapped results if every call returned Some,
        otherwise Nothing.
    """
    out: list[T] = []
    for x in xs:
        result = f(x)
        if not isinstance(result, Some):
            return Nothing
        out.append(result.value)
    return Some(out)


def unwrap[T](option: Option[T]) -> T:
    """Return the value, or raise UnwrapError for Nothing."""
    _check(option, 'unwrap')
    return option.unwrap()


def expect[T](option: Option[T], message: str) -> T:
    """Return the value, or raise UnwrapError carrying message for Nothing."""
    _check(option, 'expect')
    return option.expect(message)


def or_else[T](option: Option[T], default: T) -> T:
    """Return the value, or default for Nothing."""
    _check(option, 'or_else')
    return option.unwrap_or(default)


def or_else_with[T](option: Option[T], thunk: Callable[[], T]) -> T:
    """Return the value, or thunk() for Nothing.

    The thunk is only called when the Option is empty.
    """
    _check(option, 'or_else_with')
    return option.unwrap_or_else(thunk)


def to_result[T, E](option: Option[T], reason: E = TO_RESULT_REASON) -> Result[T, E]:
    """Convert to the Result shape.

    Args:
        option: The Option to convert.
        reason: Error payload for Nothing, any type. Defaults to
            ``'klaw_option.to_result: the option was empty'``.

    Returns:
        Ok(value) for Some, Err(reason) for Nothing.
    """
    _check(option, 'to_result')
    return option.to_result(reason)


def to_bool(option: Option[Any]) -> bool:
    """Return True for Some and False for Nothing, ignoring the value."""
    _check(option, 'to_bool')
    return option.to_bool()


def from_result[T](result: Result[T, Any]) -> Option[T]:
    """Convert a Result back to an Option, dropping the error.

    Returns:
        Some(value) for Ok, Nothing for Err.
    """
    if isinstance(result, Ok):
        return Some(result.value)
    if isinstance(result, Err):
        return Nothing
    msg = f'from_result() expects Ok or Err, got {type(result).__name__}'
    raise TypeError(msg)
