"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from klaw_option._logging import get_logger, is_logging_configured
from klaw_option.curry import arity_of, curry, function_name
from klaw_option.errors import TO_RESULT_REASON, UnwrapError
from klaw_option.propagate import Propagate
from klaw_option.types.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_nullable', 'return_']

logger = get_logger(__name__)


class Some[T](msgspec.Struct, frozen=True, gc=False, tag='some'):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. Combinators such as ``map``,
    ``and_then`` and ``appl`` act on the wrapped value and always hand back a
    new Option; the instance itself never changes.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> with some as value:
        ...     print(value)
        42
    """

    value: T

    def __enter__(self) -> T:
        """Context manager entry - returns the contained value."""
        return self.value

    def __exit__(self, *_: object) -> None:
        """Context manager exit - no cleanup needed."""
        pass

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained Some value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value without calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind. Returning Nothing from f ends the
        chain: every later step sees Nothing.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def appl(self, arg: Some[Any] | NothingType) -> Some[Any] | NothingType:
        """Apply the contained function to the value of another Option.

        The contained value must be callable. Functions taking several
        arguments receive them one ``appl`` at a time; until the last one
        arrives the result is Some of a partially applied function:

            >>> add = Some(lambda a, b: a + b)
            >>> add.appl(Some(1)).appl(Some(2))
            Some(value=3)

        A function that takes no arguments cannot accept another one, so
        applying one to it gives Nothing without calling it.

        Args:
            arg: The Option holding the next argument.

        Returns:
            Some of the result when the function is saturated, Some of a
            ``Curried`` when more arguments are needed, Nothing when arg is
            Nothing or the function is nullary.

        Raises:
            TypeError: If the contained value is not callable, or arg is not
                an Option.
        """
        if isinstance(arg, NothingType):
            return Nothing
        if not isinstance(arg, Some):
            msg = f'appl() expects an Option argument, got {type(arg).__name__}'
            raise TypeError(msg)
        fn = self.value
        if not callable(fn):
            msg = f'appl() needs Some(callable), got Some({type(fn).__name__})'
            raise TypeError(msg)
        arity = arity_of(fn)
        if arity == 0:
            if is_logging_configured():
                logger.debug('appl.nullary_function', function=function_name(fn))
            return Nothing
        return Some(curry(fn, arity)(arg.value))

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Pair this value with the value of another Option.

        Returns Nothing if other is Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten(self) -> Some[Any] | NothingType:
        """Collapse nested Options into one.

        Unwraps ``Some(Some(...))`` to any depth. A Nothing found at any level
        makes the whole result Nothing.
        """
        current: Some[Any] = self
        while isinstance(current.value, Some):
            current = current.value
        if isinstance(current.value, NothingType):
            return Nothing
        return current

    def to_result[E](self, reason: E = TO_RESULT_REASON) -> Ok[T]:  # noqa: ARG002
        """Convert to the Result shape: always Ok(value) for Some."""
        return Ok(self.value)

    def to_bool(self) -> bool:
        """Return True; the option holds a value."""
        return True

    def bail(self) -> T:
        """Return the contained value (no-op for Some).

        This is the equivalent of Rust's ? operator. For Nothing it raises
        Propagate, which ``@option`` turns back into Nothing.
        """
        return self.value

    def __or__[U](self, f: Callable[[T], U]) -> Some[Any] | NothingType:
        """Pipe operator: ``Some(x) | f`` calls f(x) and wraps plain results in Some."""
        result = f(self.value)
        if isinstance(result, Some | NothingType):
            return result
        return Some(result)


class NothingType(msgspec.Struct, frozen=True, gc=False, tag='none'):
    """Nothing variant of Option representing absence of a value.

    Every operation on Nothing returns Nothing or a fallback and never calls
    the function it was given, except the fallbacks themselves
    (``unwrap_or_else``).

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly. Other instances still compare equal to it.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __enter__(self) -> NoReturn:
        """Context manager entry - raises Propagate for Nothing."""
        raise Propagate(Nothing)

    def __exit__(self, *_: object) -> None:
        """Context manager exit - never called since __enter__ raises."""
        pass

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            UnwrapError: Always, with the default message.
        """
        raise UnwrapError()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a caller-supplied message.

        Raises:
            UnwrapError: Always, carrying msg.
        """
        raise UnwrapError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return Nothing

    def and_then(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return Nothing

    def appl(self, _arg: Some[Any] | NothingType) -> NothingType:
        """Return Nothing; there is no function to apply."""
        return Nothing

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return Nothing

    def zip(self, _other: Some[Any] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return Nothing

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return Nothing

    def to_result[E](self, reason: E = TO_RESULT_REASON) -> Err[E]:
        """Convert to the Result shape: Err(reason).

        Args:
            reason: Error payload, any type. Defaults to a generic message.
        """
        return Err(reason)

    def to_bool(self) -> bool:
        """Return False; the option is empty."""
        return False

    def bail(self) -> NoReturn:
        """Raise Propagate to carry Nothing out of the current function.

        Raises:
            Propagate: Always, containing Nothing.
        """
        raise Propagate(Nothing)

    def __or__(self, _f: Callable[[Any], Any]) -> NothingType:
        """Pipe operator returns Nothing unchanged."""
        return Nothing


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def return_[T](value: T | None) -> Some[T] | NothingType:
    """Lift a plain value into an Option.

    ``None`` becomes Nothing; anything else, including falsy values such as
    ``0`` or ``''``, becomes Some.

    Examples:
        >>> return_(1)
        Some(value=1)
        >>> return_(None)
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)


from_nullable = return_
