"""Result shape: Ok[T] | Err[E], produced by Option conversions.

Only the two variants and their queries live here. Option converts into this
shape (``to_result``) and back (``from_result``); richer Result handling
belongs to the Result library that consumes it.
"""

from __future__ import annotations

from typing import TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False, tag='ok'):
    """Success variant carrying a value of type T.

    Examples:
        >>> Ok(5)
        Ok(value=5)
        >>> Ok(5).is_ok()
        True
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False


class Err[E](msgspec.Struct, frozen=True, gc=False, tag='error'):
    """Failure variant carrying a reason of any type.

    Examples:
        >>> Err('klaw_option.to_result: the option was empty').is_err()
        True
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True


type Result[T, E] = Ok[T] | Err[E]
