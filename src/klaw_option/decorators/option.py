"""@option decorator for catching Propagate exceptions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from klaw_option.propagate import Propagate
from klaw_option.types.option import NothingType, Some

__all__ = ['option']

P = ParamSpec('P')
T = TypeVar('T')


def option(func: Callable[P, Some[T] | NothingType]) -> Callable[P, Some[T] | NothingType]:
    """Decorator that catches Propagate exceptions for .bail() support.

    When a function decorated with @option calls .bail() on Nothing (or
    enters ``with Nothing:``), the Propagate exception is caught and Nothing
    is returned. This enables Rust-like ? operator semantics.

    Args:
        func: The function to wrap. Must return an Option.

    Returns:
        A wrapped function that returns the carried Nothing on early exit.

    Example:
        ```python
        @option
        def total(order: dict) -> Option[int]:
            price = return_(order.get('price')).bail()
            qty = return_(order.get('qty')).bail()
            return Some(price * qty)

        total({'price': 3, 'qty': 2})
        # Some(value=6)
        total({'price': 3})
        # NothingType()
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Some[T] | NothingType],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Some[T] | NothingType:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return p.value

    return wrapper(func)  # type: ignore[return-value]
