"""Partial application for the applicative operator.

``Some(f).appl(Some(a))`` does not call ``f`` until it has received as many
arguments as it declares. Until then it holds a ``Curried`` accumulator: the
original function, its arity, and the arguments seen so far. The arguments
are kept as a linked stack, newest first, so adding one never copies the
others; the stack is unwound into call order only when ``f`` is invoked.

Example:
    ```python
    add3 = curry(lambda a, b, c: a + b + c)
    add3(1)(2)(3)
    # 6

    step = curry(lambda a, b, c: a + b + c)(1)
    step
    # Curried(<lambda>, 1/3)
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ['Curried', 'arity_of', 'curry']

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

# (newest, rest) pairs ending in None
type ArgStack = tuple[Any, ArgStack] | None


def _unwind(stack: ArgStack) -> list[Any]:
    """Turn an argument stack back into call order."""
    args: list[Any] = []
    while stack is not None:
        head, stack = stack
        args.append(head)
    args.reverse()
    return args


def function_name(fn: Callable[..., Any]) -> str:
    """Best-effort readable name for a callable, used in reprs and log events."""
    if isinstance(fn, Curried):
        return function_name(fn.fn)
    return getattr(fn, '__qualname__', None) or getattr(fn, '__name__', None) or repr(fn)


@dataclass(slots=True, frozen=True, repr=False)
class Curried:
    """Immutable accumulator for a partially applied function.

    Calling it with one argument returns either the function's result (once
    ``arity`` arguments have been supplied) or a new ``Curried`` holding one
    more argument. The instance itself is never modified, so a partially
    applied step can be reused or shared between threads.

    Attributes:
        fn: The original function.
        arity: Total number of positional arguments ``fn`` is called with.
        args: Arguments supplied so far, newest first.
        supplied: Number of arguments in ``args``.
    """

    fn: Callable[..., Any]
    arity: int
    args: ArgStack = None
    supplied: int = 0

    @property
    def remaining(self) -> int:
        """Number of arguments still missing before ``fn`` is invoked."""
        return self.arity - self.supplied

    def __call__(self, arg: Any) -> Any:
        if self.remaining <= 0:
            msg = f'{function_name(self.fn)} takes no further arguments'
            raise TypeError(msg)
        args = (arg, self.args)
        supplied = self.supplied + 1
        if supplied == self.arity:
            return self.fn(*_unwind(args))
        return Curried(self.fn, self.arity, args, supplied)

    def __repr__(self) -> str:
        return f'Curried({function_name(self.fn)}, {self.supplied}/{self.arity})'


def arity_of(fn: Callable[..., Any]) -> int:
    """Return how many more positional arguments ``fn`` needs.

    For a ``Curried`` this is the number still missing. For anything else it
    is the count of required positional parameters. Callables that only take
    ``*args``, and callables whose signature cannot be read (some builtins),
    count as taking one argument; pin the arity with ``curry(fn, n)`` when
    that guess is wrong.

    Args:
        fn: Any callable.

    Returns:
        int: The arity used by ``appl``.
    """
    if isinstance(fn, Curried):
        return fn.remaining
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    required = 0
    variadic = False
    for param in signature.parameters.values():
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty:
            required += 1
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = True
    if required == 0 and variadic:
        return 1
    return required


def curry(fn: Callable[..., Any], arity: int | None = None) -> Curried:
    """Start a partial application of ``fn``.

    Args:
        fn: The function to apply one argument at a time.
        arity: Number of arguments to collect before calling ``fn``.
            Defaults to ``arity_of(fn)``.

    Returns:
        Curried: An accumulator with no arguments supplied yet. A ``Curried``
        passed in without an explicit arity is returned as is.

    Raises:
        TypeError: If fn is not callable.
        ValueError: If arity is negative, or conflicts with an existing Curried.
    """
    if not callable(fn):
        msg = f'curry() expects a callable, got {type(fn).__name__}'
        raise TypeError(msg)
    if isinstance(fn, Curried):
        if arity is not None and arity != fn.remaining:
            msg = f'{fn!r} needs {fn.remaining} more argument(s), not {arity}'
            raise ValueError(msg)
        return fn
    resolved = arity_of(fn) if arity is None else arity
    if resolved < 0:
        msg = f'arity must be non-negative, got {resolved}'
        raise ValueError(msg)
    return Curried(fn, resolved)
