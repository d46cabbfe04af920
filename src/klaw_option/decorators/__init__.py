"""Decorators: @option, @optional and @safe."""

from klaw_option.decorators.lift import optional, safe
from klaw_option.decorators.option import option

__all__ = [
    'option',
    'optional',
    'safe',
]
