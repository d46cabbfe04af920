"""klaw-option: Option type and combinators for Python 3.13+.

An Option is either ``Some(value)`` or ``Nothing``. Functions that might not
produce a value return one, and callers chain ``map``, ``bind`` and ``appl``
instead of checking for ``None`` at every step. Absence only becomes an error
where the caller asks for it (``unwrap``, ``expect``) or converts it
(``to_result``, ``to_bool``).

Flat imports (preferred):
    from klaw_option import Option, Some, Nothing, return_
    from klaw_option import map, bind, appl, flatten, flatten_enum, pipe

Submodule imports (for organization):
    from klaw_option.types import Option, Some, Nothing, Ok, Err
    from klaw_option.decorators import option, optional, safe
    from klaw_option.codec import encode, decode
"""

# Configuration
from klaw_option._config import OptionConfig, get_config, init

# Composition
from klaw_option.compose import pipe

# Partial application
from klaw_option.curry import Curried, curry

# Decorators
from klaw_option.decorators import option, optional, safe

# Errors
from klaw_option.errors import UnwrapError

# Function-style API
from klaw_option.ops import (
    appl,
    bind,
    expect,
    flatten,
    flatten_enum,
    from_result,
    map,
    or_else,
    or_else_with,
    to_bool,
    to_result,
    traverse,
    unwrap,
)
from klaw_option.propagate import Propagate

# Types
from klaw_option.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    from_nullable,
    return_,
)

__all__ = [
    'Curried',
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionConfig',
    'Propagate',
    'Result',
    'Some',
    'UnwrapError',
    'appl',
    'bind',
    'curry',
    'expect',
    'flatten',
    'flatten_enum',
    'from_nullable',
    'from_result',
    'get_config',
    'init',
    'map',
    'option',
    'optional',
    'or_else',
    'or_else_with',
    'pipe',
    'return_',
    'safe',
    'to_bool',
    'to_result',
    'traverse',
    'unwrap',
]
