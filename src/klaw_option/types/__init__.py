"""Core types: Option, Some, Nothing and the Ok/Err Result shape."""

from klaw_option.types.option import Nothing, NothingType, Option, Some, from_nullable, return_
from klaw_option.types.result import Err, Ok, Result

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'from_nullable',
    'return_',
]
