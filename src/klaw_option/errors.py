"""Errors raised at the explicit unwrap points of an Option."""

from __future__ import annotations

__all__ = [
    'TO_RESULT_REASON',
    'UNWRAP_MESSAGE',
    'UnwrapError',
]

UNWRAP_MESSAGE = 'klaw_option.unwrap: the option has no value'
TO_RESULT_REASON = 'klaw_option.to_result: the option was empty'


class UnwrapError(RuntimeError):
    """A value was demanded from an empty Option.

    Raised only by ``unwrap`` and ``expect``. Every other operation reports
    absence by returning ``Nothing``.
    """

    def __init__(self, message: str = UNWRAP_MESSAGE) -> None:
        self.message = message
        super().__init__(message)
