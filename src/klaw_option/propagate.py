"""Control-flow exception behind ``.bail()`` and the ``@option`` decorator."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Carries an empty Option out of a function body.

    ``Nothing.bail()`` raises it and ``@option`` turns it back into the
    carried value, so a function can stop at the first missing value without
    writing the check by hand. It is not an error and is never raised for
    ``Some``.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        """Store the empty Option being carried.

        Args:
            value: The Nothing instance that triggered the early return.
        """
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The Option carried out of the function."""
        return self._value
