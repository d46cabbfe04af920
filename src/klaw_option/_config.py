"""Library configuration: OptionConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_option._logging import configure_logging

__all__ = [
    'OptionConfig',
    'get_config',
    'init',
]

_LOG_FORMATS = ('json', 'console')


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for klaw-option.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log events as JSON (True) or for the console (False).
    """

    log_level: str | None = None
    json_output: bool = True


_config: OptionConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_OPTION_LOG_LEVEL, None when unset."""
    level = os.environ.get('KLAW_OPTION_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from KLAW_OPTION_LOG_FORMAT ("json" or "console")."""
    fmt = os.environ.get('KLAW_OPTION_LOG_FORMAT', '').strip().lower()
    if fmt and fmt not in _LOG_FORMATS:
        logging.warning("Unknown KLAW_OPTION_LOG_FORMAT value '%s', defaulting to json", fmt)
        return True
    return fmt != 'console'


def init(
    log_level: str | None = None,
    json_output: bool | str | None = None,
) -> OptionConfig:
    """Initialize klaw-option with the given configuration.

    Values left as None are taken from the environment
    (``KLAW_OPTION_LOG_LEVEL``, ``KLAW_OPTION_LOG_FORMAT``).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: True/"json" for JSON logs, False/"console" for console logs.

    Returns:
        The OptionConfig that was set.

    Raises:
        ValueError: If json_output is a string other than "json" or "console".

    Example:
        ```python
        import klaw_option

        klaw_option.init(log_level='DEBUG', json_output='console')
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    if json_output is None:
        resolved_json = _detect_json_output()
    elif isinstance(json_output, str):
        if json_output.lower() not in _LOG_FORMATS:
            msg = f'Unknown log format {json_output!r}, expected one of {_LOG_FORMATS}'
            raise ValueError(msg)
        resolved_json = json_output.lower() == 'json'
    else:
        resolved_json = json_output

    _config = OptionConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw_option not initialized. Call klaw_option.init() first.'
        raise RuntimeError(msg)
    return _config
