import logging
import os
from sys import stderr

from typing import Any, Callable, Optional, Set

# Environment variables are read while the logging module is being configured, so this module keeps its own logger
# instead of using "get_logger".
_reported_keys: Set[str] = set()

_env_logger = logging.Logger('environment',
                             level=logging.DEBUG if os.getenv('JLANDS_DEBUG', '').lower() in ['1', 'true']
                             else logging.INFO)
_env_handler = logging.StreamHandler(stderr)
_env_handler.setFormatter(logging.Formatter('[ %(asctime)s | %(levelname)s ] %(name)s: %(message)s'))
_env_logger.addHandler(_env_handler)


class EnvironmentVariableRequired(RuntimeError):
    def __init__(self, key: str):
        super().__init__(f'Environment variable required: {key}')
        self.key = key


def env(key: str,
        default: Any = None,
        required: bool = False,
        transform: Optional[Callable[[str], Any]] = None,
        description: Optional[str] = None) -> Any:
    """ Read an environment variable

        The raw value goes through ``transform`` when it is set. Otherwise, ``default`` is returned. The resolved
        value of every key is reported once, at the debug level.
    """
    raw_value = os.getenv(key)

    if raw_value is None and required:
        _env_logger.error(f'Missing {key} ({description or "no description"})')
        raise EnvironmentVariableRequired(key)

    value = default if raw_value is None else (transform(raw_value) if transform else raw_value)

    if key not in _reported_keys:
        _reported_keys.add(key)
        _env_logger.debug(f'{key} = {value!r}' + (f' ({description})' if description else ''))

    return value


def flag(key: str, description: Optional[str] = None) -> bool:
    return env(key, default=False, transform=lambda v: v.lower() in ['1', 'true'], description=description)
