"""Provides typed access to environment variables.

Values that are missing or empty are treated the same way. The typed
getters fall back to a caller-supplied default when one is given and
raise `EnvError` otherwise. Env files are parsed with python-dotenv.
"""
import io
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from ..core.exceptions import EnvError

# Initialize a logger for this module.
logger = logging.getLogger(__name__)

# Sentinel for "no default supplied"; None is a legitimate default.
MISSING: Any = object()

TRUE_VALUES = ("true", "1", "yes", "y", "on")
FALSE_VALUES = ("false", "0", "no", "n", "off")


def _check_lines(text: str) -> None:
    """Rejects any statement python-dotenv cannot read as an assignment.

    Blank lines and comments come back without a key. A bare word comes
    back with a None value, and any other line without ``=`` comes back
    as a parse error.
    """
    for binding in parse_stream(io.StringIO(text)):
        if binding.error or (binding.key is not None and binding.value is None):
            line = binding.original.string.strip()
            raise EnvError(f"invalid env line: {line!r}")


def env_file(path: Union[str, Path] = ".env", override: bool = False) -> Dict[str, str]:
    """Loads ``KEY=VALUE`` lines from a file into the process environment.

    Blank lines and ``#`` comments are skipped, quoted values are unquoted
    and an ``export`` prefix is accepted. An unquoted value loses any
    inline ``# comment`` that follows whitespace. Variables that are
    already set are kept unless `override` is true.

    Args:
        path (Union[str, Path]): The env file to read. Defaults to ".env".
        override (bool): Replace variables that are already set.

    Returns:
        Dict[str, str]: The variables that were actually set.

    Raises:
        EnvError: If the file cannot be opened or a line has no ``=``.
    """
    path = Path(path)
    if not path.is_file():
        raise EnvError(f"cannot open env file: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EnvError(f"cannot open env file: {path}") from e

    _check_lines(text)
    values = dotenv_values(stream=io.StringIO(text), interpolate=False)

    loaded = {}
    for key, value in values.items():
        if not override and key in os.environ:
            continue
        os.environ[key] = value
        loaded[key] = value

    logger.info(f"Loaded {len(loaded)} variable(s) from {path}")
    return loaded


def _lookup(key: str) -> str:
    return os.environ.get(key, "")


def env_string(key: str, default: str = "") -> str:
    """Returns the variable's value, or `default` when missing or empty."""
    value = _lookup(key)
    return value if value != "" else default


def env_int(key: str, default: Any = MISSING) -> int:
    """Returns the variable parsed as an integer.

    Args:
        key (str): The variable name.
        default (Any): Returned when the variable is missing, empty or not
            an integer. If omitted, those cases raise instead.

    Raises:
        EnvError: If no default is given and the value is unusable.
    """
    value = _lookup(key)
    if value == "":
        if default is not MISSING:
            return default
        raise EnvError(f"missing env var: {key}")

    try:
        return int(value)
    except ValueError:
        if default is not MISSING:
            return default
        raise EnvError(f"invalid int env var {key}={value!r}") from None


def env_bool(key: str, default: Any = MISSING) -> bool:
    """Returns the variable parsed as a boolean.

    Recognized values, case-insensitively: true/1/yes/y/on and
    false/0/no/n/off.

    Args:
        key (str): The variable name.
        default (Any): Returned when the variable is missing, empty or not
            recognized. If omitted, those cases raise instead.

    Raises:
        EnvError: If no default is given and the value is unusable.
    """
    value = _lookup(key)
    if value == "":
        if default is not MISSING:
            return default
        raise EnvError(f"missing env var: {key}")

    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    if default is not MISSING:
        return default
    raise EnvError(f"invalid bool env var {key}={value!r}")


def must_env(key: str) -> str:
    """Returns a required variable, raising `EnvError` if missing or empty."""
    value = _lookup(key)
    if value == "":
        raise EnvError(f"required env var missing: {key}")
    return value
