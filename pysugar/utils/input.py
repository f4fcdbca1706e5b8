"""Reads single lines of terminal input, with validation and parsing.

Each call reads exactly one line from standard input and strips
surrounding whitespace before checking or converting it.
"""
import logging
import sys
from typing import Any

import click

from ..core.base_validator import ValidatorFunc
from ..core.exceptions import InputError
from ..core.validator import apply_validators
from .env import MISSING

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def input_raw(prompt: str = "") -> str:
    """Shows `prompt` and returns the next stripped line from stdin.

    Raises:
        InputError: If standard input is exhausted or unreadable.
    """
    if prompt:
        click.echo(prompt, nl=False)

    try:
        line = sys.stdin.readline()
    except (OSError, ValueError) as e:
        raise InputError(f"input error: {e}") from e

    if line == "":
        raise InputError("input error")
    return line.strip()


def input_string(prompt: str = "", *validators: ValidatorFunc) -> str:
    """Reads a line and checks it against `validators`, in order.

    Args:
        prompt (str): Text shown before reading.
        *validators (ValidatorFunc): The validator chain.

    Returns:
        str: The stripped line, when every validator accepts it.

    Raises:
        ValidationError: On the first validator that rejects the line.
        InputError: If no line can be read.
    """
    return apply_validators(input_raw(prompt), validators)


def input_int(prompt: str = "", default: Any = MISSING) -> int:
    """Reads a line and parses it as an integer.

    Raises:
        InputError: If the line is not an integer and no default is given.
    """
    text = input_raw(prompt)
    try:
        return int(text)
    except ValueError:
        if default is not MISSING:
            logger.debug(f"Using default {default!r} for invalid integer input {text!r}")
            return default
        raise InputError(f"invalid integer input: {text!r}") from None


def input_float(prompt: str = "", default: Any = MISSING) -> float:
    """Reads a line and parses it as a float.

    Raises:
        InputError: If the line is not a number and no default is given.
    """
    text = input_raw(prompt)
    try:
        return float(text)
    except ValueError:
        if default is not MISSING:
            logger.debug(f"Using default {default!r} for invalid float input {text!r}")
            return default
        raise InputError(f"invalid float input: {text!r}") from None
