"""Runs validator chains against a string value.

A chain is any ordered iterable of validators. Validators are evaluated in
the order given and evaluation stops at the first failure; later
validators are never called and failures are not accumulated.
"""

import logging
from typing import Iterable, Optional

from .base_validator import ValidatorFunc
from .exceptions import ValidationError

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def run_validators(value: str, validators: Iterable[ValidatorFunc]) -> Optional[str]:
    """Returns the first failure reason in the chain, or None.

    Args:
        value (str): The string to check.
        validators (Iterable[ValidatorFunc]): The validators, in the order
            they should run.

    Returns:
        Optional[str]: The reason reported by the first failing validator,
        or None if every validator accepts the value.
    """
    for validate in validators:
        reason = validate(value)
        if reason is not None:
            logger.debug(f"Validator {validate!r} rejected input: {reason}")
            return reason
    return None


def apply_validators(value: str, validators: Iterable[ValidatorFunc]) -> str:
    """Checks a value against a chain and raises on the first failure.

    Args:
        value (str): The string to check.
        validators (Iterable[ValidatorFunc]): The validators, in order.

    Returns:
        str: `value`, unchanged, when every validator accepts it.

    Raises:
        ValidationError: With the message ``invalid string input: <reason>``.
    """
    reason = run_validators(value, validators)
    if reason is not None:
        raise ValidationError(reason)
    return value
