"""Bounds the length of a string.

Lengths are counted in characters (code points), not encoded bytes. The
bound is fixed when the validator is built; a negative bound is refused
at that point with a `ValueError`.
"""
from typing import Optional

from ..core.base_validator import BaseValidator


class _LengthValidator(BaseValidator):
    """Shared construction for the length validators."""

    def __init__(self, n: int) -> None:
        """Initializes the validator with its length bound.

        Args:
            n (int): The bound, in characters.

        Raises:
            ValueError: If `n` is negative.
        """
        if n < 0:
            raise ValueError(f"length bound must be non-negative, got {n}")
        self._n = n

    @property
    def n(self) -> int:
        return self._n


class MinLengthValidator(_LengthValidator):
    """Fails when the value is shorter than `n` characters."""

    name = "MinLength"
    description = "Requires at least N characters."

    def _validate(self, value: str) -> Optional[str]:
        if len(value) < self.n:
            return f"minimum length is {self.n}"
        return None


class MaxLengthValidator(_LengthValidator):
    """Fails when the value is longer than `n` characters."""

    name = "MaxLength"
    description = "Allows at most N characters."

    def _validate(self, value: str) -> Optional[str]:
        if len(value) > self.n:
            return f"maximum length is {self.n}"
        return None


def min_length(n: int) -> MinLengthValidator:
    """Builds a validator requiring at least `n` characters."""
    return MinLengthValidator(n)


def max_length(n: int) -> MaxLengthValidator:
    """Builds a validator allowing at most `n` characters."""
    return MaxLengthValidator(n)
