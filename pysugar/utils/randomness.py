"""Random-value helpers backed by a module-level generator.

The generator is seeded from system entropy at import time. Call `seed`
for a reproducible sequence. None of these helpers are suitable for
secrets; use the `secrets` module for tokens and passwords.
"""
import random
import string
from typing import Any, Optional, Sequence, TypeVar

T = TypeVar("T")

LETTERS = string.ascii_letters

_rng = random.Random()


def seed(value: Optional[Any] = None) -> None:
    """Reseeds the generator. None reseeds from system entropy."""
    _rng.seed(value)


def rand_int(low: int, high: int) -> int:
    """Returns an integer in ``[low, high]``, both ends inclusive.

    Raises:
        ValueError: If `low` is greater than `high`.
    """
    if low > high:
        raise ValueError("min cannot be greater than max")
    return _rng.randint(low, high)


def rand_float(low: float, high: float) -> float:
    """Returns a float in ``[low, high)``.

    Raises:
        ValueError: If `low` is not less than `high`.
    """
    if low >= high:
        raise ValueError("min must be less than max")
    return low + _rng.random() * (high - low)


def rand_bool() -> bool:
    return _rng.random() < 0.5


def choice(items: Sequence[T]) -> T:
    """Returns a random element of `items`.

    Raises:
        ValueError: If `items` is empty.
    """
    if len(items) == 0:
        raise ValueError("cannot choose from empty sequence")
    return _rng.choice(items)


def rand_string(length: int) -> str:
    """Returns `length` random ASCII letters.

    Raises:
        ValueError: If `length` is not positive.
    """
    if length <= 0:
        raise ValueError("length must be positive")
    return "".join(_rng.choice(LETTERS) for _ in range(length))
