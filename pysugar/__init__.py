"""pysugar: small conveniences over the standard library.

This package bundles short, predictable helpers for environment access,
validated terminal input, random values, error-handling combinators, file
I/O and a thin JSON-aware HTTP client.
"""

__version__ = "0.1.0"
__author__ = "pysugar contributors"
__license__ = "MIT"

from .core.errors import Outcome, attempt, catch, check, ignore, must, or_default
from .core.exceptions import (
    EnvError,
    FileError,
    HTTPStatusError,
    InputError,
    SugarError,
    ValidationError,
)
from .core.validator import apply_validators, run_validators
from .validators import max_length, min_length, not_empty

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "Outcome",
    "attempt",
    "catch",
    "check",
    "ignore",
    "must",
    "or_default",
    "SugarError",
    "ValidationError",
    "EnvError",
    "InputError",
    "FileError",
    "HTTPStatusError",
    "apply_validators",
    "run_validators",
    "not_empty",
    "min_length",
    "max_length",
]
