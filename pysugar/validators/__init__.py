"""Built-in string validators.

Each module in this package holds one or more `BaseValidator`
subclasses. The factory functions exported here are the usual way to
build them::

    apply_validators(name, [not_empty(), min_length(3), max_length(20)])
"""
from .length import MaxLengthValidator, MinLengthValidator, max_length, min_length
from .presence import NotEmptyValidator, not_empty

__all__ = [
    "MaxLengthValidator",
    "MinLengthValidator",
    "NotEmptyValidator",
    "max_length",
    "min_length",
    "not_empty",
]
