"""Rejects empty strings."""
from typing import Optional

from ..core.base_validator import BaseValidator


class NotEmptyValidator(BaseValidator):
    """Fails on the empty string and accepts everything else."""

    name = "NotEmpty"
    description = "Requires a non-empty value."

    def _validate(self, value: str) -> Optional[str]:
        if value == "":
            return "value cannot be empty"
        return None


def not_empty() -> NotEmptyValidator:
    """Builds a validator that rejects the empty string."""
    return NotEmptyValidator()
