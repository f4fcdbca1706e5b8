"""
Base validator class for reusable string checks.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

# Anything with this shape can be used in a validator chain: it returns
# None when the value is acceptable and a failure reason otherwise.
ValidatorFunc = Callable[[str], Optional[str]]


class BaseValidator(ABC):
    """Abstract base class for named, reusable string validators.

    Subclasses implement `_validate`. Instances are plain callables with the
    `ValidatorFunc` shape, so they can be mixed freely with functions and
    lambdas in a chain. Parameters are captured at construction time and
    must not be changed afterwards.

    Attributes:
        name (str): The display name of the validator.
        description (str): A brief explanation of what the validator checks.
    """

    name: str = "UnnamedValidator"
    description: str = "No description provided"

    def __call__(self, value: str) -> Optional[str]:
        """Checks a value and returns a failure reason, or None if valid.

        This method wraps `_validate` so that an unexpected exception is
        reported as a failure reason instead of escaping the chain.

        Args:
            value (str): The string to check.

        Returns:
            Optional[str]: The failure reason, or None if the value passes.
        """
        try:
            return self._validate(value)
        except Exception as e:
            return f"validator {self.name} failed: {e}"

    @abstractmethod
    def _validate(self, value: str) -> Optional[str]:
        """Abstract method for implementing the check itself.

        Subclasses must return None for an acceptable value and a short,
        human-readable reason otherwise. They should not raise for a value
        that simply fails the constraint.
        """
        raise NotImplementedError("Subclasses must implement _validate()")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
