"""Exception hierarchy for pysugar.

Every error raised on purpose by the library derives from `SugarError`, so
callers can catch the whole family at once. Subclasses also inherit from
the closest builtin (`ValueError`, `OSError`) where one applies.
"""

from typing import Optional


class SugarError(Exception):
    """Base class for all errors raised by pysugar."""


class ValidationError(SugarError, ValueError):
    """Raised when a validator chain rejects a value.

    Attributes:
        reason (str): The failure reason reported by the first failing
            validator, without the surrounding context.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid string input: {reason}")


class EnvError(SugarError):
    """Raised when an environment variable or env file cannot be used."""


class InputError(SugarError):
    """Raised when terminal input cannot be read or parsed."""


class FileError(SugarError, OSError):
    """Raised when a file cannot be read, written or created."""


class HTTPStatusError(SugarError):
    """Raised when an HTTP response carries an unexpected status code.

    Attributes:
        status_code (int): The status code of the response.
        url (Optional[str]): The requested URL, when known.
    """

    def __init__(self, status_code: int, url: Optional[str] = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"status code: {status_code}")
