"""Error-handling combinators.

These helpers let a call site decide, per call, whether a failure is fatal
or recoverable:

-   `must` and `check` escalate an error value into a raised exception.
-   `attempt` contains an exception raised by a single operation and
    reports it as an `Outcome` instead.
-   `or_default` picks between an outcome's value and a fallback.
-   `ignore` marks an error as deliberately discarded.

Typical use::

    value, ok = attempt(lambda: must(*catch(int, text)), 0)
    port = or_default(value, ok, 8080)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple, TypeVar

from .exceptions import SugarError

T = TypeVar("T")

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """The result of running an operation through `attempt`.

    Unpacks as a two-item pair, so ``value, ok = attempt(fn)`` works.

    Attributes:
        value (Any): The operation's result, or the caller's default when
            `ok` is False. A default value is never meaningful data.
        ok (bool): True if the operation returned normally.
        error (Optional[BaseException]): The contained exception, if any.
    """

    value: Any
    ok: bool
    error: Optional[BaseException] = None

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.ok


def _as_exception(err: Any) -> BaseException:
    if isinstance(err, BaseException):
        return err
    return SugarError(str(err))


def attempt(operation: Callable[[], T], default: Any = None) -> Outcome:
    """Runs an operation and contains any exception it raises.

    Only the single call to `operation` is guarded. `KeyboardInterrupt`,
    `SystemExit` and other non-`Exception` signals still propagate.

    Args:
        operation (Callable[[], T]): A zero-argument callable.
        default (Any): The value reported when the operation fails.
            Defaults to None.

    Returns:
        Outcome: ``(result, True)`` on success, ``(default, False)`` on
        failure, with the exception kept in `Outcome.error`.
    """
    try:
        result = operation()
    except Exception as e:
        logger.debug(f"Contained failure in {getattr(operation, '__name__', operation)!r}: {e}")
        return Outcome(default, False, e)
    return Outcome(result, True)


def or_default(value: T, ok: bool, fallback: T) -> T:
    """Returns `value` if `ok` is true, otherwise `fallback`."""
    return value if ok else fallback


def must(value: T, err: Any = None) -> T:
    """Returns `value`, or raises `err` if it is not None.

    An exception instance is raised as-is; any other payload is wrapped in
    `SugarError`.

    Args:
        value (T): The value to return on success.
        err (Any): The error half of a ``(value, err)`` pair.

    Returns:
        T: `value`, when `err` is None.

    Raises:
        BaseException: `err` itself, or a `SugarError` carrying it.
    """
    if err is not None:
        raise _as_exception(err)
    return value


def check(err: Any) -> None:
    """Raises `err` if it is not None, the same way `must` does."""
    if err is not None:
        raise _as_exception(err)


def ignore(err: Any) -> None:
    """Discards an error on purpose. Never raises."""
    del err


def catch(operation: Callable[..., T], *args: Any, **kwargs: Any) -> Tuple[Optional[T], Optional[Exception]]:
    """Calls `operation` and returns a ``(value, error)`` pair.

    This is the inverse of `must`: it turns a raising call into the pair
    shape, so ``must(*catch(int, "42"))`` returns 42.

    Args:
        operation (Callable[..., T]): The callable to invoke.
        *args: Positional arguments for `operation`.
        **kwargs: Keyword arguments for `operation`.

    Returns:
        Tuple[Optional[T], Optional[Exception]]: ``(result, None)`` on
        success, ``(None, exception)`` on failure.
    """
    try:
        return operation(*args, **kwargs), None
    except Exception as e:
        return None, e
