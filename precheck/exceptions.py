"""
Exception hierarchy for precheck.

Every exception raised by a default check carries a machine-readable ``code``,
the human-readable ``message`` and the ``param_name`` it concerns, so callers
can catch by type and report by field instead of parsing message text.

Hierarchy
---------
::

    GuardError
    +-- ArgumentError                 INVALID_ARGUMENT
        +-- ArgumentNullError         NULL_ARGUMENT
        +-- ArgumentOutOfRangeError   ARGUMENT_OUT_OF_RANGE
        +-- GuardUsageError           GUARD_USAGE

``ArgumentError`` is also a ``ValueError`` and ``GuardUsageError`` is also a
``TypeError``, so existing handlers for the built-in argument errors keep
working.
"""

from __future__ import annotations

from typing import Any


class GuardError(Exception):
    """Base class for all exceptions raised by precheck."""

    code: str = "GUARD_ERROR"

    def __init__(self, message: str, param_name: str | None = None):
        self.message = message
        self.param_name = param_name
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"param_name={self.param_name!r})"
        )


class ArgumentError(GuardError, ValueError):
    """An argument has an invalid value (e.g. blank text)."""

    code: str = "INVALID_ARGUMENT"


class ArgumentNullError(ArgumentError):
    """An argument is None where a value is required."""

    code: str = "NULL_ARGUMENT"


class ArgumentOutOfRangeError(ArgumentError):
    """An argument lies outside its allowed range."""

    code: str = "ARGUMENT_OUT_OF_RANGE"

    def __init__(
        self,
        message: str,
        param_name: str | None = None,
        actual_value: Any = None,
        threshold: Any = None,
    ):
        self.actual_value = actual_value
        self.threshold = threshold
        super().__init__(message, param_name)


class GuardUsageError(ArgumentError, TypeError):
    """
    A precheck function was itself called incorrectly.

    Raised when the predicate or exception handed to a check is missing or of
    the wrong kind. This signals a bug at the call site, not a violated
    precondition of the caller's own arguments.
    """

    code: str = "GUARD_USAGE"

    def __init__(self, param_name: str, message: str | None = None):
        if message is None:
            message = f"[{param_name}] cannot be Null."
        super().__init__(message, param_name)


__all__ = [
    "GuardError",
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "GuardUsageError",
]
