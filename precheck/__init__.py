"""
precheck: fail-fast precondition checks for Python functions.

Replaces hand-written ``if ...: raise ...`` blocks at the top of functions
with named, reusable checks that raise typed exceptions.

Checks
------
not_null : Raise if a value is None
not_null_or_blank : Raise if text is None, empty or white-space
not_null_or_empty : Raise if text is None or empty
not_less_than : Raise if a value is below a threshold
not_greater_than : Raise if a value is above a threshold
check : Raise a given exception if a predicate is true

Exceptions
----------
GuardError : Base class, carries ``code``, ``message`` and ``param_name``
ArgumentError : Invalid argument (also a ValueError)
ArgumentNullError : Argument is None
ArgumentOutOfRangeError : Argument outside its allowed range
GuardUsageError : A check was called incorrectly (also a TypeError)
"""

# Get version from package metadata (single source of truth in pyproject.toml)
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version

    __version__ = _get_version("precheck")
except (ImportError, PackageNotFoundError):
    __version__ = "1.0.0"  # Fallback for source checkouts

from . import guard
from ._validation import GENERIC_PARAMETER_NAME

# Exceptions
from .exceptions import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    GuardError,
    GuardUsageError,
)

# Checks
from .guard import (
    check,
    not_greater_than,
    not_less_than,
    not_null,
    not_null_or_blank,
    not_null_or_empty,
)

__all__ = [
    # Version
    "__version__",
    # Module
    "guard",
    # Checks
    "check",
    "not_null",
    "not_null_or_blank",
    "not_null_or_empty",
    "not_less_than",
    "not_greater_than",
    # Exceptions
    "GuardError",
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "GuardUsageError",
    # Constants
    "GENERIC_PARAMETER_NAME",
]
