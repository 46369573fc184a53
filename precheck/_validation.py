"""
Shared helpers for building failure exceptions.

These utilities give every named check the same parameter-name fallback,
message templates and argument handling.
"""

from __future__ import annotations

from collections.abc import Callable

from .exceptions import GuardError, GuardUsageError

GENERIC_PARAMETER_NAME = "parameter"

NULL_MESSAGE = "[{name}] cannot be Null."
BLANK_MESSAGE = "[{name}] cannot be Null, empty or white-space."
EMPTY_MESSAGE = "[{name}] cannot be Null or empty."
OUT_OF_RANGE_MESSAGE = "[{name}] is out of range."


def is_exception(obj: object) -> bool:
    """Return True if ``obj`` can be used with ``raise``."""
    if isinstance(obj, BaseException):
        return True
    return isinstance(obj, type) and issubclass(obj, BaseException)


def validate_exception(exception: object, name: str = "exception") -> None:
    """
    Validate that an object can be raised as a failure.

    Parameters
    ----------
    exception : object
        Candidate failure exception.
    name : str, default="exception"
        Parameter name reported in the usage error.

    Raises
    ------
    GuardUsageError
        If ``exception`` is None or not an exception instance or class.
    """
    if exception is None:
        raise GuardUsageError(name)
    if not is_exception(exception):
        raise GuardUsageError(
            name,
            f"[{name}] must be an exception instance or class, "
            f"got {type(exception).__name__}",
        )


def validate_predicate(predicate: object) -> None:
    """
    Validate that a predicate is present and callable.

    Raises
    ------
    GuardUsageError
        If ``predicate`` is None or not callable.
    """
    if predicate is None:
        raise GuardUsageError("predicate")
    if not callable(predicate):
        raise GuardUsageError(
            "predicate",
            f"[predicate] must be callable, got {type(predicate).__name__}",
        )


def parameter_name(name: str | None) -> str:
    """Return ``name``, or the generic placeholder if it is None or blank."""
    if name is None or not name.strip():
        return GENERIC_PARAMETER_NAME
    return name


def resolve_failure(
    name_or_exception: str | BaseException | type[BaseException] | None,
    message: str | None,
    template: str,
    factory: Callable[[str, str], GuardError],
) -> BaseException | type[BaseException]:
    """
    Resolve the exception a named check raises on failure.

    Parameters
    ----------
    name_or_exception : str, exception or None
        Either the name of the checked parameter, or a caller-supplied
        exception instance or class to raise as-is.
    message : str, optional
        Override for the default message. Only valid with a name.
    template : str
        Default message template with a ``{name}`` field.
    factory : Callable[[str, str], GuardError]
        Builds the default exception from ``(message, name)``.

    Returns
    -------
    BaseException or type[BaseException]
        The exception to raise if the precondition is violated.

    Raises
    ------
    GuardUsageError
        If ``message`` accompanies an exception, or ``name_or_exception`` is
        of an unsupported type.
    """
    if is_exception(name_or_exception):
        if message is not None:
            raise GuardUsageError(
                "message",
                "[message] cannot be combined with an exception; "
                "set the message on the exception instead",
            )
        return name_or_exception

    if name_or_exception is not None and not isinstance(name_or_exception, str):
        raise GuardUsageError(
            "name_or_exception",
            "[name_or_exception] must be a parameter name or an exception, "
            f"got {type(name_or_exception).__name__}",
        )

    name = parameter_name(name_or_exception)
    if message is None:
        message = template.format(name=name)
    return factory(message, name)


def validate_text(
    text: object,
    name_or_exception: str | BaseException | type[BaseException] | None,
) -> None:
    """
    Validate that a checked text value is a string or None.

    The usage error names the caller's parameter when one was given, and
    ``"text"`` otherwise.

    Raises
    ------
    GuardUsageError
        If ``text`` is neither None nor a ``str``.
    """
    if text is not None and not isinstance(text, str):
        if isinstance(name_or_exception, str) and name_or_exception.strip():
            name = name_or_exception
        else:
            name = "text"
        raise GuardUsageError(
            name,
            f"[{name}] must be a str or None, got {type(text).__name__}",
        )


# str.isspace() also accepts the ASCII information separators U+001C-U+001F;
# they separate records and are not treated as white-space here.
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_blank(text: str | None) -> bool:
    """Return True if ``text`` is None, empty, or white-space only."""
    if text is None or text == "":
        return True
    return text.isspace() and _SEPARATORS.isdisjoint(text)


def is_nan(value: object) -> bool:
    """Return True for values unequal to themselves (float, numpy and Decimal NaN)."""
    return bool(value != value)


def orders_before(value: object, other: object) -> bool:
    """
    Return True if ``value`` orders strictly before ``other``.

    Uses ``<`` except that NaN sorts below every other value and equal to
    itself, so comparisons involving NaN stay total.
    """
    value_nan = is_nan(value)
    other_nan = is_nan(other)
    if value_nan or other_nan:
        return value_nan and not other_nan
    return value < other
