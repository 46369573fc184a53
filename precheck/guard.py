"""
Precondition checks.

Every named check builds a predicate and a failure exception, then hands both
to :func:`check`, which raises the exception if the predicate holds.

The second argument of each named check is either the name of the checked
parameter, used to build a default exception and message, or an exception
instance or class supplied by the caller and raised unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ._validation import (
    BLANK_MESSAGE,
    EMPTY_MESSAGE,
    NULL_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
    is_blank,
    orders_before,
    resolve_failure,
    validate_exception,
    validate_predicate,
    validate_text,
)
from .exceptions import ArgumentError, ArgumentNullError, ArgumentOutOfRangeError

NameOrException = str | BaseException | type[BaseException] | None


def check(
    predicate: Callable[[], Any],
    exception: BaseException | type[BaseException],
) -> None:
    """
    Raise ``exception`` if ``predicate`` reports a violated precondition.

    Parameters
    ----------
    predicate : Callable[[], Any]
        Zero-argument callable. A truthy result means the precondition is
        violated. Called exactly once.
    exception : BaseException or type[BaseException]
        Raised when the predicate is truthy. Instances keep their identity;
        any traceback from an earlier raise is discarded.

    Raises
    ------
    GuardUsageError
        If ``predicate`` is missing or not callable, or ``exception`` is
        missing or cannot be raised. Checked before the predicate runs.
    BaseException
        ``exception`` itself, when the predicate is truthy.

    Examples
    --------
    >>> check(lambda: False, ValueError("never raised"))
    >>> check(lambda: True, ValueError("boom"))
    Traceback (most recent call last):
        ...
    ValueError: boom
    """
    validate_predicate(predicate)
    validate_exception(exception)

    if predicate():
        if isinstance(exception, BaseException):
            # Drop frames left over from earlier raises of a reused instance
            raise exception.with_traceback(None)
        raise exception


def not_null(
    value: Any,
    name_or_exception: NameOrException = None,
    message: str | None = None,
) -> None:
    """
    Check that ``value`` is not None.

    Parameters
    ----------
    value : Any
        Value to check.
    name_or_exception : str, exception or None, optional
        Parameter name for the default ``ArgumentNullError``, or the exception
        to raise instead. A missing or blank name falls back to
        ``"parameter"``.
    message : str, optional
        Message override. Default: ``"[{name}] cannot be Null."``.

    Raises
    ------
    ArgumentNullError
        If ``value`` is None and no exception was supplied.

    Examples
    --------
    >>> not_null("ok", "user")
    >>> not_null(None, "user")
    Traceback (most recent call last):
        ...
    precheck.exceptions.ArgumentNullError: [user] cannot be Null.
    """
    exception = resolve_failure(
        name_or_exception, message, NULL_MESSAGE, ArgumentNullError
    )
    check(lambda: value is None, exception)


def not_null_or_blank(
    text: str | None,
    name_or_exception: NameOrException = None,
    message: str | None = None,
) -> None:
    """
    Check that ``text`` is not None, empty, or white-space only.

    Parameters
    ----------
    text : str or None
        Text to check.
    name_or_exception : str, exception or None, optional
        Parameter name for the default ``ArgumentError``, or the exception
        to raise instead.
    message : str, optional
        Message override.
        Default: ``"[{name}] cannot be Null, empty or white-space."``.

    Raises
    ------
    ArgumentError
        If ``text`` is blank and no exception was supplied.
    GuardUsageError
        If ``text`` is not a str.
    """
    exception = resolve_failure(
        name_or_exception, message, BLANK_MESSAGE, ArgumentError
    )
    validate_text(text, name_or_exception)
    check(lambda: is_blank(text), exception)


def not_null_or_empty(
    text: str | None,
    name_or_exception: NameOrException = None,
    message: str | None = None,
) -> None:
    """
    Check that ``text`` is not None or empty. White-space only text passes.

    Parameters
    ----------
    text : str or None
        Text to check.
    name_or_exception : str, exception or None, optional
        Parameter name for the default ``ArgumentError``, or the exception
        to raise instead.
    message : str, optional
        Message override. Default: ``"[{name}] cannot be Null or empty."``.

    Raises
    ------
    ArgumentError
        If ``text`` is None or empty and no exception was supplied.
    GuardUsageError
        If ``text`` is not a str.
    """
    exception = resolve_failure(
        name_or_exception, message, EMPTY_MESSAGE, ArgumentError
    )
    validate_text(text, name_or_exception)
    check(lambda: text is None or len(text) == 0, exception)


def _out_of_range(value: Any, threshold: Any):
    def factory(message: str, name: str) -> ArgumentOutOfRangeError:
        return ArgumentOutOfRangeError(
            message, name, actual_value=value, threshold=threshold
        )

    return factory


def not_less_than(
    value: Any,
    threshold: Any,
    name_or_exception: NameOrException = None,
    message: str | None = None,
) -> None:
    """
    Check that ``value`` is not less than ``threshold``.

    Parameters
    ----------
    value : Any
        Value to check. Must be orderable against ``threshold``.
    threshold : Any
        Inclusive lower bound.
    name_or_exception : str, exception or None, optional
        Parameter name for the default ``ArgumentOutOfRangeError``, or the
        exception to raise instead.
    message : str, optional
        Message override. Default: ``"[{name}] is out of range."``.

    Raises
    ------
    ArgumentOutOfRangeError
        If ``value < threshold`` and no exception was supplied. NaN orders
        below every other value, so a NaN ``value`` is rejected.

    Examples
    --------
    >>> not_less_than(5, 5, "count")
    >>> not_less_than(3, 5, "count")
    Traceback (most recent call last):
        ...
    precheck.exceptions.ArgumentOutOfRangeError: [count] is out of range.
    """
    exception = resolve_failure(
        name_or_exception,
        message,
        OUT_OF_RANGE_MESSAGE,
        _out_of_range(value, threshold),
    )
    check(lambda: orders_before(value, threshold), exception)


def not_greater_than(
    value: Any,
    threshold: Any,
    name_or_exception: NameOrException = None,
    message: str | None = None,
) -> None:
    """
    Check that ``value`` is not greater than ``threshold``.

    Parameters
    ----------
    value : Any
        Value to check. Must be orderable against ``threshold``.
    threshold : Any
        Inclusive upper bound.
    name_or_exception : str, exception or None, optional
        Parameter name for the default ``ArgumentOutOfRangeError``, or the
        exception to raise instead.
    message : str, optional
        Message override. Default: ``"[{name}] is out of range."``.

    Raises
    ------
    ArgumentOutOfRangeError
        If ``value > threshold`` and no exception was supplied. NaN orders
        below every other value, so a NaN ``threshold`` rejects any
        non-NaN ``value``.
    """
    exception = resolve_failure(
        name_or_exception,
        message,
        OUT_OF_RANGE_MESSAGE,
        _out_of_range(value, threshold),
    )
    check(lambda: orders_before(threshold, value), exception)


__all__ = [
    "check",
    "not_null",
    "not_null_or_blank",
    "not_null_or_empty",
    "not_less_than",
    "not_greater_than",
]
