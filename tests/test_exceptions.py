"""
Exception hierarchy test suite.

Tests cover:
- Class hierarchy and built-in base classes
- Stable error codes
- Structured attributes and string forms
- Top-level exports
"""
import pytest

import precheck
from precheck import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    GuardError,
    GuardUsageError,
)


class TestHierarchy:
    """Test the exception class hierarchy."""

    @pytest.mark.parametrize(
        "cls",
        [ArgumentError, ArgumentNullError, ArgumentOutOfRangeError, GuardUsageError],
    )
    def test_subclasses_of_base(self, cls):
        assert issubclass(cls, GuardError)
        assert issubclass(cls, ArgumentError)
        assert issubclass(cls, ValueError)

    def test_usage_error_is_type_error(self):
        assert issubclass(GuardUsageError, TypeError)

    def test_base_is_not_value_error(self):
        assert not issubclass(GuardError, ValueError)

    @pytest.mark.parametrize(
        "cls,code",
        [
            (GuardError, "GUARD_ERROR"),
            (ArgumentError, "INVALID_ARGUMENT"),
            (ArgumentNullError, "NULL_ARGUMENT"),
            (ArgumentOutOfRangeError, "ARGUMENT_OUT_OF_RANGE"),
            (GuardUsageError, "GUARD_USAGE"),
        ],
    )
    def test_codes(self, cls, code):
        assert cls.code == code


class TestAttributes:
    """Test structured data carried by the exceptions."""

    def test_message_and_param_name(self):
        error = ArgumentNullError("[user] cannot be Null.", "user")
        assert error.message == "[user] cannot be Null."
        assert error.param_name == "user"
        assert str(error) == "[user] cannot be Null."
        assert error.args == ("[user] cannot be Null.",)

    def test_param_name_optional(self):
        assert ArgumentError("bad").param_name is None

    def test_repr(self):
        error = ArgumentError("bad", "title")
        assert repr(error) == "ArgumentError(message='bad', param_name='title')"

    def test_out_of_range_defaults(self):
        error = ArgumentOutOfRangeError("out", "n")
        assert error.actual_value is None
        assert error.threshold is None

    def test_usage_error_default_message(self):
        error = GuardUsageError("predicate")
        assert error.param_name == "predicate"
        assert str(error) == "[predicate] cannot be Null."


class TestExports:
    """Test the public import surface."""

    def test_all_names_resolve(self):
        for name in precheck.__all__:
            assert hasattr(precheck, name), name

    def test_guard_module_alias(self):
        assert precheck.guard.not_null is precheck.not_null

    def test_version(self):
        assert isinstance(precheck.__version__, str)
        assert precheck.__version__
