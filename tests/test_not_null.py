"""
Not-None check test suite.

Tests cover:
- None raises ArgumentNullError with the default message
- Any non-None value passes, including falsy ones
- Parameter-name fallback for missing or blank names
- Message override
- Caller-supplied exception instances and classes
- Usage errors for invalid name/exception arguments
"""
import pytest

from precheck import (
    GENERIC_PARAMETER_NAME,
    ArgumentError,
    ArgumentNullError,
    GuardUsageError,
    not_null,
)

from conftest import CustomError


class TestNotNull:
    """Test not_null() with a parameter name."""

    def test_none_raises(self):
        """Test None raises with the templated message."""
        with pytest.raises(ArgumentNullError) as excinfo:
            not_null(None, "user")

        error = excinfo.value
        assert str(error) == "[user] cannot be Null."
        assert error.message == "[user] cannot be Null."
        assert error.param_name == "user"
        assert error.code == "NULL_ARGUMENT"

    @pytest.mark.parametrize("value", ["ok", 0, 0.0, "", False, [], {}, object()])
    def test_present_values_pass(self, value):
        """Test falsy-but-present values are not treated as None."""
        assert not_null(value, "user") is None

    def test_is_value_error(self):
        """Test the default exception is catchable as ValueError."""
        with pytest.raises(ValueError):
            not_null(None, "user")

    def test_is_argument_error(self):
        with pytest.raises(ArgumentError):
            not_null(None, "user")

    @pytest.mark.parametrize("name", [None, "", "   ", "\t"])
    def test_blank_name_falls_back(self, name):
        """Test missing or blank names use the generic placeholder."""
        with pytest.raises(ArgumentNullError) as excinfo:
            not_null(None, name)

        assert excinfo.value.param_name == GENERIC_PARAMETER_NAME
        assert str(excinfo.value) == f"[{GENERIC_PARAMETER_NAME}] cannot be Null."

    def test_name_omitted(self):
        with pytest.raises(ArgumentNullError, match=r"\[parameter\]"):
            not_null(None)

    def test_message_override(self):
        with pytest.raises(ArgumentNullError) as excinfo:
            not_null(None, "user", "a user is required")

        assert str(excinfo.value) == "a user is required"
        assert excinfo.value.param_name == "user"

    def test_message_override_keyword(self):
        with pytest.raises(ArgumentNullError, match="^custom$"):
            not_null(None, "user", message="custom")

    def test_empty_message_override_is_kept(self):
        """Test an empty override is used as given, not replaced."""
        with pytest.raises(ArgumentNullError) as excinfo:
            not_null(None, "user", "")

        assert excinfo.value.message == ""


class TestNotNullWithException:
    """Test not_null() with a caller-supplied exception."""

    def test_none_raises_supplied(self, custom_error):
        with pytest.raises(CustomError) as excinfo:
            not_null(None, custom_error)

        assert excinfo.value is custom_error

    def test_present_value_passes(self, custom_error):
        not_null("ok", custom_error)

    def test_exception_class(self):
        with pytest.raises(LookupError):
            not_null(None, LookupError)

    def test_message_with_exception_is_usage_error(self, custom_error):
        with pytest.raises(GuardUsageError) as excinfo:
            not_null(None, custom_error, "ignored")

        assert excinfo.value.param_name == "message"

    @pytest.mark.parametrize("bad", [42, 1.5, ["user"], object()])
    def test_invalid_name_or_exception(self, bad):
        """Test arguments that are neither a name nor an exception."""
        with pytest.raises(GuardUsageError) as excinfo:
            not_null("ok", bad)

        assert excinfo.value.param_name == "name_or_exception"
