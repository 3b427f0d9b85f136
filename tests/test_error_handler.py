"""Tests for error handler."""

import pytest
from entrylist_json.error_handler import ErrorHandler
from entrylist_json.types import (
    ConversionError,
    ErrorType,
    InvalidInputError,
    InternalStateError,
)


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid_json(self):
        """Test validation of valid JSON input."""
        result = self.error_handler.validate_input('{"users": {"user1": {"name": "Alice"}}}')

        assert result.is_valid
        assert len(result.errors) == 0

    def test_validate_input_invalid_json(self):
        """Test validation of invalid JSON input."""
        result = self.error_handler.validate_input('{"users": {"user1": {"name": "Alice"}')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert result.errors[0].location.startswith("line 1")

    def test_validate_input_not_a_string(self):
        """Test validation of a non-string input."""
        result = self.error_handler.validate_input(42)

        assert not result.is_valid
        assert result.errors[0].message == "JSON input must be a string, got int"

    def test_handle_invalid_input_error(self):
        """Test handling of structural errors."""
        response = self.error_handler.handle_conversion_error(
            InvalidInputError("Entries contained directly inside an object result cannot have a blank name.")
        )

        assert not response.can_recover
        assert "non-blank name" in response.suggested_action

    def test_handle_internal_state_error(self):
        """Test handling of payload errors."""
        error = InternalStateError.wrap(OSError("disk gone"))

        response = self.error_handler.handle_conversion_error(error)

        assert not response.can_recover
        assert "payloads" in response.suggested_action

    def test_handle_syntax_error(self):
        """Test handling of JSON syntax errors."""
        response = self.error_handler.handle_conversion_error(
            ConversionError("bad json", ErrorType.SYNTAX)
        )

        assert "well-formed JSON" in response.suggested_action


class TestConversionErrors:
    """Tests for the conversion error hierarchy."""

    def test_internal_state_wrap_message(self):
        """Test the wrapped message format."""
        error = InternalStateError.wrap(ValueError("boom"))

        assert str(error) == "Exception while converting entries to JSON (boom)."
        assert error.error_type == ErrorType.INTERNAL_STATE

    def test_internal_state_wrap_without_message(self):
        """Test that a cause without a message is reported as null."""
        error = InternalStateError.wrap(OSError())

        assert str(error) == "Exception while converting entries to JSON (null)."

    def test_invalid_input_is_value_error(self):
        """Test the builtin base of InvalidInputError."""
        error = InvalidInputError("bad", context="name")

        assert isinstance(error, ValueError)
        assert error.context == "name"
        assert error.error_type == ErrorType.INVALID_INPUT

    def test_error_kinds_are_distinct(self):
        """Test that structural and payload errors are distinguishable."""
        assert not issubclass(InvalidInputError, InternalStateError)
        assert not issubclass(InternalStateError, InvalidInputError)
        assert issubclass(InternalStateError, RuntimeError)
