"""Error handling implementation for the entry list converter."""

import logging
from typing import Optional
from .types import (
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ConversionError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Error handler for conversion operations.

    Conversions are deterministic, so no error is retried; the handler only
    validates input up front and explains failures to the caller.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except (TypeError, RecursionError) as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """
        Describe a conversion error and how the caller can fix its input.

        Args:
            error: ConversionError to handle

        Returns:
            ErrorResponse with a suggested action
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.INVALID_INPUT:
            action = ("Give every entry directly inside an object a non-blank name, or wrap "
                      "blank-named entries in a nested entry list to produce an array.")
        elif error.error_type == ErrorType.INTERNAL_STATE:
            action = ("Check that entry payloads are readable, that each entry is converted only "
                      "once, and that nested entry lists and text charsets are valid.")
        elif error.error_type in (ErrorType.SYNTAX, ErrorType.STRUCTURE):
            action = "Provide a well-formed JSON document whose root is an object."
        else:
            action = "Unknown error type. Please check logs."

        return ErrorResponse(can_recover=False, suggested_action=action)
