"""JSON parser and serializer for the converter boundary."""

import json
import logging
from typing import Any, Dict, Optional
from .types import ErrorType, JSONInputError
from .error_handler import ErrorHandler


class JSONParser:
    """
    Parses JSON documents into objects and serializes converted objects.

    Fractional numbers are parsed as ``Decimal`` so their exact text is kept
    when they become string entries.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def parse(self, json_string: str) -> Dict[str, Any]:
        """
        Parse a JSON string whose root is an object.

        Args:
            json_string: JSON string to parse

        Returns:
            Parsed JSON object

        Raises:
            JSONInputError: If JSON is invalid or its root is not an object
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            first = validation_result.errors[0]
            messages = [error.message for error in validation_result.errors]
            raise JSONInputError(f"Invalid JSON input: {'; '.join(messages)}", first.type,
                                 context=first.location)

        for warning in validation_result.warnings:
            self.logger.warning(warning)

        data = validation_result.data
        self.logger.info(f"Parsed JSON object with {len(data)} properties")
        return data

    def serialize(self, document: Dict[str, Any], indent: Optional[int] = None) -> str:
        """
        Serialize a JSON object.

        Args:
            document: JSON object to serialize
            indent: Optional indentation level

        Returns:
            JSON string
        """
        try:
            return json.dumps(document, ensure_ascii=False, indent=indent)
        except (TypeError, ValueError) as e:
            raise JSONInputError(f"Object is not JSON serializable: {e}", ErrorType.STRUCTURE) from e
