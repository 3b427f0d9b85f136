"""Validation utilities for JSON input and entry lists."""

import json
from decimal import Decimal
from typing import Any, List
from ..types import ValidationResult, ValidationError, ErrorType
from ..models import EntryList


MAX_RECOMMENDED_DEPTH = 20


def reject_constant(name: str) -> Any:
    """``parse_constant`` hook refusing NaN and Infinity."""
    raise ValueError(f"Non-standard JSON constant '{name}' is not supported")


def load_json(json_string: str) -> Any:
    """Parse JSON keeping fractional numbers as exact Decimals."""
    return json.loads(json_string, parse_float=Decimal, parse_constant=reject_constant)


class ValidationUtils:
    """Utility class for validating conversion input."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax and structure.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details; ``data`` holds the parsed
            object when the input is valid
        """
        errors = []
        warnings = []

        if not isinstance(json_string, str):
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"JSON input must be a string, got {type(json_string).__name__}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            data = load_json(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=str(e),
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not isinstance(data, dict):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Root element must be an object, got {type(data).__name__}",
                location="root"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        max_depth = ValidationUtils._calculate_max_depth(data)
        if max_depth > MAX_RECOMMENDED_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). Each object level becomes a nested entry list.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            data=data
        )

    @staticmethod
    def validate_entry_list(entry_list: EntryList) -> ValidationResult:
        """
        Check the top level of an entry list for entries that cannot become
        object properties. Payloads are not read, so nested lists are not inspected.

        Args:
            entry_list: EntryList to check

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []
        counts = {}
        for entry in entry_list:
            counts[entry.name] = counts.get(entry.name, 0) + 1

        for name, count in counts.items():
            if not name.strip() and count == 1:
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message="Entries contained directly inside an object result cannot have a blank name.",
                    location=repr(name)
                ))
            elif not name.strip():
                warnings.append(f"{count} blank-named entries will be rendered as an array property named {name!r}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        max_child_depth = current_depth
        children: List[Any] = list(data.values()) if isinstance(data, dict) else data
        for child in children:
            max_child_depth = max(max_child_depth,
                                  ValidationUtils._calculate_max_depth(child, current_depth + 1))
        return max_child_depth
