"""Core type definitions for the entry list / JSON converter."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import EntryList


class JsonKind(Enum):
    """Enumeration of JSON value kinds."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    INTEGRAL = "integral"
    FRACTIONAL = "fractional"


class ContentCategory(Enum):
    """Enumeration of the ways an entry payload can be rendered."""
    ENTRY_LIST = "entry-list"
    TEXT = "text"
    BINARY = "binary"


class ErrorType(Enum):
    """Enumeration of error types."""
    INVALID_INPUT = "invalid_input"
    INTERNAL_STATE = "internal_state"
    SYNTAX = "syntax"
    STRUCTURE = "structure"


@dataclass
class DecodeResult:
    """Result of a JSON to entry list conversion."""
    success: bool
    entry_list: Optional['EntryList']
    errors: Optional[List[str]] = None


@dataclass
class EncodeResult:
    """Result of an entry list to JSON conversion."""
    success: bool
    json_string: str
    errors: Optional[List[str]] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]
    data: Any = None


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class ConversionError(Exception):
    """Base exception for conversion errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class JSONInputError(ConversionError, ValueError):
    """Raised when a JSON document cannot be parsed into an object."""


class InvalidInputError(ConversionError, ValueError):
    """Raised when the input cannot be represented in the target structure."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.INVALID_INPUT, context)


class InternalStateError(ConversionError, RuntimeError):
    """Raised when an entry payload cannot be read or interpreted."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.INTERNAL_STATE, context)

    @classmethod
    def wrap(cls, cause: BaseException, context: Optional[Any] = None) -> 'InternalStateError':
        """Build an error carrying the message of ``cause`` ("null" when it has none)."""
        msg = str(cause) or "null"
        return cls(f"Exception while converting entries to JSON ({msg}).", context)


def classify_json_value(value: Any) -> JsonKind:
    """
    Classify a parsed JSON value.

    ``bool`` is tested before numbers because it is an ``int`` subclass.
    A ``Decimal`` is integral only when it carries no fractional digits
    in its textual form (exponent of zero).

    Raises:
        InvalidInputError: If the value is not a JSON value kind
    """
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, str):
        return JsonKind.STRING
    if value is True:
        return JsonKind.TRUE
    if value is False:
        return JsonKind.FALSE
    if value is None:
        return JsonKind.NULL
    if isinstance(value, int):
        return JsonKind.INTEGRAL
    if isinstance(value, Decimal) and value.is_finite():
        if value.as_tuple().exponent == 0:
            return JsonKind.INTEGRAL
        return JsonKind.FRACTIONAL
    if isinstance(value, float) and math.isfinite(value):
        return JsonKind.FRACTIONAL
    raise InvalidInputError(f"Unexpected Value Type '{type(value).__name__}'.", context=value)


# Abstract base classes for interfaces

class JsonParent(ABC):
    """The place a converted value is attached to: an object slot or the next array element."""

    @abstractmethod
    def attach_string(self, value: str) -> None:
        pass

    @abstractmethod
    def attach_object(self, value: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def attach_array(self, value: List[Any]) -> None:
        pass


class EntryListCodecInterface(ABC):
    """Abstract interface for the nested entry list wire codec."""

    @abstractmethod
    def encode(self, entry_list: 'EntryList') -> bytes:
        """Serialize an entry list into bytes."""
        pass

    @abstractmethod
    def decode(self, data: bytes) -> Optional['EntryList']:
        """Deserialize bytes into an entry list, or None when nothing is encoded."""
        pass


class EntryListConverterInterface(ABC):
    """Abstract interface for the entry list / JSON converter."""

    @abstractmethod
    def decode(self, document: Dict[str, Any]) -> 'EntryList':
        """Convert a parsed JSON object into an entry list."""
        pass

    @abstractmethod
    def encode(self, entry_list: 'EntryList') -> Dict[str, Any]:
        """Convert an entry list into a JSON object."""
        pass
