"""Main converter between JSON documents and entry lists."""

import logging
from contextlib import nullcontext
from typing import Any, Dict, Optional
from .types import (
    EntryListConverterInterface,
    DecodeResult,
    EncodeResult,
    ConversionError,
    InvalidInputError,
)
from .models import EntryList
from .parser import JSONParser
from .error_handler import ErrorHandler
from .processors import ContentDispatcher, JsonObjectDecoder, EntryListEncoder
from .profiler import PerformanceProfiler
from .utils.validation import ValidationUtils


class EntryListJSON(EntryListConverterInterface):
    """
    Main implementation of the converter interface.

    Provides bidirectional conversion between JSON objects and entry lists.
    Every call works on fresh local state, so one instance can serve
    independent conversions; a single entry list must not be converted
    twice because entry payloads are read once.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 indent: Optional[int] = None,
                 default_charset: str = "utf-8",
                 enable_profiling: bool = False):
        """
        Initialize the converter.

        Args:
            logger: Optional logger instance
            indent: Indentation used when serializing JSON output
            default_charset: Charset for text entries that do not declare one
            enable_profiling: Record duration and memory of each conversion
        """
        self.logger = logger or logging.getLogger(__name__)
        self.indent = indent

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.decoder = JsonObjectDecoder(self.logger)
        self.dispatcher = ContentDispatcher(default_charset=default_charset, logger=self.logger)
        self.encoder = EntryListEncoder(self.dispatcher, self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def decode(self, document: Dict[str, Any]) -> EntryList:
        """
        Convert a parsed JSON object into an entry list.

        Raises:
            InvalidInputError: If the document contains a non-JSON value
        """
        with self._profile("decode", len(document) if isinstance(document, dict) else 0):
            return self.decoder.decode(document)

    def encode(self, entry_list: EntryList) -> Dict[str, Any]:
        """
        Convert an entry list into a JSON object.

        Raises:
            InvalidInputError: If a blank-named entry would become an object property
            InternalStateError: If an entry payload cannot be read or interpreted
        """
        validation = ValidationUtils.validate_entry_list(entry_list)
        for warning in validation.warnings:
            self.logger.warning(warning)
        if not validation.is_valid:
            raise InvalidInputError(validation.errors[0].message, context=validation.errors[0].location)

        with self._profile("encode", len(entry_list)):
            return self.encoder.encode(entry_list)

    def json_to_entries(self, json_string: str) -> DecodeResult:
        """
        Parse a JSON string and convert it into an entry list.

        Args:
            json_string: JSON document whose root is an object

        Returns:
            DecodeResult with the entry list, or the errors on failure
        """
        try:
            self.logger.info(f"Starting JSON to entry list conversion ({len(json_string)} chars)")
            entry_list = self.decode(self.parser.parse(json_string))
            self.logger.info(f"Created entry list with {len(entry_list)} entries")
            return DecodeResult(success=True, entry_list=entry_list)
        except ConversionError as e:
            response = self.error_handler.handle_conversion_error(e)
            return DecodeResult(success=False, entry_list=None,
                                errors=[str(e), response.suggested_action])

    def entries_to_json(self, entry_list: EntryList) -> EncodeResult:
        """
        Convert an entry list into a JSON string.

        Args:
            entry_list: EntryList to convert (entry payloads are consumed)

        Returns:
            EncodeResult with the JSON string, or the errors on failure
        """
        try:
            self.logger.info(f"Starting entry list to JSON conversion ({len(entry_list)} entries)")
            document = self.encode(entry_list)
            json_string = self.parser.serialize(document, indent=self.indent)
            self.logger.info(f"Created JSON object with {len(document)} properties")
            return EncodeResult(success=True, json_string=json_string)
        except ConversionError as e:
            response = self.error_handler.handle_conversion_error(e)
            return EncodeResult(success=False, json_string="",
                                errors=[str(e), response.suggested_action])

    def _profile(self, operation_name: str, input_size: int):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.profile_operation(operation_name, input_size)


def as_entry_list(document: Dict[str, Any], logger: Optional[logging.Logger] = None) -> EntryList:
    """Convert a parsed JSON object into an entry list."""
    return JsonObjectDecoder(logger).decode(document)


def as_json(entry_list: EntryList, logger: Optional[logging.Logger] = None) -> Dict[str, Any]:
    """Convert an entry list into a JSON object."""
    return EntryListEncoder(logger=logger).encode(entry_list)
