"""Decoder turning JSON objects into entry lists."""

import logging
from typing import Any, Dict, Optional

from ..models import EntryList, EntryListBuilder
from ..types import JsonKind, InvalidInputError, classify_json_value


class JsonObjectDecoder:
    """
    Converts a parsed JSON object into an entry list.

    Rules:
      * objects become nested entry lists under their key
      * arrays become one entry per element, all sharing the array's key
      * strings, booleans and numbers become string entries
      * null becomes an entry with an empty byte payload
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the decoder.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def decode(self, document: Dict[str, Any]) -> EntryList:
        """
        Decode a JSON object.

        Args:
            document: Parsed JSON object

        Returns:
            EntryList with one entry per scalar/object value and per array element

        Raises:
            InvalidInputError: If the document contains a non-JSON value
        """
        if not isinstance(document, dict):
            raise InvalidInputError(f"Expected a JSON object, got {type(document).__name__}")

        entry_list = self._add_object(EntryList.builder(), document).build()
        self.logger.debug(f"Decoded JSON object with {len(document)} properties into {len(entry_list)} entries")
        return entry_list

    def _add_object(self, builder: EntryListBuilder, document: Dict[str, Any]) -> EntryListBuilder:
        for key, value in document.items():
            self._add_value(builder, key, value)
        return builder

    def _add_value(self, builder: EntryListBuilder, key: str, value: Any) -> None:
        kind = classify_json_value(value)

        if kind is JsonKind.OBJECT:
            builder.add(key, self._add_object(EntryList.builder(), value).build())
        elif kind is JsonKind.ARRAY:
            for element in value:
                self._add_value(builder, key, element)
        elif kind is JsonKind.STRING:
            builder.add(key, value)
        elif kind is JsonKind.TRUE:
            builder.add(key, True)
        elif kind is JsonKind.FALSE:
            builder.add(key, False)
        elif kind is JsonKind.NULL:
            builder.add(key, b"")
        elif kind is JsonKind.INTEGRAL:
            builder.add(key, str(int(value)))
        elif kind is JsonKind.FRACTIONAL:
            builder.add(key, self._fractional_text(value))
        else:
            raise InvalidInputError(f"Unexpected Value Type '{kind.value}'.", context=value)

    @staticmethod
    def _fractional_text(value: Any) -> str:
        # float repr is the shortest text that round-trips; Decimal keeps its source digits
        if isinstance(value, float):
            return repr(value)
        return str(value)
