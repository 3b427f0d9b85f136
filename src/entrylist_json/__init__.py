"""
Entry List JSON - Bidirectional JSON / entry list conversion.

Converts JSON objects into ordered, name-tagged entry lists and renders
entry lists back out as JSON objects.
"""

from .entrylist_json import EntryListJSON, as_entry_list, as_json
from .models import ContentType, Entry, EntryList, EntryListBuilder, Payload
from .codec import EntryListXmlCodec
from .types import (
    DecodeResult,
    EncodeResult,
    ConversionError,
    InvalidInputError,
    InternalStateError,
)

__version__ = "1.0.0"
__all__ = [
    "EntryListJSON",
    "as_entry_list",
    "as_json",
    "ContentType",
    "Entry",
    "EntryList",
    "EntryListBuilder",
    "Payload",
    "EntryListXmlCodec",
    "DecodeResult",
    "EncodeResult",
    "ConversionError",
    "InvalidInputError",
    "InternalStateError",
]
