"""Data models for entry lists."""

from .content_type import (
    ContentType,
    TEXT_PLAIN,
    APPLICATION_OCTET_STREAM,
    ENTRY_LIST_MIME_TYPE,
)
from .entry import Entry, Payload, PayloadConsumedError
from .entry_list import EntryList, EntryListBuilder

__all__ = [
    "ContentType",
    "TEXT_PLAIN",
    "APPLICATION_OCTET_STREAM",
    "ENTRY_LIST_MIME_TYPE",
    "Entry",
    "Payload",
    "PayloadConsumedError",
    "EntryList",
    "EntryListBuilder",
]
