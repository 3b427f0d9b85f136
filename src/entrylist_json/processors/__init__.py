"""Converters between JSON objects and entry lists."""

from .content_dispatcher import ContentDispatcher
from .json_decoder import JsonObjectDecoder
from .json_encoder import EntryListEncoder
from .json_parent import ArrayParent, ObjectParent

__all__ = ["ContentDispatcher", "JsonObjectDecoder", "EntryListEncoder", "ArrayParent", "ObjectParent"]
