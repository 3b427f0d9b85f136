"""XML wire codec for nested entry lists."""

import base64
import binascii
import logging
import xml.etree.ElementTree as ET
from typing import Optional

from ..models import ContentType, Entry, EntryList, Payload
from ..types import EntryListCodecInterface


ROOT_TAG = "EntryList"
ENTRY_TAG = "Entry"
NAME_ATTR = "name"
CONTENT_TYPE_ATTR = "contentType"


class EntryListCodecError(ValueError):
    """Raised when bytes cannot be decoded into an entry list."""


class EntryListXmlCodec(EntryListCodecInterface):
    """
    Encoder/decoder for the serialized form of an entry list.

    Format::

        <EntryList>
          <Entry name="BASE64" contentType="text/plain; charset=UTF-8">BASE64</Entry>
        </EntryList>

    Entries appear in list order. Names are base64 encoded UTF-8 in the
    ``name`` attribute and payload bytes are base64 encoded in the element
    text, so neither can contain characters XML forbids.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the codec.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def encode(self, entry_list: EntryList) -> bytes:
        """
        Serialize an entry list. Every entry payload is consumed.

        Args:
            entry_list: EntryList to serialize

        Returns:
            UTF-8 encoded XML document
        """
        root = ET.Element(ROOT_TAG)
        for entry in entry_list:
            element = ET.SubElement(root, ENTRY_TAG)
            element.set(NAME_ATTR, _encode_name(entry.name))
            element.set(CONTENT_TYPE_ATTR, str(entry.content_type))
            element.text = base64.b64encode(entry.read_bytes()).decode("ascii")

        self.logger.debug(f"Encoded entry list with {len(entry_list)} entries")
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)

    def decode(self, data: bytes) -> Optional[EntryList]:
        """
        Deserialize an entry list.

        Args:
            data: Serialized entry list

        Returns:
            Decoded EntryList, or None if ``data`` is empty

        Raises:
            EntryListCodecError: If the document is malformed
        """
        if not data or not data.strip():
            return None

        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise EntryListCodecError(f"Malformed entry list document: {e}") from e

        if root.tag != ROOT_TAG:
            raise EntryListCodecError(f"Expected <{ROOT_TAG}> root element, got <{root.tag}>")

        builder = EntryList.builder()
        for index, element in enumerate(root):
            if element.tag != ENTRY_TAG:
                raise EntryListCodecError(f"Unexpected element <{element.tag}> at position {index}")

            name = element.get(NAME_ATTR)
            header = element.get(CONTENT_TYPE_ATTR)
            if name is None or header is None:
                raise EntryListCodecError(f"Entry at position {index} is missing a name or contentType attribute")

            try:
                name = _decode_name(name)
                content_type = ContentType.parse(header)
                payload = base64.b64decode((element.text or "").strip(), validate=True)
            except (ValueError, binascii.Error) as e:
                raise EntryListCodecError(f"Invalid entry at position {index}: {e}") from e

            builder.add_entry(Entry(name, content_type, Payload(payload)))

        self.logger.debug(f"Decoded entry list with {len(builder)} entries")
        return builder.build()


def _encode_name(name: str) -> str:
    return base64.b64encode(name.encode("utf-8", "replace")).decode("ascii")


def _decode_name(value: str) -> str:
    return base64.b64decode(value, validate=True).decode("utf-8")
