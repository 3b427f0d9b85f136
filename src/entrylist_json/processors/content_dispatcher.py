"""Content dispatcher deciding how an entry payload is rendered into JSON."""

import base64
import logging
from typing import Optional, Union

from ..codec import EntryListXmlCodec, EntryListCodecError
from ..models import ContentType, Entry, EntryList, TEXT_PLAIN, ENTRY_LIST_MIME_TYPE
from ..types import ContentCategory, EntryListCodecInterface, InternalStateError


class ContentDispatcher:
    """
    Interprets an entry payload according to its content type.

    * nested entry list marker -> decoded EntryList (rendered by the encoder)
    * text/plain -> text decoded with the entry charset (UTF-8 by default)
    * anything else -> base64 encoded bytes
    """

    def __init__(self, codec: Optional[EntryListCodecInterface] = None,
                 default_charset: str = "utf-8",
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the content dispatcher.

        Args:
            codec: Codec used to decode nested entry lists
            default_charset: Charset for text entries that do not declare one
            logger: Optional logger instance
        """
        self.codec = codec or EntryListXmlCodec()
        self.default_charset = default_charset
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def categorize(content_type: ContentType) -> ContentCategory:
        """Map a content type onto a content category by exact type string."""
        type_string = content_type.as_type_string()
        if type_string == ENTRY_LIST_MIME_TYPE:
            return ContentCategory.ENTRY_LIST
        if type_string == TEXT_PLAIN:
            return ContentCategory.TEXT
        return ContentCategory.BINARY

    def dispatch(self, entry: Entry) -> Union[str, EntryList, None]:
        """
        Read and interpret an entry payload.

        Args:
            entry: Entry to interpret (its payload is consumed)

        Returns:
            A string for text and binary entries, an EntryList for nested
            entry lists, or None if a nested payload encodes nothing

        Raises:
            InternalStateError: If the payload cannot be read or interpreted
        """
        category = self.categorize(entry.content_type)
        self.logger.debug(f"Dispatching entry {entry.name!r} as {category.value}")

        try:
            if category is ContentCategory.ENTRY_LIST:
                return self.codec.decode(entry.read_bytes())
            elif category is ContentCategory.TEXT:
                charset = entry.content_type.charset or self.default_charset
                return entry.read_bytes().decode(charset)
            elif category is ContentCategory.BINARY:
                return base64.b64encode(entry.read_bytes()).decode("ascii")
            else:
                raise AssertionError(f"Unhandled content category {category}")
        except (OSError, EntryListCodecError, UnicodeDecodeError, LookupError) as e:
            raise InternalStateError.wrap(e, context=entry.name) from e
