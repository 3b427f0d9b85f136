"""Content type model describing how an entry payload is interpreted."""

from dataclasses import dataclass
from typing import Optional


TEXT_PLAIN = "text/plain"
APPLICATION_OCTET_STREAM = "application/octet-stream"
# Reserved marker for payloads that are themselves encoded entry lists.
ENTRY_LIST_MIME_TYPE = "application/vnd.entrylist+xml"

DEFAULT_CHARSET = "UTF-8"


@dataclass(frozen=True)
class ContentType:
    """
    MIME-type-like content descriptor with an optional character encoding.

    The bare type string (see ``as_type_string``) is the dispatch key used
    when rendering an entry; it is compared by exact match.
    """

    mime_type: str
    charset: Optional[str] = None

    def __post_init__(self):
        """Validate content type after initialization."""
        if not self.mime_type or not self.mime_type.strip():
            raise ValueError("mime_type cannot be empty")

    @classmethod
    def parse(cls, header: str) -> 'ContentType':
        """
        Parse a content type header such as ``text/plain; charset=UTF-8``.

        Parameters other than ``charset`` are ignored.

        Args:
            header: Content type header string

        Returns:
            ContentType instance

        Raises:
            ValueError: If the header has no type
        """
        if header is None or not header.strip():
            raise ValueError("Content type header cannot be empty")

        parts = header.split(";")
        mime_type = parts[0].strip()
        charset = None
        for param in parts[1:]:
            key, sep, value = param.partition("=")
            if sep and key.strip().lower() == "charset":
                charset = value.strip().strip('"') or None

        return cls(mime_type=mime_type, charset=charset)

    def as_type_string(self) -> str:
        """Get the bare MIME type without parameters."""
        return self.mime_type

    def with_charset(self, charset: Optional[str]) -> 'ContentType':
        return ContentType(self.mime_type, charset)

    def __str__(self) -> str:
        if self.charset:
            return f"{self.mime_type}; charset={self.charset}"
        return self.mime_type


TEXT_PLAIN_UTF8 = ContentType(TEXT_PLAIN, DEFAULT_CHARSET)
OCTET_STREAM = ContentType(APPLICATION_OCTET_STREAM)
ENTRY_LIST = ContentType(ENTRY_LIST_MIME_TYPE)
