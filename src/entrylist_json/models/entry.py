"""Entry model: a named, typed, byte-bearing item of an entry list."""

import io
from dataclasses import dataclass
from typing import BinaryIO, Optional, Union, TYPE_CHECKING

from .content_type import ContentType, TEXT_PLAIN_UTF8, OCTET_STREAM, ENTRY_LIST

if TYPE_CHECKING:
    from .entry_list import EntryList


class PayloadConsumedError(OSError):
    """Raised when a one-shot payload is read a second time."""


class Payload:
    """
    One-shot byte source.

    Wraps either raw bytes or a readable binary stream. The bytes are handed
    out exactly once; afterwards the payload drops its reference to them.
    """

    def __init__(self, source: Union[bytes, bytearray, memoryview, BinaryIO]):
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._stream: Optional[BinaryIO] = io.BytesIO(bytes(source))
        elif hasattr(source, "read"):
            self._stream = source
        else:
            raise TypeError(f"Payload source must be bytes or a binary stream, got {type(source).__name__}")
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def read_all(self) -> bytes:
        """
        Read every byte of the payload.

        Returns:
            The payload bytes

        Raises:
            PayloadConsumedError: If the payload was already read
        """
        if self._consumed:
            raise PayloadConsumedError("Entry payload has already been consumed")
        self._consumed = True
        stream, self._stream = self._stream, None
        try:
            data = stream.read()
        finally:
            stream.close()
        return bytes(data) if data is not None else b""

    def __repr__(self) -> str:
        return f"Payload(consumed={self._consumed})"


@dataclass(frozen=True)
class Entry:
    """
    One item in an entry list.

    Names may be empty and need not be unique within a list. The payload is
    consumed by whichever conversion step reads it.
    """

    name: str
    content_type: ContentType
    payload: Payload

    def __post_init__(self):
        """Validate entry after initialization."""
        if self.name is None:
            raise ValueError("name cannot be None")
        if not isinstance(self.payload, Payload):
            # frozen dataclass: assign through object.__setattr__
            object.__setattr__(self, "payload", Payload(self.payload))

    def read_bytes(self) -> bytes:
        """Read the entry payload (at most once)."""
        return self.payload.read_all()

    def is_blank(self) -> bool:
        """Check if the entry name is empty or whitespace only."""
        return not self.name.strip()

    @classmethod
    def of_string(cls, name: str, value: str) -> 'Entry':
        """Create a UTF-8 text entry. Characters UTF-8 cannot hold (lone surrogates) become '?'."""
        return cls(name, TEXT_PLAIN_UTF8, Payload(value.encode("utf-8", "replace")))

    @classmethod
    def of_boolean(cls, name: str, value: bool) -> 'Entry':
        return cls.of_string(name, "true" if value else "false")

    @classmethod
    def of_bytes(cls, name: str, value: Union[bytes, bytearray, memoryview],
                 content_type: ContentType = OCTET_STREAM) -> 'Entry':
        return cls(name, content_type, Payload(value))

    @classmethod
    def of_entry_list(cls, name: str, value: 'EntryList') -> 'Entry':
        """Create an entry whose payload is the encoded form of a nested entry list."""
        from ..codec import EntryListXmlCodec
        return cls(name, ENTRY_LIST, Payload(EntryListXmlCodec().encode(value)))
