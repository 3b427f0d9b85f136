"""Wire codecs for nested entry lists."""

from .xml_codec import EntryListXmlCodec, EntryListCodecError

__all__ = ["EntryListXmlCodec", "EntryListCodecError"]
