"""Entry list model and its append-only builder."""

from typing import Iterator, List, Optional, Tuple, Union

from .entry import Entry


class EntryList:
    """
    Ordered, immutable sequence of entries.

    Order is significant and duplicate names are permitted; entries sharing
    a name become array elements when the list is rendered as JSON.
    """

    def __init__(self, entries: Optional[List[Entry]] = None):
        self._entries: Tuple[Entry, ...] = tuple(entries or ())

    @staticmethod
    def builder() -> 'EntryListBuilder':
        return EntryListBuilder()

    @classmethod
    def empty(cls) -> 'EntryList':
        return cls()

    def entries(self) -> List[Entry]:
        return list(self._entries)

    def names(self) -> List[str]:
        """Get entry names in list order (duplicates included)."""
        return [entry.name for entry in self._entries]

    def get(self, name: str) -> Optional[Entry]:
        """Get the first entry with the given name."""
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def get_all(self, name: str) -> List[Entry]:
        """Get every entry with the given name, in list order."""
        return [entry for entry in self._entries if entry.name == name]

    def is_empty(self) -> bool:
        return not self._entries

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"EntryList({self.names()!r})"


class EntryListBuilder:
    """Append-only builder for entry lists."""

    def __init__(self):
        self._entries: List[Entry] = []

    def add(self, name: str, value: Union[EntryList, str, bool, bytes]) -> 'EntryListBuilder':
        """
        Append a value under ``name``.

        Args:
            name: Entry name (may be empty)
            value: Nested entry list, string, boolean or byte buffer

        Returns:
            This builder

        Raises:
            TypeError: If the value kind is not supported
        """
        if isinstance(value, EntryList):
            entry = Entry.of_entry_list(name, value)
        elif isinstance(value, str):
            entry = Entry.of_string(name, value)
        elif isinstance(value, bool):
            entry = Entry.of_boolean(name, value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            entry = Entry.of_bytes(name, value)
        else:
            raise TypeError(f"Cannot add value of type {type(value).__name__} to an entry list")
        self._entries.append(entry)
        return self

    def add_entry(self, entry: Entry) -> 'EntryListBuilder':
        self._entries.append(entry)
        return self

    def __len__(self) -> int:
        return len(self._entries)

    def build(self) -> EntryList:
        return EntryList(self._entries)
