"""Encoder turning entry lists into JSON objects."""

import logging
from typing import Any, Dict, List, Optional

from ..models import Entry, EntryList
from ..types import InvalidInputError, JsonParent
from .content_dispatcher import ContentDispatcher
from .json_parent import ArrayParent, ObjectParent


class EntryListEncoder:
    """
    Converts an entry list into a JSON object.

    Rules:
      * entry lists become JSON objects, one property per distinct name,
        in order of first occurrence
      * several entries sharing a name become an array property
      * a nested entry list whose entries all have blank names becomes an array
      * a single blank-named entry directly inside an object is an error

    To always produce an array for some property, wrap its elements in a
    nested entry list with blank names and give that list the property name.
    """

    def __init__(self, dispatcher: Optional[ContentDispatcher] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the encoder.

        Args:
            dispatcher: ContentDispatcher used to interpret entry payloads
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.dispatcher = dispatcher or ContentDispatcher(logger=self.logger)

    def encode(self, entry_list: EntryList) -> Dict[str, Any]:
        """
        Encode an entry list as a JSON object.

        Args:
            entry_list: EntryList to encode (entry payloads are consumed)

        Returns:
            JSON object whose leaves are strings

        Raises:
            InvalidInputError: If a blank-named entry would become an object property
            InternalStateError: If an entry payload cannot be read or interpreted
        """
        result: Dict[str, Any] = {}
        self._add_to_object(result, entry_list)
        self.logger.debug(f"Encoded {len(entry_list)} entries into {len(result)} JSON properties")
        return result

    @staticmethod
    def group_by_name(entry_list: EntryList) -> Dict[str, List[Entry]]:
        """
        Group entries by name, keeping the order in which names first occur.

        Args:
            entry_list: EntryList to group

        Returns:
            Ordered mapping of name to the entries carrying it
        """
        groups: Dict[str, List[Entry]] = {}
        for entry in entry_list:
            groups.setdefault(entry.name, []).append(entry)
        return groups

    @staticmethod
    def has_only_blank_names(entry_list: EntryList) -> bool:
        return all(entry.is_blank() for entry in entry_list)

    def _add_to_object(self, target: Dict[str, Any], entry_list: EntryList) -> None:
        for name, group in self.group_by_name(entry_list).items():
            if len(group) > 1:
                self.logger.debug(f"Rendering {len(group)} entries named {name!r} as an array")
                array: List[Any] = []
                parent = ArrayParent(array)
                for entry in group:
                    self._add_entry(parent, entry)
                target[name] = array
            else:
                entry = group[0]
                if entry.is_blank():
                    raise InvalidInputError(
                        "Entries contained directly inside an object result cannot have a blank name.",
                        context=entry.name
                    )
                self._add_entry(ObjectParent(target, name), entry)

    def _add_entry(self, parent: JsonParent, entry: Entry) -> None:
        content = self.dispatcher.dispatch(entry)
        if isinstance(content, EntryList):
            self._add_entry_list(parent, content)
        elif content is not None:
            parent.attach_string(content)

    def _add_entry_list(self, parent: JsonParent, entry_list: EntryList) -> None:
        if self.has_only_blank_names(entry_list):
            array: List[Any] = []
            array_parent = ArrayParent(array)
            for entry in entry_list:
                self._add_entry(array_parent, entry)
            parent.attach_array(array)
        else:
            obj: Dict[str, Any] = {}
            self._add_to_object(obj, entry_list)
            parent.attach_object(obj)
