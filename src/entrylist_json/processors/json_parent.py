"""JSON parents: destinations that converted values are attached to."""

from typing import Any, Dict, List

from ..types import JsonParent


class ObjectParent(JsonParent):
    """A named property slot of a JSON object."""

    def __init__(self, target: Dict[str, Any], name: str):
        self.target = target
        self.name = name

    def attach_string(self, value: str) -> None:
        self.target[self.name] = value

    def attach_object(self, value: Dict[str, Any]) -> None:
        self.target[self.name] = value

    def attach_array(self, value: List[Any]) -> None:
        self.target[self.name] = value

    def __repr__(self) -> str:
        return f"ObjectParent(name={self.name!r})"


class ArrayParent(JsonParent):
    """The next element slot of a JSON array."""

    def __init__(self, target: List[Any]):
        self.target = target

    def attach_string(self, value: str) -> None:
        self.target.append(value)

    def attach_object(self, value: Dict[str, Any]) -> None:
        self.target.append(value)

    def attach_array(self, value: List[Any]) -> None:
        self.target.append(value)

    def __repr__(self) -> str:
        return f"ArrayParent(size={len(self.target)})"
