"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path
from typing import Any, List, Tuple

from entrylist_json.codec import EntryListXmlCodec
from entrylist_json.models import EntryList, ENTRY_LIST_MIME_TYPE


def snapshot(entry_list: EntryList) -> List[Tuple[str, str, Any]]:
    """
    Read an entry list into comparable tuples, recursing into nested lists.

    Consumes every payload of ``entry_list``.
    """
    codec = EntryListXmlCodec()
    result = []
    for entry in entry_list:
        data = entry.read_bytes()
        if entry.content_type.as_type_string() == ENTRY_LIST_MIME_TYPE:
            nested = codec.decode(data)
            value = snapshot(nested) if nested is not None else None
        else:
            value = data
        result.append((entry.name, str(entry.content_type), value))
    return result


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_document():
    """Sample JSON object mixing scalars, arrays and nested objects."""
    return {"a": 1, "b": [2, 3], "c": {"d": True}}


@pytest.fixture
def sample_json_string():
    """Sample JSON document covering every JSON value kind."""
    return '''
    {
        "title": "Quarterly report",
        "pages": 12,
        "ratio": 1.50,
        "draft": false,
        "approved": true,
        "reviewer": null,
        "tags": ["finance", "q3"],
        "author": {"name": "Alice", "roles": ["editor"]}
    }
    '''


@pytest.fixture
def blank_named_list():
    """Entry list whose entries all have blank names."""
    return EntryList.builder().add("", "x").add("", "y").add("", "z").build()


@pytest.fixture
def read_snapshot():
    """Provide the entry list snapshot helper."""
    return snapshot
