"""String cleaning and fetching matched rows from data files."""

from __future__ import annotations

import string
from itertools import islice
from typing import TYPE_CHECKING

from moviesearch.docidmap import DocIdMap

if TYPE_CHECKING:
    from moviesearch.query import SearchResult

_STRIPPED = string.whitespace + string.punctuation
_STRIPPED_SET = frozenset(_STRIPPED)


def trim(text: str) -> str:
    """Remove whitespace and punctuation from both ends of ``text``."""
    return text.strip(_STRIPPED)


def clean_string(text: str) -> str:
    """Remove all whitespace and punctuation from ``text``."""
    return "".join(char for char in text if char not in _STRIPPED_SET)


def copy_row_from_file(result: SearchResult, docs: DocIdMap) -> str:
    """Return the row a search result points at, without its line ending.

    Raises KeyError for an unknown document and IndexError for a row
    the file does not have.
    """
    if result.row_id < 0:
        raise IndexError(f"row {result.row_id} out of range")
    path = docs.get(result.doc_id)
    with open(path, encoding="utf-8") as handle:
        for line in islice(handle, result.row_id, None):
            return line.rstrip("\r\n")
    raise IndexError(f"row {result.row_id} not in {path}")