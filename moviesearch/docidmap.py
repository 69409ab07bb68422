"""Assignment of unique ids to data files, and directory crawling."""

from __future__ import annotations

import os
from collections.abc import Iterator


class DocIdMap:
    """Maps unique integer ids to file names."""

    def __init__(self) -> None:
        self._files: dict[int, str] = {}
        self._next_id = 1

    def add(self, filename: str) -> int:
        """Store a file name and return the id given to it."""
        doc_id = self._next_id
        self._files[doc_id] = filename
        self._next_id += 1
        return doc_id

    def get(self, doc_id: int) -> str:
        """Return the file name for an id; KeyError if unknown."""
        return self._files[doc_id]

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[int]:
        return iter(self._files)


def crawl_files_to_map(directory: str | os.PathLike[str], doc_map: DocIdMap) -> int:
    """Add every file below ``directory`` to ``doc_map``.

    Returns the number of files added. Raises FileNotFoundError if the
    directory does not exist.
    """
    root = os.fspath(directory)
    if not os.path.isdir(root):
        raise FileNotFoundError(f"no such directory: {root}")
    added = 0
    for current, dirs, files in os.walk(root):
        dirs.sort()
        for name in sorted(files):
            doc_map.add(os.path.join(current, name))
            added += 1
    return added