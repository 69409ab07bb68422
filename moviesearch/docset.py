"""Sets of movie locations: which rows of which documents hold them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DocumentSet:
    """Movies sharing something, stored as (document id, row id) references."""

    desc: str
    doc_index: dict[int, list[int]] = field(default_factory=dict)
    num_movies: int = 0

    def add(self, doc_id: int, row_id: int) -> bool:
        """Add a reference; return False if it was already present."""
        rows = self.doc_index.setdefault(doc_id, [])
        if row_id in rows:
            return False
        rows.append(row_id)
        self.num_movies += 1
        return True

    def contains_doc(self, doc_id: int) -> bool:
        """Whether any movie in the set comes from the given document."""
        return doc_id in self.doc_index

    def rows(self, doc_id: int) -> tuple[int, ...]:
        """Row ids recorded for a document, in the order they were added."""
        return tuple(self.doc_index.get(doc_id, ()))

    def __len__(self) -> int:
        return self.num_movies