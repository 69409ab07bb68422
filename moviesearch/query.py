"""Looking up title words and walking the matching rows."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from moviesearch.docset import DocumentSet
from moviesearch.title_index import MovieTitleIndex


@dataclass(frozen=True)
class SearchResult:
    """One matching row of one document."""

    doc_id: int
    row_id: int


def iter_search_results(doc_set: DocumentSet) -> Iterator[SearchResult]:
    """Yield every location in the set, by document id and then row order."""
    for doc_id in sorted(doc_set.doc_index):
        for row_id in doc_set.rows(doc_id):
            yield SearchResult(doc_id, row_id)


def find_movies(index: MovieTitleIndex, term: str) -> list[SearchResult]:
    """All locations of movies whose title contains ``term``; empty if none."""
    doc_set = index.get(term)
    if doc_set is None:
        return []
    return list(iter_search_results(doc_set))