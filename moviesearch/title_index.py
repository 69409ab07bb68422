"""Index of movie title words, and indexing of movie data files."""

from __future__ import annotations

import os
import threading
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

from moviesearch.docidmap import DocIdMap
from moviesearch.docset import DocumentSet
from moviesearch.movie import Movie, create_movie_from_row
from moviesearch.util import trim


def _normalise(word: str) -> str:
    return trim(word).lower()


class MovieTitleIndex:
    """Maps each lower-cased title word to the rows of the movies using it."""

    def __init__(self) -> None:
        self._sets: dict[str, DocumentSet] = {}

    def add_movie(self, movie: Movie, doc_id: int, row: int) -> int:
        """File every word of the movie's title; return how many were filed."""
        if not movie.title:
            return 0
        filed = 0
        for word in movie.title.split():
            key = _normalise(word)
            if not key:
                continue
            self._sets.setdefault(key, DocumentSet(key)).add(doc_id, row)
            filed += 1
        return filed

    def get(self, term: str) -> DocumentSet | None:
        """The set for a word, ignoring case and surrounding punctuation."""
        return self._sets.get(_normalise(term))

    @property
    def terms(self) -> list[str]:
        """All indexed words, sorted."""
        return sorted(self._sets)

    def __len__(self) -> int:
        return len(self._sets)


def _read_rows(path: str | os.PathLike[str]) -> Iterator[tuple[int, Movie]]:
    """Yield (line number, movie) for every well-formed row of a file."""
    with open(path, encoding="utf-8") as handle:
        for row, line in enumerate(handle):
            if not line.strip():
                continue
            try:
                yield row, create_movie_from_row(line)
            except ValueError:
                continue


def index_the_file(
    path: str | os.PathLike[str], doc_id: int, index: MovieTitleIndex
) -> int:
    """Index the movies of one file; return the number of records indexed."""
    count = 0
    for row, movie in _read_rows(path):
        index.add_movie(movie, doc_id, row)
        count += 1
    return count


def parse_the_files(docs: DocIdMap, index: MovieTitleIndex) -> int:
    """Index every file in ``docs``; return the number of records indexed."""
    return sum(index_the_file(docs.get(doc_id), doc_id, index) for doc_id in docs)


def parse_the_files_mt(docs: DocIdMap, index: MovieTitleIndex, num_threads: int) -> int:
    """Index every file in ``docs`` using a pool of worker threads.

    Returns the number of records indexed. Raises ValueError if
    ``num_threads`` is less than one.
    """
    if num_threads < 1:
        raise ValueError(f"need at least one thread, got {num_threads}")
    lock = threading.Lock()

    def work(doc_id: int) -> int:
        rows = list(_read_rows(docs.get(doc_id)))
        with lock:
            for row, movie in rows:
                index.add_movie(movie, doc_id, row)
        return len(rows)

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        return sum(pool.map(work, list(docs)))