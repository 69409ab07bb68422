"""Movie sets, indexes of movies by field, and reading movie data files."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from moviesearch.movie import IndexField, Movie, create_movie_from_row

NONE_KEY = "NONE"


@dataclass
class MovieSet:
    """A described collection of related movies."""

    desc: str
    movies: list[Movie] = field(default_factory=list)

    def add(self, movie: Movie) -> bool:
        """Add a movie; return False if it or one with its id is present."""
        for existing in self.movies:
            if existing is movie or (movie.id is not None and existing.id == movie.id):
                return False
        self.movies.append(movie)
        return True


def compute_key(movie: Movie, field: IndexField) -> tuple[str, ...]:
    """Keys under which a movie is filed for the given field.

    A movie with no value for the field is filed under ``NONE``.
    """
    if field is IndexField.GENRE:
        keys: tuple[str, ...] = tuple(movie.genres)
    elif field is IndexField.YEAR:
        keys = () if movie.year is None else (str(movie.year),)
    elif field is IndexField.TYPE:
        keys = () if movie.type is None else (movie.type,)
    elif field is IndexField.ID:
        keys = () if movie.id is None else (movie.id,)
    else:
        raise ValueError(f"unknown index field: {field!r}")
    return keys or (NONE_KEY,)


class MovieIndex:
    """Movie sets keyed by the value of one movie field."""

    def __init__(self) -> None:
        self._sets: dict[str, MovieSet] = {}
        self.movies: list[Movie] = []
        self._seen: set[int] = set()

    def add(self, movie: Movie, field: IndexField) -> None:
        """File a movie under its value(s) for ``field``."""
        for key in compute_key(movie, field):
            self._sets.setdefault(key, MovieSet(key)).add(movie)
        if id(movie) not in self._seen:
            self._seen.add(id(movie))
            self.movies.append(movie)

    def get(self, term: str) -> MovieSet | None:
        """The set for a term, or None if nothing is filed under it."""
        return self._sets.get(term)

    @property
    def sets(self) -> list[MovieSet]:
        """All movie sets, ordered by key."""
        return [self._sets[key] for key in sorted(self._sets)]

    def __len__(self) -> int:
        return len(self._sets)


def read_file(filename: str | os.PathLike[str]) -> list[Movie]:
    """Read the movies of a data file, skipping blank and malformed rows."""
    movies = []
    with open(filename, encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            try:
                movies.append(create_movie_from_row(line))
            except ValueError:
                continue
    return movies


def build_movie_index(movies: Iterable[Movie], field: IndexField) -> MovieIndex:
    """Index the given movies on ``field``."""
    index = MovieIndex()
    for movie in movies:
        index.add(movie, field)
    return index