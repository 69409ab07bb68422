"""Movie records and parsing of pipe-separated data rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

NUM_GENRES = 10
EMPTY = "-"
_NUM_FIELDS = 9


class IndexField(Enum):
    """Fields of a movie that an index can be built on."""

    GENRE = "genre"
    YEAR = "year"
    TYPE = "type"
    ID = "id"


@dataclass
class Movie:
    """Information about one movie; missing values are None."""

    id: str | None = None
    type: str | None = None
    title: str | None = None
    is_adult: bool | None = None
    year: int | None = None
    runtime: int | None = None
    genres: list[str] = field(default_factory=list)


def _text(value: str) -> str | None:
    return None if value in ("", EMPTY) else value


def _number(value: str, name: str) -> int | None:
    if value in ("", EMPTY):
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"invalid {name}: {value!r}") from None


def create_movie_from_row(row: str) -> Movie:
    """Build a Movie from a row such as
    ``tt0003609|movie|Alexandra|Alexandra|0|1915|-|-|-``.

    Fields are separated by ``|`` and ``-`` marks an empty value.
    Raises ValueError for a malformed row.
    """
    fields = row.rstrip("\r\n").split("|")
    if len(fields) != _NUM_FIELDS:
        raise ValueError(
            f"expected {_NUM_FIELDS} fields, got {len(fields)}: {row!r}"
        )
    movie_id, kind, title, _original, adult, year, _end, runtime, genres = fields

    adult_flag = _number(adult, "adult flag")
    genre_text = _text(genres)
    genre_list = (
        []
        if genre_text is None
        else [genre for genre in genre_text.split(",") if genre][:NUM_GENRES]
    )
    return Movie(
        id=_text(movie_id),
        type=_text(kind),
        title=_text(title),
        is_adult=None if adult_flag is None else bool(adult_flag),
        year=_number(year, "year"),
        runtime=_number(runtime, "runtime"),
        genres=genre_list,
    )