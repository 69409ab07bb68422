"""Text reports of indexed movies."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from typing import TextIO

from moviesearch.movie import EMPTY, Movie
from moviesearch.movie_index import MovieIndex


def output_movie_set(movies: Iterable[Movie], desc: str, output: TextIO) -> None:
    """Write one set: its description, then one indented title per movie."""
    output.write(f"Movie set: {desc}\n")
    for movie in movies:
        output.write(f"    {movie.title or EMPTY}\n")


def output_report(index: MovieIndex, output: TextIO) -> None:
    """Write every set in the index, ordered by key."""
    for movie_set in index.sets:
        output_movie_set(movie_set.movies, movie_set.desc, output)


def print_report(index: MovieIndex) -> None:
    """Write the report to standard output."""
    output_report(index, sys.stdout)


def save_report(index: MovieIndex, filename: str | os.PathLike[str]) -> None:
    """Write the report to the named file."""
    with open(filename, "w", encoding="utf-8") as handle:
        output_report(index, handle)