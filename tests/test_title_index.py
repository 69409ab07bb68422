from pathlib import Path

import pytest

from moviesearch.docidmap import DocIdMap
from moviesearch.movie import Movie, create_movie_from_row
from moviesearch.title_index import (
    MovieTitleIndex,
    index_the_file,
    parse_the_files,
    parse_the_files_mt,
)

ROW = "tt0003609|movie|Alexandra|Alexandra|0|1915|-|-|-"


def _write(path: Path, rows):
    path.write_text("".join(row + "\n" for row in rows), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    _write(
        tmp_path / "a.txt",
        [
            ROW,
            "tt0000001|movie|The Big Day|The Big Day|0|1950|-|90|Drama",
            "not a movie row",
            "",
            "tt0000002|short|Big, Bad Wolf!|Big Bad Wolf|0|1960|-|10|Comedy",
        ],
    )
    _write(
        tmp_path / "b.txt",
        ["tt0000003|movie|Day One|Day One|0|2001|-|100|Action"],
    )
    return tmp_path


def test_add_movie_and_get_is_case_insensitive():
    index = MovieTitleIndex()
    filed = index.add_movie(create_movie_from_row(ROW), 7, 3)
    assert filed == 1
    found = index.get("ALEXANDRA")
    assert found is not None
    assert found.contains_doc(7)
    assert found.rows(7) == (3,)
    assert len(index) == 1


def test_movie_without_title_files_nothing():
    index = MovieTitleIndex()
    assert index.add_movie(Movie(id="tt1"), 1, 0) == 0
    assert len(index) == 0


def test_missing_term_gives_none():
    index = MovieTitleIndex()
    index.add_movie(create_movie_from_row(ROW), 1, 0)
    assert index.get("nothing") is None


def test_punctuation_is_trimmed_from_words(data_dir):
    index = MovieTitleIndex()
    index_the_file(data_dir / "a.txt", 1, index)
    wolf = index.get("wolf")
    assert wolf is not None
    assert wolf.rows(1) == (4,)
    assert index.get("big").rows(1) == (1, 4)
    assert all(term == term.lower() for term in index.terms)


def test_index_the_file_counts_good_rows(data_dir):
    index = MovieTitleIndex()
    assert index_the_file(data_dir / "a.txt", 1, index) == 3


def test_index_the_file_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        index_the_file(tmp_path / "absent.txt", 1, MovieTitleIndex())


def _docs(directory):
    docs = DocIdMap()
    for path in sorted(directory.iterdir()):
        docs.add(str(path))
    return docs


def test_parse_the_files_spans_documents(data_dir):
    docs = _docs(data_dir)
    index = MovieTitleIndex()
    assert parse_the_files(docs, index) == 4
    day = index.get("day")
    assert day.contains_doc(1)
    assert day.contains_doc(2)
    assert len(day) == 2


@pytest.mark.parametrize("threads", [1, 2, 5])
def test_threaded_parse_matches_serial(data_dir, threads):
    docs = _docs(data_dir)
    serial = MovieTitleIndex()
    threaded = MovieTitleIndex()
    assert parse_the_files_mt(docs, threaded, threads) == parse_the_files(docs, serial)
    assert threaded.terms == serial.terms
    for term in serial.terms:
        assert threaded.get(term).doc_index == serial.get(term).doc_index


def test_threaded_parse_rejects_zero_threads(data_dir):
    with pytest.raises(ValueError):
        parse_the_files_mt(_docs(data_dir), MovieTitleIndex(), 0)