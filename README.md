# moviesearch

`moviesearch` crawls a directory of movie data files, builds an inverted
index of the words in the movie titles, and answers title-word queries over
a small TCP protocol. It has no dependencies beyond the standard library.

## Data format

Each data file holds one movie per line, with nine fields separated by `|`
and a `-` standing for an empty value:

```
id       |type |Title1   |Title2   |IsAdult|Year|?|?|Genres
tt0003609|movie|Alexandra|Alexandra|0      |1915|-|-|-
```

Genres are a comma-separated list (at most ten are kept). Blank lines and
rows that do not have nine fields or have a non-numeric adult flag, year or
runtime are skipped when a file is indexed.

Title words are indexed in lower case with whitespace and punctuation
trimmed from both ends, so a search for `Seattle`, `seattle` or `seattle,`
finds the same movies. A query is a single word.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running a server

The single-connection server handles one client at a time:

```
moviesearch-server -f path/to/data -p 1500
```

The concurrent server serves each connection in its own thread, so several
clients can be answered at once. Add `-d` to make each connection wait ten
seconds before it is answered, which helps when testing several clients at
the same time:

```
moviesearch-multiserver -f path/to/data -p 1500
```

Both servers listen on `localhost` at the port given with `-p`. They crawl
the directory and index every file in it before they begin listening; if
`-p` or `-f` is missing, or the index ends up empty, they print a message
and stop. Press Ctrl-C to stop a running server. The single-connection
server also stops when a client fails to acknowledge a message; the
concurrent server only drops that client's connection. The `-d` option is
accepted by `moviesearch-server` but has no effect there.

## Querying

```
moviesearch-client 127.0.0.1 1500
```

Given no arguments (or the wrong number), the client says so and uses
`127.0.0.1` port `1500`. It first checks that a server answers at the
address, then prompts for search terms read from standard input. For each
term it prints a report of the matching movies, grouped by year:

```
Movie set: 1915
    Alexandra
Goodbye received.
Socket closed.
```

Enter `q`, or end the input, to quit.

## Protocol

1. The server sends `ACK` as soon as a connection is accepted.
2. The client sends its query term (at most 1000 bytes), or `GOODBYE` to
   close the connection.
3. The server replies with the number of results as a 4-byte little-endian
   signed integer.
4. The client sends `ACK`.
5. For each result, the server sends the matching data row and waits for
   the client's `ACK`.
6. The server sends `GOODBYE` and closes the connection.

`moviesearch.protocol` also defines a `KILL` message (`send_kill`,
`check_kill`); neither server acts on it.

## Library use

The building blocks can also be used from Python:

- `moviesearch.movie`: `Movie`, `IndexField`, `create_movie_from_row`
- `moviesearch.docidmap`: `DocIdMap` and `crawl_files_to_map`
- `moviesearch.docset`: `DocumentSet`, the (document id, row) references
  for one title word
- `moviesearch.title_index`: `MovieTitleIndex`, `index_the_file`,
  `parse_the_files`, and `parse_the_files_mt` for indexing with a pool of
  threads
- `moviesearch.query`: `SearchResult`, `iter_search_results`, `find_movies`
- `moviesearch.util`: `trim`, `clean_string`, `copy_row_from_file`
- `moviesearch.movie_index`: `MovieSet`, `MovieIndex`, `read_file` and
  `build_movie_index` for grouping movies by genre, year, type or id
- `moviesearch.report`: `output_report`, `print_report`, `save_report`
- `moviesearch.server`: `QueryService`, `build_service`, `serve`
- `moviesearch.multiserver`: `serve_forking`
- `moviesearch.client`: `run_query`, `check_server`, `run_prompt`

For example:

```python
from moviesearch.docidmap import DocIdMap, crawl_files_to_map
from moviesearch.title_index import MovieTitleIndex, parse_the_files
from moviesearch.query import find_movies
from moviesearch.util import copy_row_from_file

docs = DocIdMap()
crawl_files_to_map("data", docs)
index = MovieTitleIndex()
parse_the_files(docs, index)
for result in find_movies(index, "seattle"):
    print(copy_row_from_file(result, docs))
```

A report of movies grouped by year:

```python
from moviesearch.movie import IndexField
from moviesearch.movie_index import build_movie_index, read_file
from moviesearch.report import print_report

print_report(build_movie_index(read_file("data/movies.txt"), IndexField.YEAR))
```

## What it does not do

The index lives in memory only: it is rebuilt from the data files each time
a server starts and is not saved anywhere. Queries match one title word at
a time; there are no phrase, multi-word or ranked searches, and the servers
cannot be shut down remotely.