"""Interactive client that sends title searches to a query server."""

from __future__ import annotations

import socket
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from moviesearch.movie import IndexField, Movie, create_movie_from_row
from moviesearch.movie_index import MovieIndex
from moviesearch.protocol import check_ack, check_goodbye, send_ack, send_goodbye
from moviesearch.report import output_report
from moviesearch.server import RESULT_COUNT

BUFFER_SIZE = 1000
SEARCH_RESULT_LENGTH = 1500
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 1500
QUIT = "q"


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            raise ConnectionError("server closed the connection")
        data += chunk
    return data


def run_query(host: str, port: int, query: str, output: TextIO) -> list[Movie]:
    """Send one search, write a report of the results, and return the movies.

    Raises ValueError for an over-long query and ConnectionError when the
    server does not follow the protocol.
    """
    payload = query.encode("utf-8")
    if len(payload) > BUFFER_SIZE:
        raise ValueError("Query length exceeded.")
    with socket.create_connection((host, port)) as sock:
        if not check_ack(sock.recv(BUFFER_SIZE)):
            raise ConnectionError("no acknowledgement from server")
        sock.sendall(payload)
        (count,) = RESULT_COUNT.unpack(_recv_exact(sock, RESULT_COUNT.size))
        send_ack(sock)
        index = MovieIndex()
        movies = []
        for _ in range(count):
            row = sock.recv(SEARCH_RESULT_LENGTH).decode("utf-8", errors="replace")
            movie = create_movie_from_row(row)
            index.add(movie, IndexField.YEAR)
            movies.append(movie)
            send_ack(sock)
        if movies:
            output_report(index, output)
        if not check_goodbye(sock.recv(BUFFER_SIZE)):
            raise ConnectionError("No goodbye?")
        output.write("Goodbye received.\n")
    output.write("Socket closed.\n")
    return movies


def check_server(host: str, port: int) -> bool:
    """Whether a query server answers at the address."""
    try:
        with socket.create_connection((host, port)) as sock:
            if not check_ack(sock.recv(BUFFER_SIZE)):
                return False
            send_goodbye(sock)
    except OSError:
        return False
    return True


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_prompt(host: str, port: int, input_stream: Iterable[str], output: TextIO) -> None:
    """Read search terms until ``q`` or end of input, running each as a query."""
    terms = _tokens(input_stream)
    while True:
        output.write("Enter a term to search for, or q to quit: ")
        term = next(terms, None)
        if term is None:
            output.write("\n")
            return
        output.write(f"input was: {term}\n")
        if term == QUIT:
            output.write("Thanks for playing!\n")
            return
        output.write("\n\n")
        try:
            run_query(host, port, term, output)
        except (OSError, ValueError) as err:
            output.write(f"{err}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive client: ``queryclient [IP] [port]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    host, port = DEFAULT_HOST, DEFAULT_PORT
    if len(args) != 2:
        print("Incorrect number of arguments. ")
        print("Correct usage: queryclient [IP] [port]")
    else:
        host = args[0]
        try:
            port = int(args[1])
        except ValueError:
            print(f"Invalid port: {args[1]}")
            return 1
    if not check_server(host, port):
        print(f"Cannot reach a query server at {host}:{port}")
        return 1
    run_prompt(host, port, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())