"""Query server answering title searches one connection at a time."""

from __future__ import annotations

import argparse
import os
import socket
import struct
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from moviesearch.docidmap import DocIdMap, crawl_files_to_map
from moviesearch.protocol import check_ack, check_goodbye, send_ack, send_goodbye
from moviesearch.query import find_movies
from moviesearch.title_index import MovieTitleIndex, parse_the_files
from moviesearch.util import copy_row_from_file

BUFFER_SIZE = 1000
BACKLOG = 10
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 1500
RESULT_COUNT = struct.Struct("<i")


@dataclass
class QueryService:
    """Indexed movie files together with the query protocol over them."""

    docs: DocIdMap = field(default_factory=DocIdMap)
    index: MovieTitleIndex = field(default_factory=MovieTitleIndex)

    def handle_query(self, conn: socket.socket, query: str) -> bool:
        """Send the rows matching ``query``, each acknowledged, then a goodbye.

        Returns False if the client fails to acknowledge a message.
        """
        results = find_movies(self.index, query)
        print(f"Receiving {len(results)} results")
        conn.sendall(RESULT_COUNT.pack(len(results)))
        if not check_ack(conn.recv(BUFFER_SIZE)):
            print("Ack not received.")
            return False
        for result in results:
            conn.sendall(copy_row_from_file(result, self.docs).encode("utf-8"))
            if not check_ack(conn.recv(BUFFER_SIZE)):
                print("Ack never received.")
                return False
        send_goodbye(conn)
        return True

    def handle_connection(self, conn: socket.socket) -> bool:
        """Serve one accepted connection and close it.

        Returns False if the exchange broke off for want of an acknowledgement.
        """
        with conn:
            send_ack(conn)
            data = conn.recv(BUFFER_SIZE)
            if not data:
                return True
            query = data.decode("utf-8", errors="replace")
            if check_goodbye(query):
                return True
            return self.handle_query(conn, query)


def build_service(directory: str | os.PathLike[str]) -> QueryService:
    """Crawl ``directory`` and index the movie titles of every file in it."""
    print(f"Crawling directory tree starting at: {os.fspath(directory)}")
    service = QueryService()
    crawl_files_to_map(directory, service.docs)
    print(f"Crawled {len(service.docs)} files.")
    if len(service.docs) < 1:
        print("No documents found.")
        return service
    print("Parsing and indexing files...")
    parse_the_files(service.docs, service.index)
    print(f"{len(service.index)} entries in the index.")
    return service


def serve(service: QueryService, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Accept connections one after another until a client breaks the protocol."""
    with socket.create_server((host, port), backlog=BACKLOG) as listener:
        while True:
            conn, _ = listener.accept()
            if not service.handle_connection(conn):
                break


def _parse(argv: Sequence[str] | None, prog: str) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=prog, description="Serve movie title searches.")
    parser.add_argument("-f", dest="directory", help="directory of movie data files")
    parser.add_argument("-p", dest="port", type=int, help="port to listen on")
    parser.add_argument("-d", dest="debug", action="store_true", help="debug mode")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the query server from the command line."""
    args = _parse(sys.argv[1:] if argv is None else argv, "queryserver")
    if args.port is None:
        print("No port provided; please include with a -p flag.")
        return 0
    if args.directory is None:
        print("No directory provided; please include with a -f flag.")
        return 0
    try:
        service = build_service(args.directory)
    except FileNotFoundError as err:
        print(err)
        return 1
    if len(service.index) == 0:
        print("No entries in index. Quitting. ")
        return 0
    try:
        serve(service, DEFAULT_HOST, args.port)
    except KeyboardInterrupt:
        print("Exit signal sent. Cleaning up...")
    return 0


if __name__ == "__main__":
    sys.exit(main())