"""Query server that handles each connection concurrently in its own worker."""

from __future__ import annotations

import socket
import sys
import threading
import time
from collections.abc import Sequence

from moviesearch.server import (
    BACKLOG,
    DEFAULT_HOST,
    DEFAULT_PORT,
    QueryService,
    _parse,
    build_service,
)

DEBUG_SLEEP = 10


def _run_connection(service: QueryService, conn: socket.socket, debug: bool) -> None:
    with conn:
        if debug:
            time.sleep(DEBUG_SLEEP)
        try:
            service.handle_connection(conn)
        except Exception:
            # A misbehaving client only ends its own connection.
            pass
        finally:
            sys.stdout.flush()


def serve_forking(
    service: QueryService,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    debug: bool = False,
) -> None:
    """Accept connections forever, serving each in its own worker thread.

    With ``debug`` set, each worker waits a while before answering.
    """
    with socket.create_server((host, port), backlog=BACKLOG) as listener:
        while True:
            conn, _ = listener.accept()
            worker = threading.Thread(
                target=_run_connection, args=(service, conn, debug), daemon=True
            )
            worker.start()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the concurrent query server from the command line."""
    args = _parse(sys.argv[1:] if argv is None else argv, "multiserver")
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
        serve_forking(service, DEFAULT_HOST, args.port, args.debug)
    except KeyboardInterrupt:
        print("Ahhh! SIGINT!")
    return 0


if __name__ == "__main__":
    sys.exit(main())