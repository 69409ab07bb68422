import socket
import struct
import threading
import time

import pytest

from moviesearch.server import RESULT_COUNT, build_service, main, serve

ROWS = [
    "tt0000001|movie|The Big Sleep|The Big Sleep|0|1946|-|114|Crime,Drama",
    "tt0000002|movie|Big Fish|Big Fish|0|2003|-|125|Adventure",
    "tt0000003|short|Small Wonder|Small Wonder|0|1990|-|-|-",
]


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "movies.txt").write_text("\n".join(ROWS) + "\n", encoding="utf-8")
    return directory


@pytest.fixture
def service(data_dir):
    return build_service(str(data_dir))


def _recv_exact(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            raise ConnectionError("closed")
        data += chunk
    return data


def _start(service):
    server_side, client_side = socket.socketpair()
    client_side.settimeout(5)
    outcome = {}

    def run():
        outcome["ok"] = service.handle_connection(server_side)

    thread = threading.Thread(target=run)
    thread.start()
    return client_side, thread, outcome


def _free_port():
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_query_round_trip(service):
    client, thread, outcome = _start(service)
    with client:
        assert client.recv(1000) == b"ACK"
        client.sendall(b"big")
        (count,) = struct.unpack("<i", _recv_exact(client, 4))
        assert count == 2
        client.sendall(b"ACK")
        rows = []
        for _ in range(count):
            rows.append(client.recv(1500).decode("utf-8"))
            client.sendall(b"ACK")
        assert sorted(rows) == sorted(ROWS[:2])
        assert client.recv(1000) == b"GOODBYE"
    thread.join(5)
    assert outcome["ok"] is True


def test_query_without_results(service):
    client, thread, outcome = _start(service)
    with client:
        assert client.recv(1000) == b"ACK"
        client.sendall(b"nothing")
        assert _recv_exact(client, 4) == RESULT_COUNT.pack(0)
        client.sendall(b"ACK")
        assert client.recv(1000) == b"GOODBYE"
    thread.join(5)
    assert outcome["ok"] is True


def test_missing_ack_fails(service):
    client, thread, outcome = _start(service)
    with client:
        client.recv(1000)
        client.sendall(b"big")
        _recv_exact(client, 4)
        client.sendall(b"NOPE")
        thread.join(5)
        assert outcome["ok"] is False
        assert client.recv(1000) == b""


def test_goodbye_query_closes(service):
    client, thread, outcome = _start(service)
    with client:
        client.recv(1000)
        client.sendall(b"GOODBYE")
        thread.join(5)
        assert client.recv(1000) == b""
    assert outcome["ok"] is True


def test_count_wire_format():
    assert RESULT_COUNT.pack(2) == b"\x02\x00\x00\x00"


def test_empty_directory_gives_empty_index(tmp_path, capsys):
    empty = build_service(str(tmp_path))
    assert len(empty.docs) == 0
    assert len(empty.index) == 0
    assert "No documents found." in capsys.readouterr().out


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_service(str(tmp_path / "absent"))


def test_main_requires_port(data_dir, capsys):
    assert main(["-f", str(data_dir)]) == 0
    assert "No port provided" in capsys.readouterr().out


def test_main_requires_directory(capsys):
    assert main(["-p", "1500"]) == 0
    assert "No directory provided" in capsys.readouterr().out


def test_main_quits_without_entries(tmp_path, capsys):
    assert main(["-f", str(tmp_path), "-p", "0"]) == 0
    assert "No entries in index. Quitting." in capsys.readouterr().out


def test_serve_stops_when_ack_missing(service):
    port = _free_port()
    thread = threading.Thread(target=serve, args=(service, "127.0.0.1", port), daemon=True)
    thread.start()
    client = None
    for _ in range(200):
        try:
            client = socket.create_connection(("127.0.0.1", port), timeout=5)
            break
        except ConnectionRefusedError:
            time.sleep(0.02)
    assert client is not None
    with client:
        assert client.recv(1000) == b"ACK"
        client.sendall(b"big")
        _recv_exact(client, 4)
        client.sendall(b"NOPE")
    thread.join(5)
    assert not thread.is_alive()