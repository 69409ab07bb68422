"""Control messages exchanged between query client and server."""

from __future__ import annotations

import socket

ACK = "ACK"
GOODBYE = "GOODBYE"
KILL = "KILL"


def _matches(response: str | bytes, message: str) -> bool:
    if isinstance(response, (bytes, bytearray)):
        try:
            response = bytes(response).decode("utf-8")
        except UnicodeDecodeError:
            return False
    return response.rstrip("\0") == message


def send_ack(sock: socket.socket) -> None:
    """Send an acknowledgement; raises OSError on failure."""
    sock.sendall(ACK.encode("utf-8"))


def check_ack(response: str | bytes) -> bool:
    """Whether a received message is an acknowledgement."""
    return _matches(response, ACK)


def send_goodbye(sock: socket.socket) -> None:
    """Send a goodbye; raises OSError on failure."""
    sock.sendall(GOODBYE.encode("utf-8"))


def check_goodbye(response: str | bytes) -> bool:
    """Whether a received message is a goodbye."""
    return _matches(response, GOODBYE)


def send_kill(sock: socket.socket) -> None:
    """Send a kill request; raises OSError on failure."""
    sock.sendall(KILL.encode("utf-8"))


def check_kill(response: str | bytes) -> bool:
    """Whether a received message is a kill request."""
    return _matches(response, KILL)