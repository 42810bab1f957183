"""Pytest configuration and shared fixtures."""

import socket
import threading

import pytest

from means_to_an_end.server import PriceServer


@pytest.fixture
def server_factory():
    """Start live PriceServers on ephemeral localhost ports, shut down after the test."""
    running = []

    def _start(**kwargs):
        server = PriceServer(('127.0.0.1', 0), **kwargs)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        running.append((server, thread))
        return server

    yield _start
    for server, thread in running:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def server(server_factory):
    return server_factory()


@pytest.fixture
def connect(server):
    """Open raw sockets to the live server, closed after the test."""
    socks = []

    def _connect():
        sock = socket.create_connection(server.server_address[:2], timeout=5)
        socks.append(sock)
        return sock

    yield _connect
    for sock in socks:
        sock.close()


@pytest.fixture
def read_until_eof():
    def _read(sock):
        data = b''
        while True:
            chunk = sock.recv(4096)
            if not chunk:
                return data
            data += chunk

    return _read
