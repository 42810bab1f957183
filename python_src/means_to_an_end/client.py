import socket

from .codec import REPLY, decode_reply, encode_insert, encode_query, recv_exact


class PriceClient:
    def __init__(self, host, port, timeout=None):
        self.sock = socket.create_connection((host, port), timeout=timeout)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def insert(self, timestamp, price):
        self.sock.sendall(encode_insert(timestamp, price))

    def query(self, min_time, max_time):
        self.sock.sendall(encode_query(min_time, max_time))
        data = recv_exact(self.sock, REPLY.size)
        if len(data) < REPLY.size:
            raise ConnectionError('Unable to read')
        return decode_reply(data)

    def close(self):
        if self.sock is None:
            return
        self.sock.close()
        self.sock = None
