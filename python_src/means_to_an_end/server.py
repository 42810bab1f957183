import itertools
import logging
import socketserver

from .session import SessionHandler

log = logging.getLogger(__name__)


class PriceServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, server_address, handler=SessionHandler, idle_timeout=None):
        if idle_timeout is not None and idle_timeout <= 0:
            raise ValueError('idle_timeout must be positive, got %r' % idle_timeout)
        self.idle_timeout = idle_timeout
        self.connection_ids = itertools.count()
        super().__init__(server_address, handler)

    def get_request(self):
        # socketserver drops a failed accept and keeps serving; just say so
        try:
            return super().get_request()
        except OSError as e:
            log.warning("Accept failed: %s", e)
            raise

    def handle_error(self, request, client_address):
        log.exception("Unhandled error from %s", client_address)


def run(server):
    """Serve an already bound server until shutdown, then close it."""
    with server:
        host, port = server.server_address[:2]
        log.info("Listening on %s:%d", host, port)
        server.serve_forever()


def serve(host='0.0.0.0', port=8080, idle_timeout=None):
    """Bind and serve forever. A bind failure raises OSError."""
    run(PriceServer((host, port), idle_timeout=idle_timeout))
