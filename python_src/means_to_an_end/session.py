import logging
import socketserver

from .codec import FRAME, Insert, Query, decode, encode_reply, recv_exact
from .ledger import PriceLedger

log = logging.getLogger(__name__)


class ProtocolError(Exception):
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg


class IncompleteFrame(ProtocolError):
    pass


class UnknownMessage(ProtocolError):
    pass


class SessionHandler(socketserver.BaseRequestHandler):
    """
    One connection: reads 9 byte frames until EOF, answering each query with a
    4 byte mean. The ledger lives exactly as long as the connection.
    """

    def setup(self):
        self.conn = next(self.server.connection_ids)
        self.ledger = PriceLedger()
        self.inserts = 0
        self.queries = 0
        timeout = getattr(self.server, 'idle_timeout', None)
        if timeout:
            self.request.settimeout(timeout)
        log.info("Opened stream peer=%s conn=%d", self.peer, self.conn)

    @property
    def peer(self):
        host, port = self.client_address[:2]
        return '%s:%s' % (host, port)

    def handle(self):
        try:
            while True:
                frame = self.read_frame()
                if frame is None:
                    break
                self.dispatch(decode(frame))
        except ProtocolError as e:
            log.warning("Protocol error conn=%d: %s", self.conn, e.msg)
        except OSError as e:
            log.warning("Transport error conn=%d: %s", self.conn, e)

    def finish(self):
        log.info("Closing stream peer=%s conn=%d inserts=%d queries=%d stored=%d",
                 self.peer, self.conn, self.inserts, self.queries, len(self.ledger))
        self.ledger = None

    def dispatch(self, message):
        if isinstance(message, Insert):
            log.debug("conn=%d I: (%d,%d)", self.conn, message.timestamp, message.price)
            self.ledger.insert(message.timestamp, message.price)
            self.inserts += 1
        elif isinstance(message, Query):
            mean = self.ledger.query_mean(message.min_time, message.max_time)
            log.debug("conn=%d Q: (%d,%d) -> %d",
                      self.conn, message.min_time, message.max_time, mean)
            self.request.sendall(encode_reply(mean))
            self.queries += 1
        else:
            raise UnknownMessage('unknown message type %r' % message.tag)

    def read_frame(self):
        """Read exactly one frame. None on EOF between frames."""
        buf = recv_exact(self.request, FRAME.size)
        if not buf:
            return None
        if len(buf) < FRAME.size:
            raise IncompleteFrame('EOF after %d of %d bytes' % (len(buf), FRAME.size))
        return buf
