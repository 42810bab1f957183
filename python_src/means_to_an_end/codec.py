from collections import namedtuple
import struct

# Byte:  |  0  |  1     2     3     4  |  5     6     7     8  |
# Type:  |char |         int32         |         int32         |
FRAME = struct.Struct('!cii')
REPLY = struct.Struct('!i')

TAG_INSERT = b'I'
TAG_QUERY = b'Q'

Insert = namedtuple('Insert', 'timestamp price')
Query = namedtuple('Query', 'min_time max_time')
Malformed = namedtuple('Malformed', 'tag a b')


def decode(frame):
    """Decode one request frame into Insert, Query or Malformed."""
    if len(frame) != FRAME.size:
        raise ValueError('frame must be %d bytes, got %d' % (FRAME.size, len(frame)))
    tag, a, b = FRAME.unpack(frame)
    if tag == TAG_INSERT:
        return Insert(a, b)
    if tag == TAG_QUERY:
        return Query(a, b)
    return Malformed(tag, a, b)


def encode_insert(timestamp, price):
    return FRAME.pack(TAG_INSERT, timestamp, price)


def encode_query(min_time, max_time):
    return FRAME.pack(TAG_QUERY, min_time, max_time)


def encode_reply(mean):
    return REPLY.pack(mean)


def decode_reply(data):
    (mean,) = REPLY.unpack(data)
    return mean


def recv_exact(sock, size):
    """Read size bytes from sock. Returns fewer only if the peer hit EOF first."""
    buf = b''
    while len(buf) < size:
        chunk = sock.recv(size - len(buf))
        if not chunk:
            break
        buf += chunk
    return buf
