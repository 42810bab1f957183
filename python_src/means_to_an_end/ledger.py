from collections import namedtuple
import bisect

Observation = namedtuple('Observation', 'timestamp price')


def truncated_mean(total: int, count: int) -> int:
    # Python ints are unbounded, so the sum never overflows; // floors, so
    # divide the magnitude to truncate toward zero.
    if count == 0:
        return 0
    quotient = abs(total) // count
    return -quotient if total < 0 else quotient


class PriceLedger:
    """
    Prices recorded on one connection, kept sorted by timestamp.

    Timestamps and prices live in two parallel lists so a query range can be
    located with bisect. Equal timestamps are all kept, in arrival order.
    """

    def __init__(self):
        self.timestamps = []
        self.prices = []

    def __len__(self):
        return len(self.timestamps)

    def __iter__(self):
        return (Observation(t, p) for t, p in zip(self.timestamps, self.prices))

    def insert(self, timestamp: int, price: int) -> None:
        i = bisect.bisect_right(self.timestamps, timestamp)
        self.timestamps.insert(i, timestamp)
        self.prices.insert(i, price)

    def select(self, min_time: int, max_time: int):
        """Prices with min_time <= timestamp <= max_time."""
        if max_time < min_time:
            return []
        left = bisect.bisect_left(self.timestamps, min_time)
        right = bisect.bisect_right(self.timestamps, max_time, lo=left)
        return self.prices[left:right]

    def query_mean(self, min_time: int, max_time: int) -> int:
        selected = self.select(min_time, max_time)
        return truncated_mean(sum(selected), len(selected))
