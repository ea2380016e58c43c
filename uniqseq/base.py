# uniqseq/base.py
# Common interface of every sequence generator (qpr, naive, bitmap).


class SequenceGenerator:
    """Emits integers from [0, range) one call at a time."""

    def __init__(self, range_):
        self.range = range_

    def next(self):
        raise NotImplementedError

    def take(self, count):
        # calls next() exactly `count` times, in emission order
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return [self.next() for _ in range(count)]
