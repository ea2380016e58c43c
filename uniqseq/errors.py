# uniqseq/errors.py
# Exceptions raised by the generators and the sequence checker


class UniqSeqError(Exception):
    pass


class ZeroRangeError(UniqSeqError, ValueError):
    def __init__(self, range_):
        super().__init__(f"range must be >= 1, got {range_}")
        self.range = range_


class PrimeSearchExhausted(UniqSeqError, RuntimeError):
    pass


class UniverseExhaustedError(UniqSeqError):
    pass


class DuplicateDetected(UniqSeqError):
    def __init__(self, first, second, value):
        super().__init__(f"Sequence mismatch: seq[{first}] == seq[{second}] == {value}")
        self.first = first
        self.second = second
        self.value = value
