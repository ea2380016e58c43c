# uniqseq/rng_baseline.py
# Reference generators: uniform draws with rejection of already emitted values.
# Used to validate and benchmark UniqueSeq, not meant for large universes.

import os
from random import Random

from uniqseq.base import SequenceGenerator
from uniqseq.errors import UniverseExhaustedError, ZeroRangeError


class _RejectionGenerator(SequenceGenerator):
    def __init__(self, range_, seed=None):
        if range_ < 1:
            raise ZeroRangeError(range_)
        super().__init__(range_)
        if seed is None:
            seed = int.from_bytes(os.urandom(4), 'big')
        self.seed = seed
        self.rng = Random(seed)  # Mersenne Twister
        self.emitted = 0

    def _draw(self):
        return self.rng.randrange(self.range)

    def _seen(self, candidate):
        raise NotImplementedError

    def _accept(self, candidate):
        raise NotImplementedError

    def next(self):
        if self.emitted >= self.range:
            raise UniverseExhaustedError(
                f"all {self.range} values of the universe were already emitted")
        candidate = self._draw()
        while self._seen(candidate):
            candidate = self._draw()
        self._accept(candidate)
        self.emitted += 1
        return candidate


class NaiveRejectionGenerator(_RejectionGenerator):
    """Scans every accepted value before accepting a new draw."""

    def __init__(self, range_, seed=None):
        super().__init__(range_, seed)
        self.accepted = []

    def _seen(self, candidate):
        not_in_seq = True
        for value in self.accepted:
            if value == candidate:
                not_in_seq = False
        return not not_in_seq

    def _accept(self, candidate):
        self.accepted.append(candidate)


class BitmapRejectionGenerator(_RejectionGenerator):
    """
    Keeps one byte per universe value to reject duplicates in O(1).
    It requires memory for the whole universe, so if count is a lot smaller
    than the universe it is not interesting.
    """

    def __init__(self, range_, seed=None):
        super().__init__(range_, seed)
        self.already_seen = bytearray(range_)

    def _seen(self, candidate):
        return self.already_seen[candidate] == 1

    def _accept(self, candidate):
        self.already_seen[candidate] = 1
