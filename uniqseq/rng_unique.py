# uniqseq/rng_unique.py
# Unique sequence generator over [0, range) built on finite fields.
# State: (index, intermediate_offset, prime, range), four integers whatever the range.
# Update: index walks [0, prime) linearly; output is the quadratic residue
# permutation applied twice, with cycle walking to skip values >= range.

import logging

from uniqseq import config
from uniqseq.base import SequenceGenerator
from uniqseq.errors import ZeroRangeError
from uniqseq.primes import next_suitable_prime

logger = logging.getLogger('uniqseq.rng_unique')

# Number of times the permutation is composed per step. Output order depends
# on it; bump SEQUENCE_VERSION whenever it changes.
QPR_ROUNDS = 2
SEQUENCE_VERSION = 1


def permute_qpr(x, prime):
    """
    Bijection of [0, prime) for prime % 4 == 3.

    x^2 and (prime - x)^2 share a residue, so the upper half of the domain is
    folded onto the negated residue.
    """
    if x >= prime:
        return x  # only for callers passing values outside the field
    residue = (x * x) % prime
    return residue if x <= prime // 2 else prime - residue


class UniqueSeq(SequenceGenerator):
    """
    Emits every integer of [0, range) exactly once per period, in an order
    fixed by `seed`. Calling next() more than `range` times starts the same
    cycle again.

    When range exceeds config.PRIME_CEILING the prime is clamped to it and
    only the first PRIME_CEILING outputs are guaranteed distinct.
    """

    def __init__(self, range_, seed=0x1):
        if range_ < 1:
            raise ZeroRangeError(range_)
        super().__init__(range_)
        if range_ > config.PRIME_CEILING:
            self.prime = config.PRIME_CEILING
            logger.warning(f"range {range_} exceeds {config.PRIME_CEILING}, clamping prime; "
                           f"uniqueness only holds for the first {self.prime} values")
        else:
            self.prime = next_suitable_prime(range_)
        self.intermediate_offset = max(self.prime - range_, 0)
        # scramble the starting point from the seed
        start = (self._permute(seed % self.prime) + 2 * self.prime - range_) % self.prime
        self.index = self._permute(start)

    @property
    def clamped(self):
        return self.prime < self.range

    def _permute(self, x):
        return permute_qpr(x, self.prime)

    def _step(self):
        res = self.index
        for _ in range(QPR_ROUNDS):
            res = self._permute(res)
        self.index = (self.index + 1) % self.prime
        return res

    def next(self):
        res = self._step()
        # prime is a little bit bigger than range, so sometimes we need to loop
        while res >= self.range:
            res = self._step()
        return res

    def state(self):
        return (self.index, self.intermediate_offset, self.prime, self.range)
