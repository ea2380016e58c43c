# uniqseq/primes.py
# Selection of the field modulus used by the quadratic residue permutation.

import logging

from sympy import nextprime

from uniqseq import config
from uniqseq.errors import PrimeSearchExhausted

logger = logging.getLogger('uniqseq.primes')


def next_suitable_prime(n, limit=config.PRIME_CEILING, max_steps=config.PRIME_SEARCH_MAX_STEPS):
    """
    Smallest prime p >= n with p % 4 == 3.

    Only such primes make x -> x^2 mod p foldable into a bijection, since -1
    is then a quadratic non-residue.
    Raises PrimeSearchExhausted if the search passes `limit` or takes more
    than `max_steps` candidates.
    """
    prime = max(n, 2) - 1
    for _ in range(max_steps):
        prime = nextprime(prime)  # strictly greater than its argument
        if prime > limit:
            raise PrimeSearchExhausted(
                f"no prime p % 4 == 3 between {n} and {limit}")
        if prime % 4 == 3:
            logger.debug(f"selected prime {prime} for n={n}")
            return prime
    raise PrimeSearchExhausted(
        f"no prime p % 4 == 3 found within {max_steps} primes from {n}")
