import pytest

from uniqseq.errors import PrimeSearchExhausted
from uniqseq.primes import next_suitable_prime


@pytest.mark.parametrize('n, expected', [
    (0, 3), (1, 3), (2, 3), (3, 3), (4, 7), (10, 11), (12, 19), (100, 103), (1000, 1019),
])
def test_smallest_prime_congruent_to_three(n, expected):
    assert next_suitable_prime(n) == expected


def test_result_is_never_below_start():
    for n in range(1, 500):
        p = next_suitable_prime(n)
        assert p >= n
        assert p % 4 == 3


def test_ceiling_is_reachable():
    assert next_suitable_prime(4294967291) == 4294967291


def test_search_past_limit_fails():
    with pytest.raises(PrimeSearchExhausted):
        next_suitable_prime(4294967292)


def test_search_bounded_by_steps():
    # 13 and 17 are both 1 mod 4
    with pytest.raises(PrimeSearchExhausted):
        next_suitable_prime(12, max_steps=2)
