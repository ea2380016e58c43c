import pytest

from uniqseq.check import check
from uniqseq.errors import UniverseExhaustedError, ZeroRangeError
from uniqseq.rng_baseline import BitmapRejectionGenerator, NaiveRejectionGenerator

BASELINES = [NaiveRejectionGenerator, BitmapRejectionGenerator]


@pytest.mark.parametrize('cls', BASELINES)
def test_partial_take_is_unique_and_bounded(cls):
    values = cls(500, seed=11).take(300)
    assert check(values)
    assert all(0 <= v < 500 for v in values)


@pytest.mark.parametrize('cls', BASELINES)
def test_full_take_covers_universe(cls):
    assert sorted(cls(200, seed=1).take(200)) == list(range(200))


@pytest.mark.parametrize('cls', BASELINES)
def test_same_seed_same_sequence(cls):
    assert cls(1000, seed=4).take(100) == cls(1000, seed=4).take(100)


@pytest.mark.parametrize('cls', BASELINES)
def test_exhausted_universe(cls):
    g = cls(5, seed=3)
    g.take(5)
    with pytest.raises(UniverseExhaustedError):
        g.next()


@pytest.mark.parametrize('cls', BASELINES)
def test_zero_range_rejected(cls):
    with pytest.raises(ZeroRangeError):
        cls(0)


def test_unseeded_generator_gets_a_seed():
    g = BitmapRejectionGenerator(10)
    assert isinstance(g.seed, int)
    assert sorted(g.take(10)) == list(range(10))


def test_naive_and_bitmap_draw_the_same_stream():
    assert NaiveRejectionGenerator(300, seed=8).take(300) == BitmapRejectionGenerator(300, seed=8).take(300)
