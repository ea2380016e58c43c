# uniqseq/strategies.py
# Runtime selection of the generation algorithm, plus the list-returning
# forms used by the benchmark harness.

from uniqseq.rng_baseline import BitmapRejectionGenerator, NaiveRejectionGenerator
from uniqseq.rng_unique import UniqueSeq

GENERATORS = {
    'qpr': UniqueSeq,
    'naive': NaiveRejectionGenerator,
    'bitmap': BitmapRejectionGenerator,
}


def make_generator(mode, range_, seed=None):
    try:
        cls = GENERATORS[mode]
    except KeyError:
        raise ValueError(f"unknown generator mode '{mode}', expected one of {sorted(GENERATORS)}")
    if seed is None and cls is UniqueSeq:
        return cls(range_)
    return cls(range_, seed)


def choose_naive(count, universe_size, seed=None):
    return NaiveRejectionGenerator(universe_size, seed).take(count)


def choose_bitmap(count, universe_size, seed=None):
    return BitmapRejectionGenerator(universe_size, seed).take(count)


def choose_smart(count, universe_size, seed=None):
    # guaranteed period, no check required
    return make_generator('qpr', universe_size, seed).take(count)


CHOOSERS = {
    'qpr': choose_smart,
    'naive': choose_naive,
    'bitmap': choose_bitmap,
}
