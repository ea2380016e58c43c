from uniqseq.check import CheckResult, check
from uniqseq.errors import (DuplicateDetected, PrimeSearchExhausted, UniqSeqError,
                            UniverseExhaustedError, ZeroRangeError)
from uniqseq.primes import next_suitable_prime
from uniqseq.rng_baseline import BitmapRejectionGenerator, NaiveRejectionGenerator
from uniqseq.rng_unique import SEQUENCE_VERSION, UniqueSeq, permute_qpr
from uniqseq.strategies import GENERATORS, make_generator

__version__ = '0.1.0'
