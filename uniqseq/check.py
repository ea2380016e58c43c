# uniqseq/check.py
# Validity check of a generated sequence (each number is unique).

from dataclasses import dataclass
from typing import Optional

from uniqseq.errors import DuplicateDetected


@dataclass(frozen=True)
class CheckResult:
    valid: bool
    first: Optional[int] = None
    second: Optional[int] = None
    value: Optional[int] = None

    def __bool__(self):
        return self.valid

    def raise_for_duplicate(self):
        if not self.valid:
            raise DuplicateDetected(self.first, self.second, self.value)

    def to_dict(self):
        return {'ok': self.valid, 'first': self.first,
                'second': self.second, 'value': self.value}


def check(seq):
    """
    Find the first repeated value of `seq`.
    Returns CheckResult(valid=True) for a duplicate-free sequence, otherwise
    the positions (first, second) of the earliest repeat and its value.
    """
    positions = {}
    for j, value in enumerate(seq):
        i = positions.get(value)
        if i is not None:
            return CheckResult(False, i, j, value)
        positions[value] = j
    return CheckResult(True)
