"""
The two lazy generators feeding the recurrence.

GapSequence yields the distances between consecutive generalized
pentagonal numbers: 1, 1, 3, 2, 5, 3, 7, 4, ...
OffsetSequence sums those gaps into the pentagonal numbers themselves
(1, 2, 5, 7, 12, 15, ...) and tags each with its sign in the recurrence
(ADD, ADD, SUB, SUB, ADD, ADD, ...).

Both are plain iterators with explicit cursor state. They only move
forward; there is no reset. Keeping the cursor in attributes (instead of
inside a generator frame) is what lets RecurrenceState serialize them.
"""

from typing import Optional

from .state import Term, ADD, SUB


class GapSequence:
    """
    Interleaves two counters, starting with the even-position one:
        even positions: 1, 3, 5, 7, ...   (+2 each use)
        odd positions:  1, 2, 3, 4, ...   (+1 each use)
    """

    def __init__(self, odd: bool = False, even_value: int = 1, odd_value: int = 1):
        self.odd = odd
        self.even_value = even_value
        self.odd_value = odd_value

    def __iter__(self):
        return self

    def __next__(self) -> int:
        if self.odd:
            gap = self.odd_value
            self.odd_value += 1
        else:
            gap = self.even_value
            self.even_value += 2
        self.odd = not self.odd
        return gap

    def to_dict(self):
        return {"odd": self.odd, "even_value": self.even_value,
                "odd_value": self.odd_value}

    @classmethod
    def from_dict(cls, d):
        return cls(bool(d["odd"]), int(d["even_value"]), int(d["odd_value"]))

    def __repr__(self):
        return (f"GapSequence(odd={self.odd}, even_value={self.even_value}, "
                f"odd_value={self.odd_value})")


class OffsetSequence:
    """
    Running sum of gaps, each partial sum emitted as a Term.

    The sign depends only on how many terms came before:
        sign = SUB if (produced // 2) % 2 == 1 else ADD
    which flips every second term.
    """

    def __init__(self, gaps: Optional[GapSequence] = None, offset: int = 0, produced: int = 0):
        self.gaps = gaps if gaps is not None else GapSequence()
        self.offset = offset
        self.produced = produced

    def __iter__(self):
        return self

    def __next__(self) -> Term:
        self.offset += next(self.gaps)
        sign = SUB if (self.produced // 2) % 2 == 1 else ADD
        self.produced += 1
        return Term(self.offset, sign)

    def to_dict(self):
        return {"offset": self.offset, "produced": self.produced}

    @classmethod
    def from_dict(cls, d, gaps: GapSequence):
        return cls(gaps, int(d["offset"]), int(d["produced"]))

    def __repr__(self):
        return f"OffsetSequence(offset={self.offset}, produced={self.produced})"


def generalized_pentagonal(k: int) -> int:
    """
    k-th generalized pentagonal number, counting from k=0 -> 1.

    Closed form m(3m - 1)/2 for m = 1, -1, 2, -2, 3, ...
    Not used by the recurrence; it exists to check OffsetSequence against.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    m = k // 2 + 1
    if k % 2 == 1:
        m = -m
    return m * (3 * m - 1) // 2
