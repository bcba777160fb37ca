"""
Core data structures: Term, RecurrenceState.

These are the atoms of the whole system. Nothing in here knows how the
next partition number is computed; that lives in engine.py.

    History:  list of ints, history[i] == p(i). Append-only.
    TermLog:  list of Terms (offset, sign) already drawn from the
              OffsetSequence. Append-only, grown lazily.

A Term's sign is a polarity: ADD (True) means the looked-up value is
added, SUB (False) means it is subtracted.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import json

if TYPE_CHECKING:
    from .sequences import OffsetSequence

ADD = True
SUB = False


@dataclass(frozen=True)
class Term:
    """One generalized pentagonal offset and its sign in the recurrence."""
    offset: int
    sign: bool

    @property
    def name(self):
        return f"{'+' if self.sign else '-'}p(n-{self.offset})"

    def __repr__(self):
        return f"Term({self.name})"


def _new_offsets():
    from .sequences import OffsetSequence
    return OffsetSequence()


@dataclass
class RecurrenceState:
    """
    Full state of the recurrence, serializable for continuity.

    history:   computed partition numbers, history[i] == p(i)
    term_log:  terms drawn so far, in increasing offset order
    offsets:   the OffsetSequence cursor (owns its GapSequence)
    """
    history: list = field(default_factory=list)
    term_log: list = field(default_factory=list)
    offsets: "OffsetSequence" = field(default_factory=_new_offsets)

    @property
    def index(self):
        """Index of the next partition number to be produced."""
        return len(self.history)

    def to_dict(self):
        return {
            # decimal strings: p(n) outgrows any float a JSON reader might use
            "history": [str(v) for v in self.history],
            "term_log": [[t.offset, t.sign] for t in self.term_log],
            "gaps": self.offsets.gaps.to_dict(),
            "offsets": self.offsets.to_dict(),
        }

    @classmethod
    def from_dict(cls, d):
        from .sequences import GapSequence, OffsetSequence, generalized_pentagonal

        history = []
        for raw in d["history"]:
            if not isinstance(raw, str) or not raw.isdigit():
                raise ValueError(f"History value is not a non-negative integer: {raw!r}")
            history.append(int(raw))

        term_log = [Term(int(offset), bool(sign)) for offset, sign in d["term_log"]]
        offsets = OffsetSequence.from_dict(d["offsets"], GapSequence.from_dict(d["gaps"]))

        if len(term_log) != offsets.produced:
            raise ValueError(
                f"TermLog has {len(term_log)} terms but the offset cursor "
                f"has produced {offsets.produced}"
            )
        last_offset = term_log[-1].offset if term_log else 0
        if last_offset != offsets.offset:
            raise ValueError(
                f"Last TermLog offset {last_offset} does not match "
                f"offset cursor {offsets.offset}"
            )
        for k, term in enumerate(term_log):
            expected = Term(generalized_pentagonal(k), ADD if k % 4 in (0, 1) else SUB)
            if term != expected:
                raise ValueError(f"TermLog entry {k} is {term!r}, expected {expected!r}")

        # after `produced` gaps: ceil(produced/2) even draws, floor(produced/2) odd
        produced = offsets.produced
        gaps = offsets.gaps
        expected_gaps = (produced % 2 == 1, 2 * ((produced + 1) // 2) + 1, produced // 2 + 1)
        if (gaps.odd, gaps.even_value, gaps.odd_value) != expected_gaps:
            raise ValueError(
                f"Gap cursor {gaps!r} does not match {produced} terms produced"
            )
        if bool(history) != bool(term_log):
            raise ValueError("History and TermLog must be both empty or both non-empty")

        return cls(history=history, term_log=term_log, offsets=offsets)

    def save(self, path="pentagonal_state.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="pentagonal_state.json"):
        with open(path) as f:
            return cls.from_dict(json.load(f))
