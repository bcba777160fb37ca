"""
Pentagonal: partition numbers p(0), p(1), p(2), ... from Euler's
pentagonal number recurrence.

Three pieces feed each other, strictly forward:

    GapSequence -> OffsetSequence -> RecurrenceEngine

The engine keeps every value it has produced (any of them may be needed
again) and draws new pentagonal offsets only when the history grows past
the last one it knows.

Usage:
    python -m pentagonal 10
    python -m pentagonal 666 --last
    python -m pentagonal 1000 --save state.json
    python -m pentagonal 2000 --load state.json --last
"""

from .core.state import ADD, SUB, Term, RecurrenceState
from .core.sequences import GapSequence, OffsetSequence, generalized_pentagonal
from .core.engine import (
    ensure_terms, recurrence_step, run_recurrence,
    RecurrenceEngine, partition_numbers,
)
from .report import format_value_line, print_values, print_terms, print_state

__all__ = [
    "ADD", "SUB", "Term", "RecurrenceState",
    "GapSequence", "OffsetSequence", "generalized_pentagonal",
    "ensure_terms", "recurrence_step", "run_recurrence",
    "RecurrenceEngine", "partition_numbers",
    "format_value_line", "print_values", "print_terms", "print_state",
]
