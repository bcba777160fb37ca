from .state import ADD, SUB, Term, RecurrenceState
from .sequences import GapSequence, OffsetSequence, generalized_pentagonal
from .engine import (
    ensure_terms, recurrence_step, run_recurrence,
    RecurrenceEngine, partition_numbers,
)

__all__ = [
    "ADD", "SUB", "Term", "RecurrenceState",
    "GapSequence", "OffsetSequence", "generalized_pentagonal",
    "ensure_terms", "recurrence_step", "run_recurrence",
    "RecurrenceEngine", "partition_numbers",
]
