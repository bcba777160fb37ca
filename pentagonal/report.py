"""
Reporting utilities.
"""

from typing import Optional

from .core.state import RecurrenceState


def format_value_line(index: int, value: int) -> str:
    return f"{index}: {value}"


def print_values(state: RecurrenceState, start: int = 0, stop: Optional[int] = None):
    """Print history[start:stop] as "{index}: {value}" lines."""
    stop = len(state.history) if stop is None else stop
    for i in range(start, stop):
        print(format_value_line(i, state.history[i]))


def print_terms(state: RecurrenceState):
    """Print the TermLog."""
    print(f"\n{'='*60}")
    print(f"Term log ({len(state.term_log)}):")
    print(f"{'='*60}")
    for k, term in enumerate(state.term_log):
        print(f"  {k}: {term.name}")


def print_state(state: RecurrenceState):
    """Print a summary of the current recurrence state."""
    print(f"\n{'='*60}")
    print(f"Next index: {state.index}")
    if state.history:
        last = state.history[-1]
        print(f"Last value: p({state.index - 1}) = {last} ({len(str(last))} digits)")
    print(f"Terms drawn: {len(state.term_log)}"
          + (f" (last offset {state.term_log[-1].offset})" if state.term_log else ""))
    print(f"Offset cursor: {state.offsets!r}")
    print(f"{'='*60}")
