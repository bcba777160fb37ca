"""
The recurrence main loop.

Euler's pentagonal number theorem gives

    p(n) = p(n-1) + p(n-2) - p(n-5) - p(n-7) + p(n-12) + p(n-15) - ...

summing over generalized pentagonal numbers g <= n. One step of the loop
makes sure the TermLog reaches past the current history length, then walks
it from the front, looking values up `offset` places back in History.
Nothing is ever recomputed; each step only appends.
"""

from typing import Callable, Optional

from .state import RecurrenceState, SUB


def ensure_terms(state: RecurrenceState) -> list:
    """
    Draw Terms until the last one's offset exceeds len(history).

    Returns the Terms added by this call (usually none, sometimes one).
    """
    added = []
    while state.term_log[-1].offset <= len(state.history):
        term = next(state.offsets)
        state.term_log.append(term)
        added.append(term)
    return added


def recurrence_step(state: RecurrenceState, verbose: bool = False) -> int:
    """
    Compute the next partition number, append it to history, return it.

    Args:
        state:    current RecurrenceState (mutated in place)
        verbose:  print each newly discovered Term
    """
    if not state.history:
        # p(0) = 1; seed the TermLog so ensure_terms has a last term to look at
        state.history.append(1)
        term = next(state.offsets)
        state.term_log.append(term)
        if verbose:
            print(f"  [term] {term.name} (offset {term.offset})")
        return 1

    for term in ensure_terms(state):
        if verbose:
            print(f"  [term] {term.name} (offset {term.offset})")

    n = len(state.history)
    total = 0
    for term in state.term_log:
        if term.offset > n:
            break
        value = state.history[n - term.offset]
        total += -value if term.sign == SUB else value

    state.history.append(total)
    return total


def run_recurrence(
    state: RecurrenceState,
    max_steps: int = 100,
    stop_fn: Optional[Callable] = None,
    save_path: Optional[str] = None,
    **kwargs,
) -> RecurrenceState:
    """
    Run the recurrence until the stop condition is met or max_steps reached.

    Args:
        state:      initial state
        max_steps:  number of values to compute at most
        stop_fn:    stop_fn(state) -> bool; checked before every step
        save_path:  if set, checkpoint state after each step
        **kwargs:   passed through to recurrence_step
    """
    for _ in range(max_steps):
        if stop_fn and stop_fn(state):
            break
        recurrence_step(state, **kwargs)
        if save_path:
            state.save(save_path)
    return state


class RecurrenceEngine:
    """
    Pull-based stream of partition numbers: p(0), p(1), p(2), ...

    The first next() returns p(0) = 1. The stream never ends on its own;
    has_next() is always True and the real limit is memory.
    """

    def __init__(self, state: Optional[RecurrenceState] = None, verbose: bool = False):
        self.state = state if state is not None else RecurrenceState()
        self.verbose = verbose

    def next(self) -> int:
        return recurrence_step(self.state, verbose=self.verbose)

    def has_next(self) -> bool:
        return True

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next()

    @property
    def index(self) -> int:
        """Index of the value the next call will return."""
        return self.state.index

    @property
    def history(self) -> tuple:
        return tuple(self.state.history)

    @property
    def term_log(self) -> tuple:
        return tuple(self.state.term_log)

    def __repr__(self):
        return f"RecurrenceEngine(index={self.index}, terms={len(self.state.term_log)})"


def partition_numbers(count: int) -> list:
    """[p(0), p(1), ..., p(count)], computed in order from scratch."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    state = run_recurrence(RecurrenceState(), max_steps=count + 1)
    return list(state.history)
