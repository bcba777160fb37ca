"""
CLI entry point. Run as: python -m pentagonal <count>
"""

import argparse
import sys

from .core.state import RecurrenceState
from .core.engine import run_recurrence
from .report import format_value_line, print_values, print_state, print_terms


def non_negative_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pentagonal",
        description="Partition numbers p(0)..p(count) via Euler's pentagonal recurrence",
    )
    parser.add_argument("count", type=non_negative_int,
                        help="Highest index to print")
    parser.add_argument("--save",    type=str, default=None, help="Save state to file")
    parser.add_argument("--load",    type=str, default=None, help="Load state from file")
    parser.add_argument("--trace",   action="store_true", help="Print each newly drawn term")
    parser.add_argument("--last",    action="store_true", help="Print only p(count)")
    parser.add_argument("--summary", action="store_true", help="Print a state summary at the end")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.load:
        try:
            state = RecurrenceState.load(args.load)
        except (OSError, ValueError, KeyError, TypeError) as e:
            sys.stderr.write(f"Error: could not load {args.load}: {e}\n")
            return 1
    else:
        state = RecurrenceState()

    # Values already in a loaded history are printed, not recomputed.
    known = min(len(state.history), args.count + 1)
    if not args.last:
        print_values(state, 0, known)

    try:
        while state.index <= args.count:
            run_recurrence(state, max_steps=1, save_path=args.save, verbose=args.trace)
            if not args.last:
                print(format_value_line(state.index - 1, state.history[-1]))
    except KeyboardInterrupt:
        print("\nInterrupted.")
    else:
        if args.last:
            print(format_value_line(args.count, state.history[args.count]))

    if args.summary:
        print_state(state)
        print_terms(state)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
