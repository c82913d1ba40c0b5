"""Command-line entry point: print the instructions that sort the arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import ParseError, build_stack
from .sorting import mark_last_order, sort_stack
from .stack import Machine

_ERROR_MESSAGE = "ulala"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the integers given as arguments, printing one instruction per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        stack = build_stack(args)
    except ParseError:
        sys.stdout.write(_ERROR_MESSAGE)
        sys.stdout.flush()
        return len(_ERROR_MESSAGE)
    machine = Machine(stack)
    mark_last_order(stack)
    sort_stack(machine)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())