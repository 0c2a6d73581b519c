"""Command line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.algorithm import sort_values
from pushswap.parsing import InputError, parse_arguments, split_words


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers in ``argv`` and print one move per line.

    A single argument is split on spaces. Returns the exit status: 1 for no
    input or invalid input, 0 otherwise.
    """
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    try:
        words = split_words(args[0], " ") if len(args) == 1 else args
        numbers = parse_arguments(words)
    except InputError as error:
        message = str(error)
        if message:
            sys.stderr.write(message + "\n")
        return 1
    for move in sort_values(numbers):
        sys.stdout.write(move + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())