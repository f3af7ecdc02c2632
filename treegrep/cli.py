"""Command-line entry point."""

from __future__ import annotations

import os
import re
import sys
from typing import Optional, Sequence

from .search import Grep, Options

USAGE = "Usage: grep <directory> <search query> [options]"

_HELP = "\n".join(
    [
        USAGE,
        "Options:",
        "-m regexp mask for files (*.json, *.txt, etc...)",
        "-v verbose mode",
        "-di don't ignore binary files",
    ]
)


def parse_options(argv: Sequence[str]) -> Options:
    """Build search options from the command-line arguments."""
    args = list(argv)
    options = Options()
    if "-v" in args:
        options.verbose_mode = True
    if "-m" in args:
        position = args.index("-m") + 1
        if position < len(args) and args[position]:
            options.file_mask = args[position]
    if "-di" in args:
        options.ignore_binaries = False
    return options


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a search; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(USAGE, file=sys.stderr)
        return 1

    directory, query = args[0], args[1]
    if not os.path.isdir(directory):
        print(f'Error: "{directory}" is not a directory', file=sys.stderr)
        return 1

    if "--help" in args or "-h" in args:
        print(_HELP)

    try:
        Grep().search(directory, query, parse_options(args))
    except re.error as exc:
        print(f"Error: invalid search query: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())