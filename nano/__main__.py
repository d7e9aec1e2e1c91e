"""
Nano command line.

Usage: python -m nano [FILE] [-e EXPR] [--verbose]

With neither FILE nor -e, reads one expression per line from stdin and prints
each result (a REPL). `:q` or end of input quits.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from nano.config import get_log_level
from nano.interpreter import Interpreter, exec_file
from nano.types.value import VErr, show


logger = logging.getLogger("nano")

PROMPT = "nano> "


def repl(interp: Interpreter, stdin: TextIO, stdout: TextIO, prompt: str = "") -> int:
    """Evaluate each non-blank input line; return 1 if the last result was an error."""
    status = 0
    while True:
        if prompt:
            stdout.write(prompt)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        if line == ":q":
            break
        result = interp.run(line)
        status = 1 if isinstance(result, VErr) else 0
        stdout.write(show(result) + "\n")
    return status


def main(argv: list[str] | None = None) -> int:
    """Command-line interface for the interpreter."""
    parser = argparse.ArgumentParser(
        prog="nano",
        description="Nano - evaluate programs in a small functional language",
    )
    parser.add_argument("file", nargs="?", help="Nano source file to run")
    parser.add_argument("-e", "--expr", help="Evaluate EXPR and print the result")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.file and args.expr:
        parser.error("give either FILE or -e, not both")

    if args.file:
        try:
            result = exec_file(args.file)
        except OSError as e:
            logger.error("cannot read %s: %s", args.file, e.strerror or e)
            return 2
        except UnicodeDecodeError as e:
            logger.error("cannot decode %s as UTF-8: %s", args.file, e.reason)
            return 2
    elif args.expr is not None:
        result = Interpreter().run(args.expr)
    else:
        prompt = PROMPT if sys.stdin.isatty() else ""
        return repl(Interpreter(), sys.stdin, sys.stdout, prompt)

    print(show(result))
    return 1 if isinstance(result, VErr) else 0


if __name__ == "__main__":
    sys.exit(main())
