"""Command-line front end.

    bst-visualizer 5 3 8 -o tree.svg
    bst-visualizer --interactive -o tree.svg

Values given as arguments are inserted in order. With ``--interactive``
numbers are read one per line from stdin and the SVG is rewritten after
every line; an empty line or end of input stops the loop.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from bst_visualizer.config import LayoutConfig
from bst_visualizer.session import Session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bst-visualizer",
        description="Insert numbers into a binary search tree and draw it as SVG",
    )
    parser.add_argument("values", nargs="*", help="Numbers to insert, in order")
    parser.add_argument("-o", "--output", type=Path, help="Write the SVG here instead of stdout")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Read further numbers from stdin, redrawing after each one",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


_OPTIONS_WITH_VALUE = frozenset({"-o", "--output"})


def _looks_numeric(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def split_values(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate number-like tokens from the rest of the command line.

    argparse reads tokens such as ``-1e3`` or ``-inf`` as unknown options, so
    anything ``float()`` accepts is taken out before parsing, keeping its
    order. The argument of ``-o`` and everything after ``--`` stay in place.
    """
    values: list[str] = []
    rest: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            rest.append(token)
            rest.extend(tokens)
            break
        if token in _OPTIONS_WITH_VALUE:
            rest.append(token)
            option_value = next(tokens, None)
            if option_value is not None:
                rest.append(option_value)
            continue
        if _looks_numeric(token):
            values.append(token)
        else:
            rest.append(token)
    return values, rest


def _emit(session: Session, output: Path | None, stdout: TextIO) -> None:
    svg = session.render()
    if output is None:
        stdout.write(svg + "\n")
    else:
        output.write_text(svg + "\n", encoding="utf-8")
        logger.debug("Wrote %s", output)


def _submit(session: Session, text: str, stderr: TextIO) -> bool:
    if session.submit(text):
        return True
    stderr.write(f"{session.error}: {text!r}\n")
    return False


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the CLI. Returns 1 if any value was rejected, else 0."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    numbers, rest = split_values(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(rest)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )

    session = Session(LayoutConfig.from_env())
    ok = True
    for text in numbers + args.values:
        ok = _submit(session, text, stderr) and ok

    if not args.interactive:
        _emit(session, args.output, stdout)
        return 0 if ok else 1

    # Interactive mode: redraw after every accepted line.
    _emit(session, args.output, stdout)
    for line in stdin:
        text = line.strip()
        if not text:
            break
        if _submit(session, text, stderr):
            _emit(session, args.output, stdout)
        else:
            ok = False
    return 0 if ok else 1
