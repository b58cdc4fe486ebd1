"""``quizdoc render``: print sanitized HTML for lightweight markup."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from ..errors import ReadFailureError
from ..loader import read_document
from ..markup import render
from ._common import add_common_arguments, bootstrap


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quizdoc render",
        description=(
            "Render quiz markup (bold, lists, links, ...) into sanitized "
            "HTML. Reads stdin when neither TEXT nor --file is given."
        ),
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("text", nargs="?", help="Markup text to render.")
    source.add_argument(
        "--file",
        type=Path,
        help="Read the markup from a UTF-8 text file.",
    )
    add_common_arguments(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    ctx = bootstrap(parser, args, "render")

    if args.text is not None:
        text = args.text
    elif args.file is not None:
        try:
            text = read_document(args.file)
        except ReadFailureError as exc:
            sys.stderr.write(str(exc) + "\n")
            return 1
    else:
        text = sys.stdin.read()

    html = render(text)
    ctx.logger.debug(
        "Rendered markup",
        extra={"input_chars": len(text), "output_chars": len(html)},
    )
    sys.stdout.write(html + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
