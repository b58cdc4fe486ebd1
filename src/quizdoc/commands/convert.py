"""``quizdoc convert``: rewrite any quiz document as canonical JSON."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from ..errors import QuizError
from ..export import dump_questions, write_questions
from ..loader import load_quiz_file
from ._common import add_common_arguments, bootstrap, forced_format


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quizdoc convert",
        description=(
            "Validate a quiz document and write it as a JSON quiz with all "
            "defaults filled in."
        ),
    )
    parser.add_argument("path", type=Path, help="Quiz document to convert.")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Destination JSON file (prints to stdout when omitted).",
    )
    parser.add_argument(
        "--format",
        help="Force the source format instead of using the file extension.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the destination if it already exists.",
    )
    add_common_arguments(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    ctx = bootstrap(parser, args, "convert")

    forced = forced_format(parser, args.format)
    try:
        quiz = load_quiz_file(
            args.path,
            fmt=forced,
            defaults=ctx.config.validation_defaults,
            logger=ctx.logger,
        )
    except QuizError as exc:
        sys.stderr.write(str(exc) + "\n")
        return 1

    if args.output is None:
        sys.stdout.write(dump_questions(quiz.questions))
        return 0

    try:
        written = write_questions(
            args.output, quiz.questions, overwrite=args.force
        )
    except FileExistsError as exc:
        sys.stderr.write(f"{exc}. Use --force to overwrite.\n")
        return 1
    except OSError as exc:
        ctx.logger.error(
            "Failed to write converted quiz",
            extra={"output_path": str(args.output), "reason": str(exc)},
        )
        sys.stderr.write(f"Failed to write {args.output}: {exc}\n")
        return 1

    ctx.logger.info(
        "Converted quiz document",
        extra={
            "source": str(args.path),
            "output_path": str(written),
            "question_count": quiz.question_count,
        },
    )
    sys.stdout.write(
        f"Wrote {quiz.question_count} question(s) -> {written}\n"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
