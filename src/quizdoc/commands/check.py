"""``quizdoc check``: parse and validate quiz documents."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..errors import QuizError
from ..loader import LoadedQuiz, load_quiz_file, quiz_title_from_filename
from ..parsing import QuizFormat, parse_document
from ._common import (
    CommandContext,
    add_common_arguments,
    bootstrap,
    forced_format,
)

STDIN_MARKER = "-"


@dataclass(frozen=True)
class CheckOutcome:
    """Result of checking one document."""

    source: str
    format: Optional[QuizFormat]
    quiz: Optional[LoadedQuiz] = None
    error: Optional[QuizError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quizdoc check",
        description=(
            "Parse quiz documents (JSON, XML, TXT) and report whether they "
            "pass validation."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Quiz files to check; use '-' to read a document from stdin.",
    )
    parser.add_argument(
        "--format",
        help=(
            "Force the document format (json, xml, txt) instead of using "
            "the file extension."
        ),
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="List the questions of every valid document.",
    )
    add_common_arguments(parser)
    return parser


def main(
    argv: Sequence[str] | None = None, *, console: Console | None = None
) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    ctx = bootstrap(parser, args, "check")
    console = console or Console()

    forced = forced_format(parser, args.format)
    outcomes = [_check_one(raw, forced, ctx) for raw in args.paths]

    console.print(_summary_table(outcomes))
    if args.show:
        for outcome in outcomes:
            if outcome.quiz is not None:
                console.print(_questions_table(outcome.quiz))

    failures = sum(1 for outcome in outcomes if not outcome.ok)
    ctx.logger.info(
        "Completed quiz check",
        extra={"checked": len(outcomes), "failures": failures},
    )
    return 1 if failures else 0


def _check_one(
    raw: str, forced: Optional[QuizFormat], ctx: CommandContext
) -> CheckOutcome:
    defaults = ctx.config.validation_defaults
    try:
        if raw == STDIN_MARKER:
            fmt = forced or ctx.config.default_format
            questions = parse_document(
                sys.stdin.read(), fmt, defaults=defaults, logger=ctx.logger
            )
            quiz = LoadedQuiz(
                path=Path(STDIN_MARKER),
                format=fmt,
                title=quiz_title_from_filename("stdin"),
                questions=tuple(questions),
            )
        else:
            quiz = load_quiz_file(
                Path(raw), fmt=forced, defaults=defaults, logger=ctx.logger
            )
    except QuizError as exc:
        ctx.logger.error(
            "Quiz document failed validation",
            extra={"source": raw, "reason": str(exc)},
        )
        return CheckOutcome(source=raw, format=forced, error=exc)
    return CheckOutcome(source=raw, format=quiz.format, quiz=quiz)


def _summary_table(outcomes: Sequence[CheckOutcome]) -> Table:
    table = Table(title="Quiz check", box=box.SIMPLE_HEAVY)
    table.add_column("File", overflow="fold")
    table.add_column("Format")
    table.add_column("Questions", justify="right")
    table.add_column("Status", overflow="fold")
    for outcome in outcomes:
        fmt = outcome.format.value if outcome.format else "?"
        if outcome.quiz is not None:
            count = str(outcome.quiz.question_count)
            status = Text("ok", style="green")
        else:
            count = "-"
            status = Text(str(outcome.error), style="red")
        table.add_row(outcome.source, fmt, count, status)
    return table


def _questions_table(quiz: LoadedQuiz) -> Table:
    table = Table(title=quiz.title, box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("Options", justify="right")
    table.add_column("Answer")
    for question in quiz.questions:
        option = question.correct_option
        answer = question.correct_answer
        if option is not None and option.text:
            answer = f"{answer}) {option.text}"
        table.add_row(
            str(question.id),
            question.title,
            str(len(question.options)),
            answer,
        )
    return table


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
