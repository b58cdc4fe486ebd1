"""Argument and bootstrap helpers shared by quizdoc subcommands."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import (
    ConfigOverrides,
    LoadResult,
    QuizdocConfig,
    QuizdocConfigError,
    load_config,
)
from ..core.logging import configure_logger
from ..errors import UnsupportedFormatError
from ..parsing import QuizFormat, format_for_extension


@dataclass(frozen=True)
class CommandContext:
    """Resolved config and logger for a single command invocation."""

    load_result: LoadResult
    logger: logging.Logger
    log_path: Path

    @property
    def config(self) -> QuizdocConfig:
        return self.load_result.config


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a quizdoc.toml file (defaults to $QUIZDOC_HOME).",
    )
    parser.add_argument(
        "--log-level",
        help="Set the file logging level for the run (defaults to INFO).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Mirror log records to stderr.",
    )


def bootstrap(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    command: str,
) -> CommandContext:
    """Load configuration and the command logger, exiting on bad config."""

    overrides = ConfigOverrides(log_level=args.log_level)
    try:
        load_result = load_config(config_path=args.config, overrides=overrides)
    except QuizdocConfigError as exc:
        parser.error(str(exc))

    logger, log_path = configure_logger(
        f"quizdoc.{command}",
        log_dir=load_result.config.log_dir,
        level=load_result.config.log_level,
        verbose=bool(args.verbose),
    )
    logger.debug(
        "quizdoc command invoked",
        extra={
            "command": command,
            "config_path": (
                str(load_result.config_path)
                if load_result.config_path
                else None
            ),
        },
    )
    return CommandContext(
        load_result=load_result, logger=logger, log_path=log_path
    )


def forced_format(
    parser: argparse.ArgumentParser, value: Optional[str]
) -> Optional[QuizFormat]:
    """Resolve an explicit ``--format`` value, rejecting unknown names."""

    if value is None:
        return None
    try:
        return format_for_extension(value)
    except UnsupportedFormatError as exc:
        parser.error(f"{exc} (expected json, xml or txt)")
