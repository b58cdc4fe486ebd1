"""``quizdoc config``: manage the quizdoc.toml file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from ..config import default_config_path
from ..core import config_templates
from ..core.config_templates import ConfigTemplateError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quizdoc config",
        description="Manage quizdoc configuration files.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser(
        "init",
        help="Write the default quizdoc.toml template.",
    )
    init_parser.add_argument(
        "--path",
        type=Path,
        help="Destination for the config TOML (defaults to $QUIZDOC_HOME).",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the destination if a config already exists.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    return _handle_init(args)


def _handle_init(args: argparse.Namespace) -> int:
    target = _resolve_target(args.path)
    template = config_templates.get_template("quizdoc")
    try:
        written = template.write(target, overwrite=args.force)
    except ConfigTemplateError as exc:
        sys.stderr.write(str(exc) + "\n")
        return 1
    sys.stdout.write(f"Wrote quizdoc config to {written}\n")
    sys.stdout.write(f"{template.description}\n")
    return 0


def _resolve_target(path: Path | None) -> Path:
    if path is None:
        return default_config_path()
    candidate = path.expanduser()
    if not candidate.is_absolute():
        candidate = (Path.cwd() / candidate).resolve()
    return candidate


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
