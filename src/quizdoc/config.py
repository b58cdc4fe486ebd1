"""Configuration loader for quizdoc commands."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

from .core import config as core_config
from .parsing import QuizFormat, ValidationDefaults
from .models import DEFAULT_EXPLANATION, DEFAULT_TITLE_TEMPLATE

CONFIG_FILENAME = "quizdoc.toml"
CONFIG_ENV = "QUIZDOC_CONFIG"
HOME_ENV = "QUIZDOC_HOME"
ENV_PREFIX = "QUIZDOC_"
DEFAULT_HOME = Path.home() / ".quizdoc"

_DEFAULT_LOG_LEVEL = "INFO"


class QuizdocConfigError(RuntimeError):
    """Raised when configuration parsing or validation fails."""


@dataclass(frozen=True)
class QuizdocConfig:
    """Fully resolved settings for a quizdoc run."""

    default_format: QuizFormat
    explanation_placeholder: str
    title_template: str
    log_level: str
    log_dir: Path

    @property
    def validation_defaults(self) -> ValidationDefaults:
        return ValidationDefaults(
            explanation=self.explanation_placeholder,
            title_template=self.title_template,
        )


@dataclass(frozen=True)
class ConfigOverrides:
    """CLI-sourced overrides applied on top of file/env options."""

    default_format: Optional[str] = None
    log_level: Optional[str] = None
    log_dir: Optional[Path] = None


@dataclass(frozen=True)
class LoadResult:
    config: QuizdocConfig
    home: Path
    config_path: Optional[Path]


def home_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """Return the quizdoc data home (``$QUIZDOC_HOME`` or ``~/.quizdoc``)."""

    env_map = os.environ if env is None else env
    custom = (env_map.get(HOME_ENV) or "").strip()
    if custom:
        return Path(custom).expanduser()
    return DEFAULT_HOME


def default_config_path(env: Optional[Mapping[str, str]] = None) -> Path:
    return home_dir(env) / CONFIG_FILENAME


def load_config(
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[ConfigOverrides] = None,
    env: Optional[Mapping[str, str]] = None,
) -> LoadResult:
    """Load configuration applying precedence CLI > env > TOML > defaults.

    A missing default config file is not an error; a missing file that was
    requested explicitly (argument or ``QUIZDOC_CONFIG``) is.
    """

    overrides = overrides or ConfigOverrides()
    env_map = os.environ if env is None else env
    home = home_dir(env_map)

    explicit = config_path is not None or bool(
        (env_map.get(CONFIG_ENV) or "").strip()
    )
    requested = _resolve_config_path(config_path, env_map, home)

    table = _default_table()
    loaded_path: Optional[Path] = None
    if requested.exists():
        try:
            parsed = core_config.load_toml(requested)
            core_config.merge_defaults(table, parsed)
        except core_config.TomlConfigError as exc:
            raise QuizdocConfigError(str(exc)) from exc
        loaded_path = requested
    elif explicit:
        raise QuizdocConfigError(f"Config file not found: {requested}")

    parsing = table["parsing"]
    logging_table = table["logging"]

    default_format = _resolve_format(
        core_config.pick_first(
            overrides.default_format,
            core_config.env_string(env_map, ENV_PREFIX, "DEFAULT_FORMAT"),
            parsing["default_format"],
        )
    )
    explanation = _require_string(
        core_config.pick_first(
            core_config.env_string(
                env_map, ENV_PREFIX, "EXPLANATION_PLACEHOLDER"
            ),
            parsing["explanation_placeholder"],
        ),
        "parsing.explanation_placeholder",
    )
    title_template = _resolve_title_template(parsing["title_template"])
    log_level = _require_string(
        core_config.pick_first(
            overrides.log_level,
            core_config.env_string(env_map, ENV_PREFIX, "LOG_LEVEL"),
            logging_table["level"],
        ),
        "logging.level",
    ).upper()
    log_dir = _resolve_log_dir(
        core_config.pick_first(
            overrides.log_dir,
            core_config.env_string(env_map, ENV_PREFIX, "LOG_DIR"),
            logging_table["dir"],
        ),
        home,
    )

    config = QuizdocConfig(
        default_format=default_format,
        explanation_placeholder=explanation,
        title_template=title_template,
        log_level=log_level,
        log_dir=log_dir,
    )
    return LoadResult(config=config, home=home, config_path=loaded_path)


def _default_table() -> MutableMapping[str, MutableMapping[str, object]]:
    return {
        "parsing": {
            "default_format": QuizFormat.TXT.value,
            "explanation_placeholder": DEFAULT_EXPLANATION,
            "title_template": DEFAULT_TITLE_TEMPLATE,
        },
        "logging": {"level": _DEFAULT_LOG_LEVEL, "dir": ""},
    }


def _resolve_config_path(
    config_path: Optional[Path], env_map: Mapping[str, str], home: Path
) -> Path:
    if config_path is not None:
        return config_path.expanduser()
    env_candidate = (env_map.get(CONFIG_ENV) or "").strip()
    if env_candidate:
        return Path(env_candidate).expanduser()
    return home / CONFIG_FILENAME


def _resolve_format(value: object) -> QuizFormat:
    if isinstance(value, QuizFormat):
        return value
    if isinstance(value, str):
        normalized = value.strip().lstrip(".").lower()
        for fmt in QuizFormat:
            if fmt.value == normalized:
                return fmt
    expected = ", ".join(fmt.value for fmt in QuizFormat)
    raise QuizdocConfigError(
        f"Unknown default format '{value}'. Expected one of: {expected}."
    )


def _require_string(value: object, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise QuizdocConfigError(f"{key} must be a non-empty string.")
    return value.strip()


def _resolve_title_template(value: object) -> str:
    template = _require_string(value, "parsing.title_template")
    try:
        template.format(n=1)
    except (KeyError, IndexError, ValueError) as exc:
        raise QuizdocConfigError(
            "parsing.title_template may only reference '{n}'."
        ) from exc
    return template


def _resolve_log_dir(value: object, home: Path) -> Path:
    if isinstance(value, Path):
        candidate = value
    elif isinstance(value, str) and value.strip():
        candidate = Path(value.strip())
    elif value in (None, ""):
        return home / "logs"
    else:
        raise QuizdocConfigError("logging.dir must be a string when provided.")
    candidate = candidate.expanduser()
    if not candidate.is_absolute():
        candidate = home / candidate
    return candidate
