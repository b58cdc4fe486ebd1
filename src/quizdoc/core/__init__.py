"""Shared helpers for quizdoc commands."""

from __future__ import annotations

from .config import (
    TomlConfigError,
    env_string,
    load_toml,
    merge_defaults,
    pick_first,
    write_toml_template,
)
from .config_templates import (
    ConfigTemplate,
    ConfigTemplateError,
    get_template,
)
from .logging import JsonLogFormatter, configure_logger

__all__ = [
    "TomlConfigError",
    "env_string",
    "load_toml",
    "merge_defaults",
    "pick_first",
    "write_toml_template",
    "ConfigTemplate",
    "ConfigTemplateError",
    "get_template",
    "JsonLogFormatter",
    "configure_logger",
]
