from __future__ import annotations

from pathlib import Path

import pytest

from quizdoc.core import config as core_config
from quizdoc.core.config import TomlConfigError


def test_load_toml_reads_tables(tmp_path: Path) -> None:
    path = tmp_path / "quizdoc.toml"
    path.write_text('[parsing]\ndefault_format = "json"\n', encoding="utf-8")

    assert core_config.load_toml(path) == {"parsing": {"default_format": "json"}}


def test_load_toml_missing_and_invalid(tmp_path: Path) -> None:
    with pytest.raises(TomlConfigError, match="not found"):
        core_config.load_toml(tmp_path / "absent.toml")

    broken = tmp_path / "broken.toml"
    broken.write_text("[parsing\n", encoding="utf-8")
    with pytest.raises(TomlConfigError, match="Failed to parse"):
        core_config.load_toml(broken)


def test_merge_defaults_overrides_nested_values() -> None:
    base = {"parsing": {"default_format": "txt", "title_template": "Q{n}"}}

    core_config.merge_defaults(base, {"parsing": {"default_format": "xml"}})

    assert base == {"parsing": {"default_format": "xml", "title_template": "Q{n}"}}


def test_merge_defaults_rejects_unknown_keys() -> None:
    base = {"parsing": {"default_format": "txt"}}

    with pytest.raises(TomlConfigError, match="parsing.colour"):
        core_config.merge_defaults(base, {"parsing": {"colour": "red"}})

    with pytest.raises(TomlConfigError, match="Expected table for 'parsing'"):
        core_config.merge_defaults(base, {"parsing": "json"})


def test_write_toml_template_refuses_overwrite(tmp_path: Path) -> None:
    target = tmp_path / "out" / "config.toml"

    core_config.write_toml_template(target, template="a = 1\n")
    with pytest.raises(TomlConfigError, match="already exists"):
        core_config.write_toml_template(target, template="a = 2\n")

    core_config.write_toml_template(target, template="a = 2\n", overwrite=True)
    assert target.read_text(encoding="utf-8") == "a = 2\n"


def test_env_string_and_pick_first() -> None:
    env = {"QUIZDOC_LOG_LEVEL": "  debug ", "QUIZDOC_LOG_DIR": "   "}

    assert core_config.env_string(env, "QUIZDOC_", "LOG_LEVEL") == "debug"
    assert core_config.env_string(env, "QUIZDOC_", "LOG_DIR") is None
    assert core_config.env_string(env, "QUIZDOC_", "MISSING") is None
    assert core_config.pick_first(None, "", "x") == ""
    assert core_config.pick_first(None, None) is None
