from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

# Keep src/ importable when the package is not installed.
ROOT = TESTS_DIR.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fixtures import QuizFiles  # noqa: E402

_QUIZDOC_ENV = (
    "QUIZDOC_CONFIG",
    "QUIZDOC_DEFAULT_FORMAT",
    "QUIZDOC_EXPLANATION_PLACEHOLDER",
    "QUIZDOC_LOG_LEVEL",
    "QUIZDOC_LOG_DIR",
)


@pytest.fixture(autouse=True)
def quizdoc_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point QUIZDOC_HOME at a per-test directory and clear overrides."""

    home = tmp_path / "quizdoc-home"
    monkeypatch.setenv("QUIZDOC_HOME", str(home))
    for name in _QUIZDOC_ENV:
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture(autouse=True)
def _reset_quizdoc_loggers() -> Iterator[None]:
    yield
    manager = logging.Logger.manager
    for name in list(manager.loggerDict):
        if not name.startswith("quizdoc"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def quiz_files(tmp_path: Path) -> QuizFiles:
    """Write quiz documents under pytest's per-test tmp directory."""

    return QuizFiles(tmp_path / "docs")
