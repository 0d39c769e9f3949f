"""Test configuration ensuring the local package is importable."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from envseed.default import reset_default_context  # noqa: E402
from envseed.logging_utils import LOGGER_NAME  # noqa: E402


class RecordingLogger:
    """Collects loader diagnostics instead of emitting them."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Optional[BaseException]]] = []

    def debug(self, msg: str) -> None:
        self.records.append(("debug", msg, None))

    def info(self, msg: str) -> None:
        self.records.append(("info", msg, None))

    def warn(self, msg: str, error: Optional[BaseException] = None) -> None:
        self.records.append(("warn", msg, error))

    def messages(self, level: str) -> List[str]:
        return [msg for lvl, msg, _ in self.records if lvl == level]


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[..., Path]:
    def _write(text: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _fresh_default_context():
    reset_default_context()
    yield
    reset_default_context()
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
