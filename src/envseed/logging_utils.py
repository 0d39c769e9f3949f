"""Logging helpers for envseed."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

import orjson

LOGGER_NAME = "envseed"


class EnvLogger(Protocol):
    """Diagnostics sink accepted by :class:`~envseed.context.ConfigContext`."""

    def debug(self, msg: str) -> None: ...

    def info(self, msg: str) -> None: ...

    def warn(self, msg: str, error: Optional[BaseException] = None) -> None: ...


class StdlibEnvLogger:
    """Forward loader diagnostics to a :mod:`logging` logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(f"{LOGGER_NAME}.context")

    def debug(self, msg: str) -> None:
        self._logger.debug(msg)

    def info(self, msg: str) -> None:
        self._logger.info(msg)

    def warn(self, msg: str, error: Optional[BaseException] = None) -> None:
        if error is None:
            self._logger.warning(msg)
        else:
            self._logger.warning("%s: %s", msg, error)


class NullEnvLogger:
    def debug(self, msg: str) -> None:
        pass

    def info(self, msg: str) -> None:
        pass

    def warn(self, msg: str, error: Optional[BaseException] = None) -> None:
        pass


def configure_logger(level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def format_event(event: str, **payload: Any) -> str:
    data: Dict[str, Any] = {"event": event, **payload}
    return orjson.dumps(data, default=str).decode("utf-8")
