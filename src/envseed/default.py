"""Process-wide convenience context for hosts that do not pass one around."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Optional

import yaml

from .config import LoaderSettings, load_settings
from .context import ConfigContext

LOGGER = logging.getLogger(__name__)

_CONTEXT: Optional[ConfigContext] = None
_LOADED = False
_GUARD = threading.Lock()


def _settings_or_defaults() -> LoaderSettings:
    try:
        return load_settings().with_env_overrides(os.environ)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as exc:
        LOGGER.warning("Invalid envseed settings, using defaults: %s", exc)
        return LoaderSettings()


def default_context() -> ConfigContext:
    global _CONTEXT
    with _GUARD:
        if _CONTEXT is None:
            _CONTEXT = ConfigContext(settings=_settings_or_defaults())
        return _CONTEXT


def load(path: Optional[Path | str] = None) -> None:
    default_context().load(path)


def get(key: str, default: Optional[str] = None) -> Optional[str]:
    return default_context().get(key, default)


def load_dotenv_once(path: Optional[Path | str] = None) -> None:
    """Load ``path`` (default: the configured env path) into the default context once.

    Later calls are no-ops, even with a different path. Existing store and
    environment values always win so callers (or the test suite) can override
    file defaults.
    """

    global _LOADED
    context = default_context()
    with _GUARD:
        if _LOADED:
            return
        _LOADED = True
    context.load(path)


def reset_default_context() -> None:
    """Forget the default context and the once-flag."""

    global _CONTEXT, _LOADED
    with _GUARD:
        _CONTEXT = None
        _LOADED = False
