"""Settings for the env-file loader."""

from __future__ import annotations

import codecs
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

DEFAULT_ENV_PATH = ".env"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(slots=True)
class LoaderSettings:
    """Runtime settings for :class:`~envseed.context.ConfigContext`."""

    env_path: str = DEFAULT_ENV_PATH
    encoding: str = "utf-8"
    log_loaded_keys: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not str(self.env_path).strip():
            raise ValueError("env_path must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {self.encoding}") from exc

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoaderSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown loader settings: {', '.join(unknown)}")
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def with_env_overrides(self, environ: Mapping[str, str]) -> "LoaderSettings":
        """Return a copy with ``ENVSEED_*`` variables applied on top."""

        data = self.to_dict()
        if environ.get("ENVSEED_PATH"):
            data["env_path"] = environ["ENVSEED_PATH"]
        if environ.get("ENVSEED_ENCODING"):
            data["encoding"] = environ["ENVSEED_ENCODING"]
        flag = environ.get("ENVSEED_LOG_KEYS", "").strip().lower()
        if flag in _TRUE_VALUES:
            data["log_loaded_keys"] = True
        elif flag in _FALSE_VALUES:
            data["log_loaded_keys"] = False
        return LoaderSettings.from_dict(data)


def _default_settings_path() -> Optional[Path]:
    base = Path(__file__).resolve()
    candidates = [
        Path.cwd() / "configs" / "envseed.yaml",
        base.parent.parent.parent / "configs" / "envseed.yaml",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def load_settings(path: Optional[Path | str] = None) -> LoaderSettings:
    """Load settings from YAML, defaulting to ``configs/envseed.yaml`` when present."""

    if path is None:
        path = _default_settings_path()
        if path is None:
            return LoaderSettings()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError("Settings YAML must produce a mapping")
    return LoaderSettings.from_dict(data)
