"""Host-owned configuration context seeded from env files."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Dict, Mapping, Optional, Set

from .config import LoaderSettings
from .logging_utils import EnvLogger, StdlibEnvLogger, format_event
from .parsing import iter_entries
from .types import LoadReport

SOURCE_STORE = "store"
SOURCE_ENVIRONMENT = "environment"
SOURCE_FILE = "file"


class ConfigContext:
    """Layered key/value configuration: explicit store first, then the OS environment.

    ``load`` merges an env file into the store without ever replacing a key that
    either source already holds, so the first write of a key wins for the
    lifetime of the context.
    """

    def __init__(
        self,
        store: Optional[Mapping[str, str]] = None,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[EnvLogger] = None,
        settings: Optional[LoaderSettings] = None,
    ) -> None:
        self._store: Dict[str, str] = dict(store or {})
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._logger: EnvLogger = logger or StdlibEnvLogger()
        self.settings = settings or LoaderSettings()
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._store.get(key)
        if value is not None:
            return value
        value = self._environ.get(key)
        if value is not None:
            return value
        return default

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def as_dict(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._store)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def set(self, key: str, value: str) -> None:
        """Explicitly assign ``key``; explicit writes may replace earlier values."""

        if not key or not key.strip():
            raise ValueError("Configuration keys must be non-empty")
        with self._lock:
            self._store[key] = value

    def set_default(self, key: str, value: str) -> bool:
        """Insert ``key`` unless the store or the environment already has it."""

        with self._lock:
            if key in self._store or key in self._environ:
                return False
            self._store[key] = value
            return True

    # ------------------------------------------------------------------
    # Env files
    # ------------------------------------------------------------------
    def load(self, path: Optional[Path | str] = None) -> None:
        """Merge ``path`` (default ``settings.env_path``) into the store.

        A missing file is a no-op. Read failures are reported through the
        logger and never raised.
        """

        self._merge(path, apply=True)

    def preview(self, path: Optional[Path | str] = None) -> LoadReport:
        """Report what :meth:`load` would do without touching the store."""

        return self._merge(path, apply=False)

    def _resolve(self, path: Optional[Path | str]) -> Path:
        return Path(path) if path is not None else Path(self.settings.env_path)

    def _source_of(self, key: str) -> Optional[str]:
        if key in self._store:
            return SOURCE_STORE
        if key in self._environ:
            return SOURCE_ENVIRONMENT
        return None

    def _merge(self, path: Optional[Path | str], *, apply: bool) -> LoadReport:
        env_path = self._resolve(path)
        report = LoadReport(path=env_path)
        seen: Set[str] = set()
        try:
            if not env_path.exists():
                self._logger.debug(f"Env file not found at {env_path}, skipping")
                return report
            report.found = True
            with env_path.open("r", encoding=self.settings.encoding) as handle:
                for entry in iter_entries(handle):
                    key = entry.key
                    if key in seen:
                        # Later duplicates lose to the first occurrence.
                        report.shadowed.setdefault(key, SOURCE_FILE)
                        continue
                    seen.add(key)
                    source = self._source_of(key)
                    if source is None and apply and not self.set_default(key, entry.value):
                        source = SOURCE_STORE
                    if source is not None:
                        report.shadowed[key] = source
                        continue
                    report.loaded.append(key)
                    if apply and self.settings.log_loaded_keys:
                        self._logger.debug(f"Loaded env property: {key}")
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            report.error = str(exc)
            self._logger.warn(f"Failed to read env file {env_path}, skipping remaining lines", exc)
            return report

        if apply:
            self._logger.info(
                format_event(
                    "env_file_loaded",
                    path=str(env_path),
                    loaded=len(report.loaded),
                    shadowed=len(report.shadowed),
                )
            )
        return report
