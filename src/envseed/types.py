"""Shared data containers for envseed."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass(frozen=True, slots=True)
class ConfigEntry:
    """One ``KEY=VALUE`` pair parsed from an env file."""

    key: str
    value: str


@dataclass(slots=True)
class LoadReport:
    """Outcome of a load or preview pass. Never carries values."""

    path: Path
    found: bool = False
    loaded: List[str] = field(default_factory=list)
    shadowed: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path),
            "found": self.found,
            "loaded": list(self.loaded),
            "shadowed": dict(self.shadowed),
            "error": self.error,
        }
