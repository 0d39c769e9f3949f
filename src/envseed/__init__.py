"""envseed: seed layered process configuration from KEY=VALUE env files."""

from .config import LoaderSettings, load_settings
from .context import ConfigContext
from .default import default_context, get, load, load_dotenv_once, reset_default_context
from .logging_utils import EnvLogger, NullEnvLogger, StdlibEnvLogger
from .parsing import iter_entries, parse_line
from .types import ConfigEntry, LoadReport

__all__ = [
    "ConfigContext",
    "ConfigEntry",
    "EnvLogger",
    "LoadReport",
    "LoaderSettings",
    "NullEnvLogger",
    "StdlibEnvLogger",
    "default_context",
    "get",
    "iter_entries",
    "load",
    "load_dotenv_once",
    "load_settings",
    "parse_line",
    "reset_default_context",
]
