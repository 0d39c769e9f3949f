"""Command-line entrypoint for envseed."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import orjson

from .config import load_settings
from .context import ConfigContext
from .logging_utils import LOGGER_NAME, StdlibEnvLogger, configure_logger

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="envseed", description="Inspect and resolve KEY=VALUE env files")
    parser.add_argument("--settings", type=Path, default=None, help="Optional loader settings YAML")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Report which keys a file would load (keys only)")
    check.add_argument("path", nargs="?", type=Path, default=None, help="Env file (default from settings)")

    get = sub.add_parser("get", help="Load a file and print the resolved value of KEY")
    get.add_argument("key", help="Key to resolve")
    get.add_argument("--file", type=Path, default=None, help="Env file (default from settings)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = getattr(logging, str(args.log_level).upper(), logging.WARNING)
    configure_logger(level)
    settings = load_settings(args.settings).with_env_overrides(os.environ)
    context = ConfigContext(settings=settings, logger=StdlibEnvLogger(logging.getLogger(LOGGER_NAME)))

    if args.command == "check":
        report = context.preview(args.path)
        sys.stdout.write(orjson.dumps(report.to_dict(), option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")
        return 0

    context.load(args.file)
    value = context.get(args.key)
    if value is None:
        LOGGER.info("Key %s not found", args.key)
        return 1
    sys.stdout.write(value + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
