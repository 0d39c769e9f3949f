"""Line parser for ``KEY=VALUE`` env files."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .types import ConfigEntry

COMMENT_PREFIX = "#"
DELIMITER = "="


def parse_line(line: str) -> Optional[ConfigEntry]:
    """Return the entry for ``line`` or ``None`` when it carries none.

    Blank lines, comments, lines without ``=`` and lines with an empty key all
    yield ``None``. Skip reasons are not reported.
    """

    # str.strip() also drops Unicode whitespace such as NBSP.
    text = line.strip()
    if not text or text.startswith(COMMENT_PREFIX):
        return None
    key, sep, value = text.partition(DELIMITER)
    if not sep:
        return None
    key = key.strip()
    if not key:
        return None
    return ConfigEntry(key=key, value=value.strip())


def iter_entries(lines: Iterable[str]) -> Iterator[ConfigEntry]:
    for line in lines:
        entry = parse_line(line)
        if entry is not None:
            yield entry
