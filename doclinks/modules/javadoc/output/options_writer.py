"""javadoc ``@options`` file output."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

log = logging.getLogger(__name__)

_NEEDS_QUOTES = re.compile(r"[\s'\"]")

LINK = "-link"
LINKOFFLINE = "-linkoffline"


def quote_option(value: str) -> str:
    """Quote an option argument for javadoc when it contains whitespace or quotes."""
    text = str(value)
    if not _NEEDS_QUOTES.search(text):
        return text
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def format_option(option: str, *arguments: object) -> str:
    return " ".join([option, *(quote_option(str(argument)) for argument in arguments)])


def link_option(url: str) -> str:
    return format_option(LINK, url)


def linkoffline_option(url: str, location: Path) -> str:
    return format_option(LINKOFFLINE, url, location)


def write_options(path: Path, lines: Iterable[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    body = list(lines)
    path.write_text("".join(line + "\n" for line in body), encoding="utf-8")
    log.info("Wrote %d javadoc options to %s", len(body), path)
    return path
