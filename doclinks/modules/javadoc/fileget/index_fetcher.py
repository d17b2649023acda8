"""Read ``element-list`` / ``package-list`` documents from javadoc roots."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import List, Optional, Sequence
from urllib.parse import unquote, urlsplit
from urllib.request import url2pathname

import httpx

from doclinks.modules.javadoc.domain import INDEX_LIST_NAMES


def jar_url(archive: Path) -> str:
    """``jar:file:...!/`` root URL of a local archive."""
    return f"jar:{Path(archive).resolve().as_uri()}!/"


def _file_path(url: str) -> Path:
    return Path(url2pathname(unquote(urlsplit(url).path)))


class IndexListFetcher:
    """Fetches index lists over ``http(s):``, ``jar:`` and ``file:`` URLs."""

    def __init__(self, client: Optional[httpx.Client] = None) -> None:
        self._client = client or httpx.Client(timeout=30, follow_redirects=True)
        self.log = logging.getLogger(self.__class__.__name__)

    def close(self) -> None:
        self._client.close()

    def read_lines(self, location: str, names: Sequence[str] = INDEX_LIST_NAMES) -> Optional[List[str]]:
        """Lines of the first of ``names`` readable under ``location``, else None."""
        base = location if location.endswith("/") else location + "/"
        for name in names:
            url = base + name
            try:
                return self.read_text(url).splitlines()
            except (httpx.HTTPError, OSError, KeyError, zipfile.BadZipFile) as exc:
                self.log.debug("Cannot read %s: %s", url, exc)
                continue
        return None

    def read_text(self, url: str) -> str:
        scheme = urlsplit(url).scheme.lower()
        if scheme == "jar":
            archive, _, entry = url[len("jar:"):].partition("!/")
            with zipfile.ZipFile(_file_path(archive)) as zf:
                return zf.read(entry).decode("utf-8", errors="replace")
        if scheme == "file":
            return _file_path(url).read_text(encoding="utf-8", errors="replace")
        response = self._client.get(url)
        response.raise_for_status()
        return response.text
