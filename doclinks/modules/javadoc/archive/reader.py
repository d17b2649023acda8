"""Archive access used to extract javadoc index files."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List, Pattern, Protocol
from zipfile import ZipFile


class ArchiveReader(Protocol):
    def list_entries(self, archive: Path, pattern: Pattern[str]) -> List[str]:
        ...

    def copy_entry(self, archive: Path, name: str, destination: Path) -> Path:
        ...


class ZipArchiveReader:
    """Reads entries out of jar/zip archives."""

    def __init__(self) -> None:
        self.log = logging.getLogger(self.__class__.__name__)

    def list_entries(self, archive: Path, pattern: Pattern[str]) -> List[str]:
        with ZipFile(archive, "r") as zf:
            return [
                info.filename
                for info in zf.infolist()
                if not info.is_dir() and pattern.match(info.filename)
            ]

    def copy_entry(self, archive: Path, name: str, destination: Path) -> Path:
        """Copy entry ``name`` to ``destination``, replacing an existing file."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        with ZipFile(archive, "r") as zf, zf.open(name) as src, open(destination, "wb") as dst:
            shutil.copyfileobj(src, dst)
        self.log.debug("Extracted %s!/%s -> %s", archive, name, destination)
        return destination
