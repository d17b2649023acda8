"""Extract javadoc ``element-list`` / ``package-list`` files from archives."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path, PurePosixPath
from typing import List, Optional, Pattern

from doclinks.modules.javadoc.domain import ELEMENT_LIST, INDEX_ENTRY_PATTERN, PACKAGE_LIST

from .reader import ArchiveReader, ZipArchiveReader


class OfflineIndexExtractor:
    """Copies index entries out of a javadoc jar into a per-artifact directory."""

    def __init__(
        self,
        reader: Optional[ArchiveReader] = None,
        pattern: Pattern[str] = INDEX_ENTRY_PATTERN,
    ) -> None:
        self.reader = reader or ZipArchiveReader()
        self.pattern = pattern
        self.log = logging.getLogger(self.__class__.__name__)

    def extract(self, archive: Path, location: Path) -> List[Path]:
        """Return the files written under ``location``; empty when the archive has no index."""
        location.mkdir(parents=True, exist_ok=True)
        entries = self.reader.list_entries(archive, self.pattern)
        if not entries:
            return []

        written = [
            self.reader.copy_entry(archive, entry, location / PurePosixPath(entry).name)
            for entry in entries
        ]

        package_list = location / PACKAGE_LIST
        element_list = location / ELEMENT_LIST
        if not package_list.exists() and element_list.exists():
            shutil.copyfile(element_list, package_list)
            written.append(package_list)
        elif not element_list.exists() and package_list.exists():
            shutil.copyfile(package_list, element_list)
            written.append(element_list)
        return written
