"""Turn link URLs and resolved offline links into javadoc inputs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from doclinks.modules.javadoc.archive import OfflineIndexExtractor
from doclinks.modules.javadoc.domain import ResolvedArtifact
from doclinks.modules.javadoc.domain.constants import (
    ARTIFACT_KEY_SUFFIX,
    INDEX_LIST_NAMES,
    MODULE_KEY_SUFFIX,
    MODULE_PREFIX,
)
from doclinks.modules.javadoc.fileget import IndexListFetcher, jar_url
from doclinks.modules.javadoc.output import link_option, linkoffline_option

from .resolution import ResolvedOfflineMap

log = logging.getLogger(__name__)


def exclude_offline_urls(links: Iterable[str], offline: ResolvedOfflineMap) -> List[str]:
    """Drop link URLs already served by an offline link."""
    offline_urls = set(offline.urls())
    return [url for url in dict.fromkeys(links) if url not in offline_urls]


class OptionsAssembler:
    """Builds ``-link`` / ``-linkoffline`` options, extracting offline indexes."""

    def __init__(self, extractor: Optional[OfflineIndexExtractor] = None) -> None:
        self.extractor = extractor or OfflineIndexExtractor()
        self.log = logging.getLogger(self.__class__.__name__)

    def assemble(
        self,
        links: Iterable[str],
        offline: ResolvedOfflineMap,
        index_root: Path,
    ) -> List[str]:
        lines = [link_option(url) for url in exclude_offline_urls(links, offline)]
        for url, artifacts in offline.group_by_url().items():
            for artifact in artifacts:
                location = self._extract(artifact, index_root)
                if location is not None:
                    lines.append(linkoffline_option(url, location))
        return lines

    def _extract(self, artifact: ResolvedArtifact, index_root: Path) -> Optional[Path]:
        location = index_root / artifact.versionless_key
        if artifact.file is None:
            self.log.warning("%s: No archive resolved; skipping...", artifact)
            return None
        if not self.extractor.extract(artifact.file, location):
            self.log.warning("%s: No location files; skipping...", location)
            return None
        return location


class JavadocMapBuilder:
    """Maps each documented package (or module element) to its javadoc root.

    For every line of a javadoc root's ``element-list``/``package-list`` the
    map holds ``<name>`` -> root URL, ``<name>-module`` -> module (when the
    list declares one) and ``<name>-artifact`` -> ``groupId:artifactId``
    (offline links only). The first root to document a name wins.
    """

    def __init__(self, fetcher: Optional[IndexListFetcher] = None) -> None:
        self.fetcher = fetcher or IndexListFetcher()
        self.log = logging.getLogger(self.__class__.__name__)

    def build(self, links: Iterable[str], offline: ResolvedOfflineMap) -> Dict[str, str]:
        properties: Dict[str, str] = {}
        for entry in offline.values():
            self._load(properties, entry.artifact, entry.url)
        for url in exclude_offline_urls(links, offline):
            self._load(properties, None, url)
        return properties

    def _load(
        self,
        properties: Dict[str, str],
        artifact: Optional[ResolvedArtifact],
        javadoc: str,
    ) -> None:
        if artifact is not None and artifact.file is not None:
            location = jar_url(artifact.file)
        else:
            location = javadoc
        lines = self.fetcher.read_lines(location)
        if lines is None:
            self.log.warning("Could not read any of %s from %s", list(INDEX_LIST_NAMES), location)
            return

        module: Optional[str] = None
        for raw_line in lines:
            line = raw_line.strip()
            if not line:
                continue
            if line.startswith(MODULE_PREFIX):
                module = line[len(MODULE_PREFIX):]
                continue
            if line in properties:
                continue
            properties[line] = javadoc
            if module is not None:
                properties[line + MODULE_KEY_SUFFIX] = module
            if artifact is not None:
                properties[line + ARTIFACT_KEY_SUFFIX] = artifact.versionless_key
