"""Compute link URLs and resolve offline javadoc artifacts for a project."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from doclinks.modules.javadoc.domain import (
    JAR_TYPE,
    JAVADOC_CLASSIFIER,
    ArtifactCoordinate,
    Dependency,
    LinkRule,
    ProjectModel,
    ResolvedArtifact,
    coordinate_from_dependency,
    javadoc_coordinate,
)
from doclinks.modules.javadoc.fileget import ArtifactResolver
from doclinks.modules.javadoc.util.exceptions import ArtifactResolutionError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class OfflineLink:
    artifact: ResolvedArtifact
    url: str


class ResolvedOfflineMap(Mapping):
    """Immutable versionless key -> :class:`OfflineLink` mapping, iterated in key order."""

    def __init__(self, entries: Optional[Dict[str, OfflineLink]] = None) -> None:
        self._entries: Dict[str, OfflineLink] = {
            key: (entries or {})[key] for key in sorted(entries or {})
        }

    def __getitem__(self, key: str) -> OfflineLink:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResolvedOfflineMap({self._entries!r})"

    def urls(self) -> List[str]:
        seen: Dict[str, None] = {}
        for entry in self._entries.values():
            seen.setdefault(entry.url, None)
        return list(seen)

    def group_by_url(self) -> Dict[str, List[ResolvedArtifact]]:
        groups: Dict[str, List[ResolvedArtifact]] = {}
        for entry in self._entries.values():
            groups.setdefault(entry.url, []).append(entry.artifact)
        return groups


def _dedupe(items: Iterable[ArtifactCoordinate]) -> List[ArtifactCoordinate]:
    return list(dict.fromkeys(items))


def _dependencies(project: ProjectModel, include_dependency_management: bool) -> List[Dependency]:
    dependencies = list(project.dependencies or [])
    if include_dependency_management:
        dependencies.extend(project.dependency_management or [])
    return dependencies


def javadoc_candidates(
    project: ProjectModel, include_dependency_management: bool
) -> List[ArtifactCoordinate]:
    """Javadoc coordinates for plain-jar dependencies with a version."""
    return _dedupe(
        javadoc_coordinate(coordinate_from_dependency(dependency))
        for dependency in _dependencies(project, include_dependency_management)
        if not (dependency.classifier or "").strip()
        and dependency.type == JAR_TYPE
        and (dependency.version or "").strip()
    )


def collect_link_urls(
    links: Sequence[LinkRule],
    project: ProjectModel,
    include_dependency_management: bool = False,
) -> List[str]:
    """Ordered, duplicate-free URLs of every link rule over the project's artifacts."""
    coordinates = [artifact.coordinate for artifact in project.artifacts or []]
    coordinates.extend(
        coordinate_from_dependency(dependency)
        for dependency in _dependencies(project, include_dependency_management)
        if (dependency.version or "").strip()
    )
    coordinates = _dedupe(coordinates)

    urls: Dict[str, None] = {}
    for link in links:
        for coordinate in coordinates:
            if link.include(coordinate):
                url = link.url_for(coordinate)
                if url is not None:
                    urls.setdefault(url, None)
    return list(urls)


class OfflineResolutionEngine:
    """Resolves the javadoc jar of every dependency matched by an offline link.

    Artifacts already present as resolved ``javadoc`` jars are taken as-is.
    The remaining candidates are resolved one rule at a time; the first rule
    to match and resolve an artifact wins and later matches only warn when
    they would produce a different URL. Resolution failures are logged and
    skipped. URL template errors are not caught here.
    """

    def __init__(self, resolver: ArtifactResolver) -> None:
        self.resolver = resolver
        self.log = logging.getLogger(self.__class__.__name__)

    def resolve(
        self,
        offlinelinks: Sequence[LinkRule],
        project: ProjectModel,
        include_dependency_management: bool = False,
    ) -> ResolvedOfflineMap:
        entries: Dict[str, OfflineLink] = {}
        pre_resolved: List[ArtifactCoordinate] = []

        for artifact in project.artifacts or []:
            coordinate = artifact.coordinate
            if (
                coordinate.type != JAR_TYPE
                or coordinate.classifier != JAVADOC_CLASSIFIER
                or artifact.file is None
                or coordinate.versionless_key in entries
            ):
                continue
            pre_resolved.append(coordinate)
            for offlinelink in offlinelinks:
                if offlinelink.include(coordinate):
                    url = offlinelink.url_for(coordinate)
                    if url is not None:
                        entries[coordinate.versionless_key] = OfflineLink(artifact, url)
                        self.log.debug("Using project javadoc artifact %s -> %s", artifact, url)
                    break

        candidates = [
            coordinate
            for coordinate in javadoc_candidates(project, include_dependency_management)
            if coordinate.versionless_key not in entries
        ]

        for offlinelink in offlinelinks:
            matched = [coordinate for coordinate in candidates if offlinelink.include(coordinate)]
            if not matched and not any(offlinelink.include(c) for c in pre_resolved):
                self.log.warning("%s does not match any project dependencies.", offlinelink.artifact)

            for coordinate in matched:
                existing = entries.get(coordinate.versionless_key)
                if existing is None:
                    self._resolve_one(offlinelink, coordinate, entries)
                else:
                    url = offlinelink.url_for(coordinate)
                    if url != existing.url:
                        self.log.warning(
                            "%s matches %s but was previously resolved with %s",
                            coordinate,
                            offlinelink,
                            existing.url,
                        )

        return ResolvedOfflineMap(entries)

    def _resolve_one(
        self,
        offlinelink: LinkRule,
        coordinate: ArtifactCoordinate,
        entries: Dict[str, OfflineLink],
    ) -> None:
        self.log.info("Resolving %s...", coordinate)
        try:
            artifact = self.resolver.resolve(coordinate)
        except ArtifactResolutionError as exc:
            self.log.warning("%s", exc)
            self.log.debug("Resolution of %s failed", coordinate, exc_info=True)
            return
        except Exception as exc:  # noqa: BLE001
            self.log.warning("%s: %s", coordinate, exc)
            self.log.debug("Resolution of %s failed", coordinate, exc_info=True)
            return

        url = offlinelink.url_for(coordinate)
        if url is None:
            self.log.warning("%s has no url; ignoring %s", offlinelink, coordinate)
            return
        entries[coordinate.versionless_key] = OfflineLink(artifact, url)
