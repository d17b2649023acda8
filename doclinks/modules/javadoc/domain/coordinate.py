"""Maven artifact coordinates."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, List, Optional, TYPE_CHECKING

from .constants import JAR_TYPE, JAVADOC_CLASSIFIER

if TYPE_CHECKING:
    from .project import Dependency

_SNAPSHOT_TIMESTAMP = re.compile(r"^(.*)-(\d{8}\.\d{6})-(\d+)$")
_EXTENSIONS = {
    "bundle": "jar",
    "maven-plugin": "jar",
    "test-jar": "jar",
    "ejb": "jar",
    "ejb-client": "jar",
    "java-source": "jar",
    "javadoc": "jar",
}


def to_base_version(version: str) -> str:
    """Normalize a timestamped snapshot version to ``X-SNAPSHOT``."""
    match = _SNAPSHOT_TIMESTAMP.match(version or "")
    if match:
        return f"{match.group(1)}-SNAPSHOT"
    return version or ""


@dataclass(frozen=True)
class ArtifactCoordinate:
    """Represents a Maven artifact coordinate."""

    group_id: str
    artifact_id: str
    version: str = ""
    type: str = JAR_TYPE
    classifier: str = ""
    base_version: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.base_version:
            object.__setattr__(self, "base_version", to_base_version(self.version))

    @property
    def versionless_key(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"

    @property
    def extension(self) -> str:
        return _EXTENSIONS.get(self.type, self.type or JAR_TYPE)

    @property
    def path_segments(self) -> List[str]:
        """Maven 2 repository layout of this artifact."""
        group_path = self.group_id.replace(".", "/")
        suffix = f"-{self.classifier}" if self.classifier else ""
        filename = f"{self.artifact_id}-{self.version}{suffix}.{self.extension}"
        return [group_path, self.artifact_id, self.base_version, filename]

    def __str__(self) -> str:
        parts = [self.group_id, self.artifact_id, self.type]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)


def coordinate_from_parts(
    group_id: str,
    artifact_id: str,
    version: str = "",
    type: str = JAR_TYPE,
    classifier: str = "",
) -> ArtifactCoordinate:
    return ArtifactCoordinate(
        group_id=(group_id or "").strip(),
        artifact_id=(artifact_id or "").strip(),
        version=(version or "").strip(),
        type=(type or JAR_TYPE).strip(),
        classifier=(classifier or "").strip(),
    )


def coordinate_from_gav(gav: str) -> ArtifactCoordinate:
    """Parse ``g:a``, ``g:a:v``, ``g:a:type:v`` or ``g:a:type:classifier:v``.

    With three or more segments the last one is always the version.
    """
    parts = [part.strip() for part in gav.split(":")]
    group_id = parts[0] if len(parts) > 0 else ""
    artifact_id = parts[1] if len(parts) > 1 else ""
    version = parts[-1] if len(parts) > 2 else ""
    type_ = parts[2] if len(parts) > 3 else JAR_TYPE
    classifier = parts[3] if len(parts) > 4 else ""
    return coordinate_from_parts(group_id, artifact_id, version, type_, classifier)


def coordinate_from_dependency(dependency: "Dependency") -> ArtifactCoordinate:
    return coordinate_from_parts(
        dependency.group_id,
        dependency.artifact_id,
        dependency.version,
        dependency.type,
        dependency.classifier,
    )


def javadoc_coordinate(coordinate: ArtifactCoordinate) -> ArtifactCoordinate:
    """The ``javadoc`` classified jar for the same group/artifact/version."""
    return replace(coordinate, type=JAR_TYPE, classifier=JAVADOC_CLASSIFIER)


def sort_by_versionless_key(coordinates: Iterable[ArtifactCoordinate]) -> List[ArtifactCoordinate]:
    return sorted(coordinates, key=lambda item: item.versionless_key)


@dataclass(frozen=True)
class ResolvedArtifact:
    """A coordinate together with its file on the local filesystem."""

    coordinate: ArtifactCoordinate
    file: Optional[Path] = None

    @property
    def versionless_key(self) -> str:
        return self.coordinate.versionless_key

    def __str__(self) -> str:
        return str(self.coordinate)
