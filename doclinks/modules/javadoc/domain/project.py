"""Project model handed over by the build tool."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .constants import JAR_TYPE
from .coordinate import ArtifactCoordinate, ResolvedArtifact, coordinate_from_parts


@dataclass
class Dependency:
    """A declared dependency or dependency-management entry."""

    group_id: str
    artifact_id: str
    version: Optional[str] = None
    type: str = JAR_TYPE
    classifier: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Dependency":
        return cls(
            group_id=data["groupId"],
            artifact_id=data["artifactId"],
            version=data.get("version"),
            type=data.get("type") or JAR_TYPE,
            classifier=data.get("classifier"),
        )


@dataclass
class ProjectModel:
    dependencies: List[Dependency] = field(default_factory=list)
    dependency_management: List[Dependency] = field(default_factory=list)
    artifacts: List[ResolvedArtifact] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base_dir: Optional[Path] = None) -> "ProjectModel":
        artifacts = [_artifact_from_dict(item, base_dir) for item in data.get("artifacts") or []]
        return cls(
            dependencies=[Dependency.from_dict(item) for item in data.get("dependencies") or []],
            dependency_management=[
                Dependency.from_dict(item) for item in data.get("dependencyManagement") or []
            ],
            artifacts=artifacts,
        )


def _artifact_from_dict(data: Mapping[str, Any], base_dir: Optional[Path]) -> ResolvedArtifact:
    coordinate: ArtifactCoordinate = coordinate_from_parts(
        data["groupId"],
        data["artifactId"],
        data.get("version") or "",
        data.get("type") or JAR_TYPE,
        data.get("classifier") or "",
    )
    file = data.get("file")
    path: Optional[Path] = None
    if file:
        path = Path(file).expanduser()
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
    return ResolvedArtifact(coordinate=coordinate, file=path)


def load_project_descriptor(path: Path) -> ProjectModel:
    """Read a JSON project descriptor; relative artifact files resolve against its directory."""
    data: Dict[str, Any] = json.loads(Path(path).read_text(encoding="utf-8"))
    return ProjectModel.from_dict(data, base_dir=Path(path).parent)
