from .constants import (
    ELEMENT_LIST,
    INDEX_ENTRY_PATTERN,
    INDEX_LIST_NAMES,
    JAR_TYPE,
    JAVADOC_CLASSIFIER,
    PACKAGE_LIST,
)
from .coordinate import (
    ArtifactCoordinate,
    ResolvedArtifact,
    coordinate_from_dependency,
    coordinate_from_gav,
    coordinate_from_parts,
    javadoc_coordinate,
    sort_by_versionless_key,
    to_base_version,
)
from .project import Dependency, ProjectModel, load_project_descriptor
from .rules import LinkRule, OfflineLinkRule, build_rules

__all__ = [
    "ArtifactCoordinate",
    "Dependency",
    "ELEMENT_LIST",
    "INDEX_ENTRY_PATTERN",
    "INDEX_LIST_NAMES",
    "JAR_TYPE",
    "JAVADOC_CLASSIFIER",
    "LinkRule",
    "OfflineLinkRule",
    "PACKAGE_LIST",
    "ProjectModel",
    "ResolvedArtifact",
    "build_rules",
    "coordinate_from_dependency",
    "coordinate_from_gav",
    "coordinate_from_parts",
    "javadoc_coordinate",
    "load_project_descriptor",
    "sort_by_versionless_key",
    "to_base_version",
]
