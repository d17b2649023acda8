from .exceptions import (
    ArtifactResolutionError,
    ConfigurationError,
    DocLinksError,
    GoalError,
    GoalExecutionError,
    GoalFailureError,
    SubstitutionError,
)
from .matcher import CoordinateMatcher
from .template import Lookup, LookupStatus, lookup, resolve_template, variable_table, version_segments

__all__ = [
    "ArtifactResolutionError",
    "ConfigurationError",
    "CoordinateMatcher",
    "DocLinksError",
    "GoalError",
    "GoalExecutionError",
    "GoalFailureError",
    "Lookup",
    "LookupStatus",
    "SubstitutionError",
    "lookup",
    "resolve_template",
    "variable_table",
    "version_segments",
]
