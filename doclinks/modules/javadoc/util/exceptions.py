"""Exceptions raised while computing javadoc links."""

from __future__ import annotations


class DocLinksError(Exception):
    """Base exception for all link computation errors."""


class ConfigurationError(DocLinksError):
    """Raised for a malformed rule or an unresolvable URL template."""


class SubstitutionError(DocLinksError):
    """Raised when a template placeholder has no unique value."""

    def __init__(self, name: str, template: str | None = None):
        self.name = name
        self.template = template
        super().__init__(f"no unique value for `{name}`")


class ArtifactResolutionError(DocLinksError):
    """Raised when an artifact cannot be fetched from any repository."""

    def __init__(self, coordinate: object, message: str):
        self.coordinate = coordinate
        super().__init__(f"{coordinate}: {message}")


class GoalError(DocLinksError):
    """Base for errors reported back to the invoking build tool."""


class GoalFailureError(GoalError):
    """Expected failure kind, e.g. a configuration problem."""


class GoalExecutionError(GoalError):
    """Unexpected failure while executing a goal."""
