"""Javadoc link module exports."""

from .service import (
    GenerateJavadocMapGoal,
    GenerateOfflineLinkOptionsFileGoal,
    GenerateOptionsFileGoal,
    OfflineResolutionEngine,
)

__all__ = [
    "GenerateJavadocMapGoal",
    "GenerateOfflineLinkOptionsFileGoal",
    "GenerateOptionsFileGoal",
    "OfflineResolutionEngine",
]
