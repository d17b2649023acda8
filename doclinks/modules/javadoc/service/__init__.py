from .assembler import JavadocMapBuilder, OptionsAssembler, exclude_offline_urls
from .goals import (
    AbstractJavadocGoal,
    GenerateJavadocMapGoal,
    GenerateOfflineLinkOptionsFileGoal,
    GenerateOptionsFileGoal,
)
from .resolution import (
    OfflineLink,
    OfflineResolutionEngine,
    ResolvedOfflineMap,
    collect_link_urls,
    javadoc_candidates,
)

__all__ = [
    "AbstractJavadocGoal",
    "GenerateJavadocMapGoal",
    "GenerateOfflineLinkOptionsFileGoal",
    "GenerateOptionsFileGoal",
    "JavadocMapBuilder",
    "OfflineLink",
    "OfflineResolutionEngine",
    "OptionsAssembler",
    "ResolvedOfflineMap",
    "collect_link_urls",
    "exclude_offline_urls",
    "javadoc_candidates",
]
