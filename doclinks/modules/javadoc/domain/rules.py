"""``<link/>`` and ``<offlinelink/>`` rules."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, List, Optional
from urllib.parse import urlsplit

from doclinks.modules.javadoc.util.exceptions import ConfigurationError, SubstitutionError
from doclinks.modules.javadoc.util.matcher import CoordinateMatcher
from doclinks.modules.javadoc.util.template import resolve_template


@dataclass(eq=False)
class LinkRule:
    """Artifact patterns plus the javadoc URL template published for them."""

    artifact: str
    url: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.artifact or not self.artifact.strip():
            raise ConfigurationError(f"{type(self).__name__} requires a non-blank artifact pattern")

    @cached_property
    def matcher(self) -> CoordinateMatcher:
        return CoordinateMatcher.parse(self.artifact)

    def include(self, coordinate) -> bool:
        return self.matcher.include(coordinate)

    def url_for(self, coordinate) -> Optional[str]:
        """Return the URL for ``coordinate`` with all placeholders substituted."""
        if self.url is None:
            return None
        try:
            resolved = resolve_template(self.url, coordinate)
        except SubstitutionError as exc:
            raise ConfigurationError(f"{self}: {exc} in {self.url!r}") from exc
        if not urlsplit(resolved).scheme:
            raise ConfigurationError(f"{self}: {resolved!r} is not an absolute URL")
        return resolved

    @classmethod
    def from_config(cls, config) -> "LinkRule":
        return cls(artifact=config.artifact, url=config.url)

    def __str__(self) -> str:
        return f"{type(self).__name__}(artifact={self.artifact!r}, url={self.url!r})"


class OfflineLinkRule(LinkRule):
    """A rule whose matches are documented from a locally extracted index."""


def build_rules(configs: Iterable, kind: type = LinkRule) -> List[LinkRule]:
    return [kind.from_config(config) for config in configs]
