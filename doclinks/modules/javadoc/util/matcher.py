"""Artifact pattern matching in the style of Maven's strict include filter."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple

log = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")

# Pattern segment count -> coordinate attributes compared, in order.
_LAYOUTS = {
    1: ("group_id",),
    2: ("group_id", "artifact_id"),
    3: ("group_id", "artifact_id", "version"),
    4: ("group_id", "artifact_id", "type", "version"),
    5: ("group_id", "artifact_id", "type", "classifier", "version"),
}


def split_patterns(patterns: str | None) -> List[str]:
    """Split a ``<link/>`` artifact string on commas and whitespace."""
    return _SEPARATORS.split(patterns or "")


def _compile_segment(segment: str) -> Pattern[str]:
    return re.compile(".*".join(re.escape(part) for part in segment.split("*")))


class _CompiledPattern:
    def __init__(self, text: str) -> None:
        self.text = text
        segments = text.split(":")
        self.attributes: Optional[Tuple[str, ...]] = _LAYOUTS.get(len(segments)) if text else None
        self.segments = [_compile_segment(segment) for segment in segments]
        if self.attributes is None and text:
            log.debug("Ignoring malformed artifact pattern %r", text)

    def matches(self, coordinate) -> bool:
        if self.attributes is None:
            return False
        for attribute, segment in zip(self.attributes, self.segments):
            if attribute == "version":
                candidates = {coordinate.version or "", coordinate.base_version or ""}
            else:
                candidates = {getattr(coordinate, attribute) or ""}
            if not any(segment.fullmatch(value) for value in candidates):
                return False
        return True


class CoordinateMatcher:
    """Matches coordinates against ``groupId[:artifactId[:version]]`` patterns.

    Any segment may contain ``*``. Empty patterns match nothing.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self._patterns = [_CompiledPattern(pattern.strip()) for pattern in patterns]

    @classmethod
    def parse(cls, patterns: str | None) -> "CoordinateMatcher":
        return cls(split_patterns(patterns))

    @property
    def patterns(self) -> Sequence[str]:
        return [pattern.text for pattern in self._patterns]

    def include(self, coordinate) -> bool:
        return any(pattern.matches(coordinate) for pattern in self._patterns)
