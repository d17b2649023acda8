"""URL template substitution for ``{g}``, ``{a}``, ``{v}`` and friends.

Placeholder names are matched case-insensitively against an ordered
variable table built from the artifact coordinate::

    groupid, artifactid, version, g, a, v, major, minor, micro, patch

A name that is not an exact key may be any prefix that selects a single
distinct value (``{ver}`` -> ``version``, ``{maj}`` -> ``major``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .exceptions import SubstitutionError

PLACEHOLDER = re.compile(r"\{([^{}\s]+)\}")
VERSION_SEGMENT_NAMES = ("major", "minor", "micro", "patch")
_DIGITS = re.compile(r"\d+")

VariableTable = List[Tuple[str, str]]


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class Lookup:
    status: LookupStatus
    value: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


def version_segments(version: str | None) -> Dict[str, str]:
    """Leading dot-separated numeric segments of ``version``.

    ``12.3.4-beta`` gives major/minor/micro; ``7`` gives major only.
    Segments that cannot be parsed are absent rather than zero.
    """
    segments: Dict[str, str] = {}
    text = version or ""
    position = 0
    for index, name in enumerate(VERSION_SEGMENT_NAMES):
        if index > 0:
            if not text.startswith(".", position):
                break
            position += 1
        match = _DIGITS.match(text, position)
        if not match:
            break
        segments[name] = match.group(0)
        position = match.end()
    return segments


def variable_table(coordinate) -> VariableTable:
    version = coordinate.base_version or coordinate.version or ""
    table: VariableTable = [
        ("groupid", coordinate.group_id),
        ("artifactid", coordinate.artifact_id),
        ("version", version),
        ("g", coordinate.group_id),
        ("a", coordinate.artifact_id),
        ("v", version),
    ]
    table.extend(version_segments(version).items())
    return table


def lookup(table: VariableTable, name: str) -> Lookup:
    key = name.lower()
    for entry, value in table:
        if entry == key:
            return Lookup(LookupStatus.FOUND, value)

    values: List[str] = []
    for entry, value in table:
        if entry.startswith(key) and value not in values:
            values.append(value)

    if len(values) == 1:
        return Lookup(LookupStatus.FOUND, values[0])
    if values:
        return Lookup(LookupStatus.AMBIGUOUS)
    return Lookup(LookupStatus.NOT_FOUND)


def _substitute(template: str, table: VariableTable) -> str:
    def _replace(match: re.Match) -> str:
        result = lookup(table, match.group(1))
        if not result.found:
            raise SubstitutionError(match.group(1), template)
        return result.value or ""

    return PLACEHOLDER.sub(_replace, template)


def resolve_template(template: str | None, coordinate) -> str | None:
    """Expand every placeholder in ``template``; substituted text is rescanned once."""
    if template is None:
        return None
    if not PLACEHOLDER.search(template):
        return template
    table = variable_table(coordinate)
    return _substitute(_substitute(template, table), table)
