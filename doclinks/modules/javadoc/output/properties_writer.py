"""Java ``.properties`` serialization, plain and XML."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Mapping, Optional
from xml.sax.saxutils import escape

log = logging.getLogger(__name__)

XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'
XML_DOCTYPE = '<!DOCTYPE properties SYSTEM "http://java.sun.com/dtd/properties.dtd">'

_SPECIAL = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}


def _escape(text: str, *, is_key: bool) -> str:
    out: List[str] = []
    for index, char in enumerate(text):
        if char == "\\":
            out.append("\\\\")
        elif char == " ":
            out.append("\\ " if is_key or index == 0 else " ")
        elif char in _SPECIAL:
            out.append(_SPECIAL[char])
        elif char in "=:#!":
            out.append("\\" + char)
        elif ord(char) < 0x20 or ord(char) > 0x7E:
            out.extend(f"\\u{unit:04X}" for unit in _utf16_units(char))
        else:
            out.append(char)
    return "".join(out)


def _utf16_units(char: str) -> List[int]:
    encoded = char.encode("utf-16-be")
    return [int.from_bytes(encoded[i : i + 2], "big") for i in range(0, len(encoded), 2)]


def _comment(text: str) -> str:
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return "\n".join("#" + _escape_comment(line) for line in lines)


def _escape_comment(line: str) -> str:
    return "".join(
        char if 0x20 <= ord(char) <= 0x7E or char == "\t" else f"\\u{ord(char):04X}"
        for char in line
    )


def format_properties(
    properties: Mapping[str, str],
    comment: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> str:
    """Render ``properties`` the way ``java.util.Properties.store`` does, keys sorted."""
    lines: List[str] = []
    if comment is not None:
        lines.append(_comment(comment))
    stamp = (timestamp or datetime.now().astimezone()).strftime("%a %b %d %H:%M:%S %Z %Y")
    lines.append("#" + stamp)
    for key in sorted(properties):
        lines.append(f"{_escape(key, is_key=True)}={_escape(properties[key], is_key=False)}")
    return "\n".join(lines) + "\n"


def format_xml_properties(properties: Mapping[str, str], comment: Optional[str] = None) -> str:
    """Render ``properties`` in the ``properties.dtd`` XML format, keys sorted."""
    lines = [XML_HEADER, XML_DOCTYPE, "<properties>"]
    if comment is not None:
        lines.append(f"<comment>{escape(comment)}</comment>")
    for key in sorted(properties):
        attribute = escape(key, {'"': "&quot;"})
        lines.append(f'<entry key="{attribute}">{escape(properties[key])}</entry>')
    lines.append("</properties>")
    return "\n".join(lines) + "\n"


def write_properties(path: Path, properties: Mapping[str, str]) -> Path:
    """Write ``properties`` to ``path``; a ``.xml`` name selects the XML format."""
    path.parent.mkdir(parents=True, exist_ok=True)
    name = path.name
    if name.lower().endswith(".xml"):
        path.write_text(format_xml_properties(properties, comment=name), encoding="utf-8")
    else:
        path.write_text(format_properties(properties, comment=name), encoding="latin-1", errors="replace")
    log.info("Wrote %d properties to %s", len(properties), path)
    return path
