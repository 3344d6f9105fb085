"""HTML character reference decoding.

Only a fixed table of named entities is recognised, which is all the upstream
address renderer emits.  Named references are replaced in a single pass, so a
decoded ``&amp;`` followed by ``lt;`` is not turned into ``<`` by the named
pass.  Numeric references (``&#65;``, ``&#x41;``) are decoded afterwards.
Malformed references are left untouched.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

NAMED_ENTITIES: Mapping[str, str] = MappingProxyType(
    {
        "&amp;": "&",
        "&lt;": "<",
        "&gt;": ">",
        "&quot;": '"',
        "&#039;": "'",
        "&apos;": "'",
        "&nbsp;": " ",
        "&ndash;": "–",
        "&mdash;": "—",
        "&ouml;": "ö",
        "&uuml;": "ü",
        "&auml;": "ä",
        "&Ouml;": "Ö",
        "&Uuml;": "Ü",
        "&Auml;": "Ä",
        "&szlig;": "ß",
    }
)

_NAMED_RE = re.compile("|".join(re.escape(name) for name in NAMED_ENTITIES))
_DECIMAL_RE = re.compile(r"&#([0-9]+);")
_HEX_RE = re.compile(r"&#x([0-9a-f]+);", re.IGNORECASE)


def _code_point(match: re.Match[str], base: int) -> str:
    try:
        return chr(int(match.group(1), base))
    except (ValueError, OverflowError):
        # beyond U+10FFFF
        return match.group(0)


def decode_entities(text: str) -> str:
    """Return ``text`` with named and numeric character references decoded."""

    if not text or "&" not in text:
        return text
    text = _NAMED_RE.sub(lambda m: NAMED_ENTITIES[m.group(0)], text)
    text = _DECIMAL_RE.sub(lambda m: _code_point(m, 10), text)
    return _HEX_RE.sub(lambda m: _code_point(m, 16), text)


__all__ = ["NAMED_ENTITIES", "decode_entities"]
