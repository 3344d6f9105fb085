"""Rendered address HTML to plain text.

The upstream API formats addresses as small HTML fragments, for example
``<p>Jane Doe<br/>Main St 1</p><p>12345 Town</p>``.  :func:`html_to_plain_text`
turns such a fragment into newline separated lines.

Rules
-----
The following transforms are applied in order:

1. ``<br>`` tags in any spelling (``<br/>``, ``<BR />``) become a newline.
2. Closing ``</div>`` and ``</p>`` tags become a newline.
3. Every other tag is removed.
4. Character references are decoded with
   :func:`~clientaddress.render.entities.decode_entities`.
5. Runs of spaces and tabs collapse to one space.
6. Runs of blank lines collapse to a single newline.
7. Leading and trailing whitespace is trimmed.

Tags are removed before decoding, so ``&lt;b&gt;`` survives as literal text.
Whitespace is collapsed after decoding, so ``&nbsp;&nbsp;`` ends up as a
single space.

>>> html_to_plain_text("<p>A</p><p>B</p>")
'A\\nB'
"""

from __future__ import annotations

import re

from .entities import decode_entities

_BR_RE = re.compile(r"<\s*br\s*/?\s*>", re.IGNORECASE)
_BLOCK_END_RE = re.compile(r"<\s*/\s*(?:div|p)\s*>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")
_INLINE_WS_RE = re.compile(r"[ \t]+")
_BLANK_LINES_RE = re.compile(r"\n\s*\n")


def html_to_plain_text(html: str | None) -> str:
    """Convert a rendered address fragment to plain text."""

    if not html:
        return ""
    text = _BR_RE.sub("\n", html)
    text = _BLOCK_END_RE.sub("\n", text)
    text = _TAG_RE.sub("", text)
    text = decode_entities(text)
    text = _INLINE_WS_RE.sub(" ", text)
    text = _BLANK_LINES_RE.sub("\n", text)
    return text.strip()


__all__ = ["html_to_plain_text"]
