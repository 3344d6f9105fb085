"""Conversion of rendered address HTML to plain text."""

from .entities import NAMED_ENTITIES, decode_entities
from .html_text import html_to_plain_text

__all__ = ["NAMED_ENTITIES", "decode_entities", "html_to_plain_text"]
