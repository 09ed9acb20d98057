#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/utils/html.py
"""Small HTML string helpers shared by the renderers."""

from __future__ import annotations

from html import escape as _html_escape
from typing import Iterable, Optional, Union

AttributeValue = Union[str, int, float, bool, None]

_ENTITY_DECODE_MAP = (
    ("&quot;", '"'),
    ("&#x27;", "'"),
    ("&#40;", "("),
    ("&#41;", ")"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
)


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def encode_attribute(value: str) -> str:
    """Escape an attribute value without double-encoding existing entities.

    Examples
    --------
    >>> encode_attribute('a&amp;b "c"')
    'a&amp;b &quot;c&quot;'

    """
    decoded = value
    for entity, char in _ENTITY_DECODE_MAP:
        decoded = decoded.replace(entity, char)
    return _html_escape(decoded)


def _format_attribute_value(value: AttributeValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return encode_attribute(str(value))


def make_start_tag(
    tag: str,
    attributes: Optional[Iterable[tuple[str, AttributeValue]]] = None,
    *,
    self_closing: bool = False,
) -> str:
    """Build an opening tag.

    Attributes whose value is None are skipped.

    Examples
    --------
    >>> make_start_tag("a", [("href", "https://x.org"), ("target", "_blank")])
    '<a href="https://x.org" target="_blank">'
    >>> make_start_tag("img", [("src", "a.png")], self_closing=True)
    '<img src="a.png"/>'

    """
    if not tag:
        return ""

    rendered = "".join(
        f' {key}="{_format_attribute_value(value)}"' for key, value in (attributes or ()) if value is not None
    )
    closing = "/>" if self_closing else ">"
    return f"<{tag}{rendered}{closing}"


def make_end_tag(tag: str) -> str:
    return f"</{tag}>" if tag else ""
