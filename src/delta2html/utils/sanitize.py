#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/utils/sanitize.py
"""Attribute, URL and mention sanitization for raw delta operations.

Raw attribute values come straight from an editor and are untrusted. This
module validates every known attribute against a strict pattern or value set
before it can reach the grouping engine or the renderer. Unknown attributes
(such as ``table`` row ids or custom blot keys) are passed through unchanged;
the renderer escapes everything it emits.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping, Optional

from delta2html.constants import (
    ALIGN_TYPES,
    DANGEROUS_SCHEMES,
    LIST_TYPES,
    MAX_HEADER_LEVEL,
    MAX_INDENT,
    MIN_HEADER_LEVEL,
    SCRIPT_TYPES,
    UNSAFE_URL_PREFIX,
    VALID_COLOR_LITERAL_RE,
    VALID_FONT_NAME_RE,
    VALID_HEX_COLOR_RE,
    VALID_LANG_RE,
    VALID_MENTION_CLASS_RE,
    VALID_REL_RE,
    VALID_RGB_COLOR_RE,
    VALID_SIZE_RE,
    VALID_TARGET_RE,
    VALID_WIDTH_RE,
    DirectionType,
)
from delta2html.options.sanitize import SanitizeOptions

logger = logging.getLogger(__name__)

BOOLEAN_ATTRIBUTES = ("bold", "italic", "underline", "strike", "code", "blockquote", "code-block", "renderAsBlock")
COLOR_ATTRIBUTES = ("background", "color")

SANITIZED_ATTRIBUTES = frozenset(
    BOOLEAN_ATTRIBUTES
    + COLOR_ATTRIBUTES
    + (
        "font",
        "size",
        "link",
        "script",
        "list",
        "header",
        "align",
        "direction",
        "indent",
        "mentions",
        "mention",
        "width",
        "target",
        "rel",
    )
)

_SAFE_URL_RE = re.compile(r"^((https?|s?ftp|file|blob|mailto|tel):|#|/|data:image/)", re.IGNORECASE)
_LEADING_WHITESPACE_RE = re.compile(r"^\s*", re.MULTILINE)

# Order matters: '&' must be encoded first and decoded last
_URL_ENCODE_MAP = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
    ("(", "&#40;"),
    (")", "&#41;"),
)


def is_valid_hex_color(value: str) -> bool:
    return bool(VALID_HEX_COLOR_RE.match(value))


def is_valid_color_literal(value: str) -> bool:
    return bool(VALID_COLOR_LITERAL_RE.match(value))


def is_valid_rgb_color(value: str) -> bool:
    return bool(VALID_RGB_COLOR_RE.match(value))


def is_valid_color(value: str) -> bool:
    return is_valid_hex_color(value) or is_valid_color_literal(value) or is_valid_rgb_color(value)


def is_valid_font_name(value: str) -> bool:
    return bool(VALID_FONT_NAME_RE.match(value))


def is_valid_size(value: str) -> bool:
    return bool(VALID_SIZE_RE.match(value))


def is_valid_width(value: str) -> bool:
    return bool(VALID_WIDTH_RE.match(value))


def is_valid_target(value: str) -> bool:
    return bool(VALID_TARGET_RE.match(value))


def is_valid_rel(value: str) -> bool:
    return bool(VALID_REL_RE.match(value))


def is_valid_lang(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and bool(VALID_LANG_RE.match(value))


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a scheme that can execute script.

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True

    """
    url_lower = url.strip().lower()
    return any(url_lower.startswith(scheme) for scheme in DANGEROUS_SCHEMES)


def encode_link(url: str) -> str:
    """HTML-encode the characters of a URL that could break out of an attribute.

    Already-encoded entities are decoded first so encoding is not applied twice.
    """
    decoded = url
    for char, entity in reversed(_URL_ENCODE_MAP):
        decoded = decoded.replace(entity, char)
    encoded = decoded
    for char, entity in _URL_ENCODE_MAP:
        encoded = encoded.replace(char, entity)
    return encoded


def sanitize_url(url: str, options: Optional[SanitizeOptions] = None) -> str:
    """Sanitize a link, image or video URL.

    A custom ``url_sanitizer`` from the options wins when it returns a string.
    Otherwise URLs outside the whitelist (http(s), (s)ftp, file, blob, mailto,
    tel, fragment, absolute path, ``data:image/``) get an ``unsafe:`` prefix,
    and the result is attribute-encoded.

    Parameters
    ----------
    url : str
        Raw URL
    options : SanitizeOptions, optional
        Sanitization options

    Returns
    -------
    str
        Sanitized URL

    Examples
    --------
    >>> sanitize_url("https://example.com/?a=1&b=2")
    'https://example.com/?a=1&amp;b=2'
    >>> sanitize_url("javascript:alert(1)")
    'unsafe:javascript:alert&#40;1&#41;'

    """
    if options is not None and options.url_sanitizer is not None:
        custom = options.url_sanitizer(url)
        if isinstance(custom, str):
            return custom

    value = _LEADING_WHITESPACE_RE.sub("", url)
    if not _SAFE_URL_RE.match(value) or is_url_scheme_dangerous(value):
        logger.debug("Marking URL as unsafe: %r", url)
        value = UNSAFE_URL_PREFIX + value
    return encode_link(value)


def sanitize_mention(dirty: Any, options: Optional[SanitizeOptions] = None) -> dict[str, Any]:
    """Clean a ``mention`` attribute.

    ``class`` and ``target`` are validated, ``link`` is URL-sanitized and any
    other key is kept as is.
    """
    clean: dict[str, Any] = {}
    if not isinstance(dirty, Mapping):
        return clean

    for key, value in dirty.items():
        if key == "class":
            if isinstance(value, str) and VALID_MENTION_CLASS_RE.match(value):
                clean["class"] = value
        elif key == "target":
            if isinstance(value, str) and is_valid_target(value):
                clean["target"] = value
        elif key == "link":
            if isinstance(value, str):
                clean["link"] = sanitize_url(value, options)
        else:
            clean[key] = value
    return clean


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _as_int(number: float) -> int | float:
    return int(number) if number == int(number) else number


def sanitize_attributes(dirty: Any, options: Optional[SanitizeOptions] = None) -> dict[str, Any]:
    """Return a clean copy of a raw attribute mapping.

    Parameters
    ----------
    dirty : Any
        Raw ``attributes`` value of a delta op. Anything but a mapping yields
        an empty dict.
    options : SanitizeOptions, optional
        Sanitization options (URL sanitizer)

    Returns
    -------
    dict
        Attributes with every known key validated; unknown keys passed through

    """
    clean: dict[str, Any] = {}
    if not isinstance(dirty, Mapping):
        return clean

    for prop in BOOLEAN_ATTRIBUTES:
        if dirty.get(prop):
            clean[prop] = True

    for prop in COLOR_ATTRIBUTES:
        value = dirty.get(prop)
        if isinstance(value, str) and is_valid_color(value):
            clean[prop] = value

    font = dirty.get("font")
    if isinstance(font, str) and is_valid_font_name(font):
        clean["font"] = font

    size = dirty.get("size")
    if isinstance(size, str) and is_valid_size(size):
        clean["size"] = size

    width = dirty.get("width")
    if width and isinstance(width, (int, float, str)) and not isinstance(width, bool) and is_valid_width(str(width)):
        clean["width"] = width

    link = dirty.get("link")
    if link and isinstance(link, str):
        clean["link"] = sanitize_url(link, options)

    target = dirty.get("target")
    if isinstance(target, str) and is_valid_target(target):
        clean["target"] = target

    rel = dirty.get("rel")
    if isinstance(rel, str) and is_valid_rel(rel):
        clean["rel"] = rel

    code_block = dirty.get("code-block")
    if code_block:
        clean["code-block"] = code_block if isinstance(code_block, str) and is_valid_lang(code_block) else True

    script = dirty.get("script")
    if isinstance(script, str) and script in SCRIPT_TYPES:
        clean["script"] = script

    list_type = dirty.get("list")
    if isinstance(list_type, str) and list_type in LIST_TYPES:
        clean["list"] = list_type

    header = _to_number(dirty.get("header"))
    if header:
        clean["header"] = max(min(round(header), MAX_HEADER_LEVEL), MIN_HEADER_LEVEL)

    align = dirty.get("align")
    if isinstance(align, str) and align in ALIGN_TYPES:
        clean["align"] = align

    if dirty.get("direction") == DirectionType.RTL:
        clean["direction"] = DirectionType.RTL.value

    indent = _to_number(dirty.get("indent"))
    if indent:
        clean["indent"] = _as_int(min(indent, MAX_INDENT))

    mentions = dirty.get("mentions")
    mention = dirty.get("mention")
    if mentions and mention:
        clean["mentions"] = True
        clean["mention"] = sanitize_mention(mention, options)

    for key, value in dirty.items():
        if key not in SANITIZED_ATTRIBUTES:
            clean[key] = value

    return clean
