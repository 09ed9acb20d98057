#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/constants.py
"""Constants and enumerations shared across the delta2html package.

This module centralizes the Quill value types, group tags and the default
values used by the option dataclasses.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Literal

NEWLINE = "\n"
BR_TAG = "<br/>"


class ListType(str, Enum):
    """Values of the ``list`` attribute."""

    ORDERED = "ordered"
    BULLET = "bullet"
    CHECKED = "checked"
    UNCHECKED = "unchecked"


class ScriptType(str, Enum):
    """Values of the ``script`` attribute."""

    SUB = "sub"
    SUPER = "super"


class DirectionType(str, Enum):
    """Values of the ``direction`` attribute."""

    RTL = "rtl"


class AlignType(str, Enum):
    """Values of the ``align`` attribute."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class DataType(str, Enum):
    """Built-in insert payload kinds."""

    IMAGE = "image"
    VIDEO = "video"
    FORMULA = "formula"
    TEXT = "text"


class GroupType(str, Enum):
    """Tag carried by every group kind of the document tree."""

    INLINE_GROUP = "inline-group"
    BLOCK = "block"
    LIST = "list"
    LIST_ITEM = "list-item"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    VIDEO = "video"
    BLOT_BLOCK = "blot-block"


LIST_TYPES = frozenset(t.value for t in ListType)
ALIGN_TYPES = frozenset(t.value for t in AlignType)
SCRIPT_TYPES = frozenset(t.value for t in ScriptType)

# Attributes that turn a newline op into a block marker
BLOCK_ATTRIBUTES = ("blockquote", "code-block", "list", "header", "align", "direction", "indent")

# Inline attributes in tag nesting order (outermost first)
INLINE_ATTRIBUTES = ("link", "mentions", "script", "bold", "italic", "strike", "underline", "code")

# Grouping defaults
DEFAULT_MULTI_LINE_BLOCKQUOTE = True
DEFAULT_MULTI_LINE_HEADER = True
DEFAULT_MULTI_LINE_CODE_BLOCK = True
DEFAULT_MULTI_LINE_CUSTOM_BLOCK = True

# Rendering defaults
DEFAULT_PARAGRAPH_TAG = "p"
DEFAULT_CLASS_PREFIX = "ql"
DEFAULT_LIST_ITEM_TAG = "li"
DEFAULT_ORDERED_LIST_TAG = "ol"
DEFAULT_BULLET_LIST_TAG = "ul"
DEFAULT_MENTION_TAG = "a"
DEFAULT_LINK_TARGET = "_blank"
DEFAULT_INLINE_STYLES = False
DEFAULT_MULTI_LINE_PARAGRAPH = True
DEFAULT_ALLOW_BACKGROUND_CLASSES = False
DEFAULT_ENCODE_HTML = True

OutputFormat = Literal["html", "json", "tree"]
DEFAULT_OUTPUT_FORMAT: OutputFormat = "html"

# Sanitization limits
MAX_HEADER_LEVEL = 6
MIN_HEADER_LEVEL = 1
MAX_INDENT = 30

VALID_HEX_COLOR_RE = re.compile(r"^#([0-9A-F]{6}|[0-9A-F]{3})$", re.IGNORECASE)
VALID_COLOR_LITERAL_RE = re.compile(r"^[a-z]{1,50}$", re.IGNORECASE)
VALID_RGB_COLOR_RE = re.compile(
    r"^rgb\(((0|25[0-5]|2[0-4]\d|1\d\d|0?\d?\d),\s*){2}(0|25[0-5]|2[0-4]\d|1\d\d|0?\d?\d)\)$",
    re.IGNORECASE,
)
VALID_FONT_NAME_RE = re.compile(r"^[a-z0-9 -]{1,50}$", re.IGNORECASE)
VALID_SIZE_RE = re.compile(r"^[a-z0-9-]{1,20}$", re.IGNORECASE)
VALID_WIDTH_RE = re.compile(r"^[0-9]*(px|em|%)?$")
VALID_TARGET_RE = re.compile(r"^[\w-]{1,50}$", re.IGNORECASE)
VALID_REL_RE = re.compile(r"^[a-z\s-]{1,250}$", re.IGNORECASE)
VALID_LANG_RE = re.compile(r"^[a-zA-Z\s\-\\/+]{1,50}$", re.IGNORECASE)
VALID_MENTION_CLASS_RE = re.compile(r"^[\w -]{1,500}$", re.IGNORECASE)

# URL schemes that must never reach an href/src attribute
DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}
UNSAFE_URL_PREFIX = "unsafe:"

# Config discovery
CONFIG_FILENAMES = (".delta2html.toml", ".delta2html.yaml", ".delta2html.yml", ".delta2html.json")
PYPROJECT_TOOL_SECTION = "delta2html"
