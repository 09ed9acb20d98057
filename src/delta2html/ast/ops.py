#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/ast/ops.py
"""Insert operations and their classification predicates.

A :class:`DeltaInsertOp` is the unit the grouping engine works on: a typed
content payload plus an attribute mapping. Every predicate on it is pure and
treats a missing attribute as absent, so classification can never fail and
gives the same answer before and after grouping.

Payload kinds
-------------
- :class:`InsertDataQuill` for the built-in ``text``, ``image``, ``video``
  and ``formula`` inserts
- :class:`InsertDataCustom` for any other embed, keyed by its blot name

"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

from delta2html.constants import NEWLINE, DataType, ListType


@dataclass(frozen=True)
class InsertDataQuill:
    """Payload of a built-in Quill insert.

    Parameters
    ----------
    type : DataType
        One of text, image, video or formula
    value : str
        The text itself, the image/video URL or the formula source

    """

    type: DataType
    value: str


@dataclass(frozen=True)
class InsertDataCustom:
    """Payload of a custom embed.

    Parameters
    ----------
    type : str
        Name of the custom blot (the single key of the raw insert mapping)
    value : Any
        Opaque value handed to the custom renderer

    """

    type: str
    value: Any


InsertData = Union[InsertDataQuill, InsertDataCustom]


def _freeze(attributes: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(attributes or {}))


def _as_indent(value: Any) -> int:
    """Coerce a raw ``indent`` attribute to a non-negative level; junk is 0."""
    if isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0
    return int(number)


@dataclass(frozen=True)
class DeltaInsertOp:
    """A single insert operation of a Quill delta.

    Parameters
    ----------
    insert : InsertData
        Typed content payload
    attributes : Mapping[str, Any], default = empty mapping
        Formatting attributes. Stored as a read-only mapping.

    Examples
    --------
        >>> op = DeltaInsertOp.text("\\n", {"list": "bullet"})
        >>> op.is_list(), op.is_container_block()
        (True, True)

    """

    insert: InsertData
    attributes: Mapping[str, Any] = field(default_factory=dict)

    # attributes are a mappingproxy; ops compare by value but do not hash
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Freeze the attribute mapping."""
        object.__setattr__(self, "attributes", _freeze(self.attributes))

    @classmethod
    def text(cls, value: str, attributes: Mapping[str, Any] | None = None) -> DeltaInsertOp:
        """Build a text insert op."""
        return cls(InsertDataQuill(DataType.TEXT, value), attributes or {})

    @classmethod
    def create_newline_op(cls) -> DeltaInsertOp:
        """Build the attribute-less newline op used as a line separator."""
        return cls(InsertDataQuill(DataType.TEXT, NEWLINE))

    def _attr(self, name: str) -> Any:
        return self.attributes.get(name)

    # ------------------------------------------------------------------
    # Block classification
    # ------------------------------------------------------------------

    def is_container_block(self) -> bool:
        """Return True if this op is a block marker."""
        return (
            self.is_blockquote()
            or self.is_list()
            or self.is_table()
            or self.is_code_block()
            or self.is_header()
            or self.has_block_attribute()
            or self.is_custom_text_block()
            or self.is_custom_embed_block()
        )

    def has_block_attribute(self) -> bool:
        """Return True if any of align, direction or indent is set."""
        return bool(self._attr("align")) or bool(self._attr("direction")) or bool(self._attr("indent"))

    def is_blockquote(self) -> bool:
        return bool(self._attr("blockquote"))

    def is_header(self) -> bool:
        return bool(self._attr("header"))

    def is_table(self) -> bool:
        return bool(self._attr("table"))

    def is_code_block(self) -> bool:
        return bool(self._attr("code-block"))

    def is_inline(self) -> bool:
        """Return True if this op renders inside a paragraph-like container."""
        if self.is_container_block():
            return False
        if isinstance(self.insert, InsertDataQuill):
            return self.insert.type != DataType.VIDEO
        return not self._attr("renderAsBlock")

    def is_just_newline(self) -> bool:
        return self.insert.value == NEWLINE

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def is_list(self) -> bool:
        return self.is_ordered_list() or self.is_bullet_list() or self.is_a_check_list()

    def is_ordered_list(self) -> bool:
        return self._attr("list") == ListType.ORDERED

    def is_bullet_list(self) -> bool:
        return self._attr("list") == ListType.BULLET

    def is_checked_list(self) -> bool:
        return self._attr("list") == ListType.CHECKED

    def is_unchecked_list(self) -> bool:
        return self._attr("list") == ListType.UNCHECKED

    def is_a_check_list(self) -> bool:
        return self.is_checked_list() or self.is_unchecked_list()

    def is_same_list_as(self, op: DeltaInsertOp) -> bool:
        """Return True if both ops belong to the same list family.

        Ordered and bullet lists are each their own family; checked and
        unchecked items are mutually compatible.
        """
        if not op._attr("list"):
            return False
        return self._attr("list") == op._attr("list") or (op.is_a_check_list() and self.is_a_check_list())

    def has_same_indentation_as(self, op: DeltaInsertOp) -> bool:
        return self.indent == op.indent

    @property
    def indent(self) -> int:
        """Indentation level; 0 when unset or not a number."""
        return _as_indent(self._attr("indent"))

    # ------------------------------------------------------------------
    # Equivalences used by the same-style merger and the table assembler
    # ------------------------------------------------------------------

    def has_same_lang_as(self, op: DeltaInsertOp) -> bool:
        return self._attr("code-block") == op._attr("code-block")

    def has_same_adi_as(self, op: DeltaInsertOp) -> bool:
        """Return True if align, direction and indent all match."""
        return (
            self._attr("align") == op._attr("align")
            and self._attr("direction") == op._attr("direction")
            and self.indent == op.indent
        )

    def is_same_header_as(self, op: DeltaInsertOp) -> bool:
        return self.is_header() and self._attr("header") == op._attr("header")

    def has_same_attr(self, op: DeltaInsertOp) -> bool:
        return dict(self.attributes) == dict(op.attributes)

    def is_same_table_row_as(self, op: DeltaInsertOp) -> bool:
        return self.is_table() and op.is_table() and self._attr("table") == op._attr("table")

    # ------------------------------------------------------------------
    # Payload kinds
    # ------------------------------------------------------------------

    def _is_quill(self, data_type: DataType) -> bool:
        return isinstance(self.insert, InsertDataQuill) and self.insert.type == data_type

    def is_text(self) -> bool:
        return self._is_quill(DataType.TEXT)

    def is_image(self) -> bool:
        return self._is_quill(DataType.IMAGE)

    def is_formula(self) -> bool:
        return self._is_quill(DataType.FORMULA)

    def is_video(self) -> bool:
        return self._is_quill(DataType.VIDEO)

    def is_link(self) -> bool:
        return self.is_text() and bool(self._attr("link"))

    def is_mentions(self) -> bool:
        return self.is_text() and bool(self._attr("mentions"))

    def is_custom_embed(self) -> bool:
        return isinstance(self.insert, InsertDataCustom)

    def is_custom_embed_block(self) -> bool:
        """Return True for a custom embed flagged ``renderAsBlock``."""
        return self.is_custom_embed() and bool(self._attr("renderAsBlock"))

    def is_custom_text_block(self) -> bool:
        """Return True for a text op flagged ``renderAsBlock``."""
        return self.is_text() and bool(self._attr("renderAsBlock"))
