#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/ast/groups.py
"""Group nodes of the document tree.

The grouping engine turns a flat sequence of :class:`DeltaInsertOp` into a
tuple of top-level groups. Group kinds form a closed set; each carries a
``group_type`` tag so consumers can dispatch exhaustively on it.

Node Kinds
----------
Top-level kinds (members of :data:`DocumentGroup`):
    - InlineGroup: inline ops rendered inside one paragraph
    - BlockGroup: a block marker op and the inline ops it closes
    - ListGroup: list items, each optionally owning a nested ListGroup
    - TableGroup: rows of cells, each cell wrapping a BlockGroup
    - VideoItem: a standalone video embed
    - BlotBlock: a standalone block-level custom embed

Nested kinds:
    - ListItem, TableRow, TableCell

All nodes are frozen dataclasses holding tuples, so a stage can never change
a node produced by an earlier stage; it builds new nodes instead.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from delta2html.ast.ops import DeltaInsertOp
from delta2html.constants import GroupType


@dataclass(frozen=True)
class InlineGroup:
    """Run of inline ops that render together inside one paragraph.

    Parameters
    ----------
    ops : tuple of DeltaInsertOp
        The inline ops in document order

    """

    ops: tuple[DeltaInsertOp, ...]
    group_type: ClassVar[GroupType] = GroupType.INLINE_GROUP


@dataclass(frozen=True)
class BlockGroup:
    """A block marker paired with the inline ops it closes.

    Parameters
    ----------
    op : DeltaInsertOp
        The marker op; its attributes define the block kind
    ops : tuple of DeltaInsertOp
        Inline ops rendered inside the block, possibly empty

    """

    op: DeltaInsertOp
    ops: tuple[DeltaInsertOp, ...] = ()
    group_type: ClassVar[GroupType] = GroupType.BLOCK


@dataclass(frozen=True)
class VideoItem:
    """A standalone video embed."""

    op: DeltaInsertOp
    group_type: ClassVar[GroupType] = GroupType.VIDEO


@dataclass(frozen=True)
class BlotBlock:
    """A standalone custom embed flagged ``renderAsBlock``."""

    op: DeltaInsertOp
    group_type: ClassVar[GroupType] = GroupType.BLOT_BLOCK


@dataclass(frozen=True)
class ListItem:
    """One list entry and the optional sub-list it owns.

    Parameters
    ----------
    item : BlockGroup
        The list-tagged block
    inner_list : ListGroup or None, default = None
        Nested list belonging to this item

    """

    item: BlockGroup
    inner_list: Optional[ListGroup] = None
    group_type: ClassVar[GroupType] = GroupType.LIST_ITEM

    @property
    def op(self) -> DeltaInsertOp:
        return self.item.op


@dataclass(frozen=True)
class ListGroup:
    """Ordered sequence of list items of a compatible family."""

    items: tuple[ListItem, ...] = field(default_factory=tuple)
    group_type: ClassVar[GroupType] = GroupType.LIST

    @property
    def first_op(self) -> DeltaInsertOp:
        """Marker op of the first item; defines the list tag."""
        return self.items[0].item.op

    @property
    def indent(self) -> int:
        return self.first_op.indent


@dataclass(frozen=True)
class TableCell:
    """A table cell wrapping one table-tagged block."""

    item: BlockGroup
    group_type: ClassVar[GroupType] = GroupType.TABLE_CELL


@dataclass(frozen=True)
class TableRow:
    """Cells sharing one table-row id."""

    cells: tuple[TableCell, ...]
    group_type: ClassVar[GroupType] = GroupType.TABLE_ROW


@dataclass(frozen=True)
class TableGroup:
    """Consecutive table rows."""

    rows: tuple[TableRow, ...]
    group_type: ClassVar[GroupType] = GroupType.TABLE


DocumentGroup = Union[InlineGroup, BlockGroup, ListGroup, TableGroup, VideoItem, BlotBlock]
"""Closed union of the top-level kinds of a document tree."""

PairedGroup = Union[InlineGroup, BlockGroup, VideoItem, BlotBlock]
"""Kinds produced by the block pairer, before tables and lists exist."""

AnyGroup = Union[DocumentGroup, ListItem, TableRow, TableCell]

DocumentTree = tuple[DocumentGroup, ...]
