#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/grouping/__init__.py
"""Grouping and nesting engine.

Turns a flat sequence of :class:`~delta2html.ast.ops.DeltaInsertOp` into the
document tree, in four stages that each consume the previous one's output:

1. :func:`pair_ops_with_their_block` - pair inline runs with their block marker
2. :func:`merge_same_style_blocks` - merge adjacent same-style blocks
3. :func:`group_tables` - assemble cells, rows and tables
4. :func:`nest_lists` - build nested lists from indent-tagged list items

The engine is pure and synchronous; it never raises on well-formed ops.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from delta2html.ast.groups import DocumentTree
from delta2html.ast.ops import DeltaInsertOp
from delta2html.grouping.blocks import group_consecutive_same_style_blocks, merge_same_style_blocks
from delta2html.grouping.lists import nest_lists
from delta2html.grouping.pairing import pair_ops_with_their_block
from delta2html.grouping.tables import group_tables
from delta2html.options.grouping import GroupingOptions

logger = logging.getLogger(__name__)


def group_ops(ops: Sequence[DeltaInsertOp], options: Optional[GroupingOptions] = None) -> DocumentTree:
    """Group a flat op sequence into the document tree.

    Parameters
    ----------
    ops : sequence of DeltaInsertOp
        Well-formed operations in document order
    options : GroupingOptions, optional
        Same-style merge toggles; all enabled by default

    Returns
    -------
    tuple
        Top-level groups: InlineGroup, BlockGroup, ListGroup, TableGroup,
        VideoItem and BlotBlock values

    Examples
    --------
        >>> from delta2html.ast import DeltaInsertOp
        >>> tree = group_ops([DeltaInsertOp.text("hi"), DeltaInsertOp.text("\\n", {"header": 1})])
        >>> type(tree[0]).__name__
        'BlockGroup'

    """
    options = options or GroupingOptions()

    paired = pair_ops_with_their_block(ops)
    merged = merge_same_style_blocks(paired, options)
    tree = tuple(nest_lists(group_tables(merged)))

    logger.debug("Grouped %d ops into %d top-level groups", len(ops), len(tree))
    return tree


__all__ = [
    "group_consecutive_same_style_blocks",
    "group_ops",
    "group_tables",
    "merge_same_style_blocks",
    "nest_lists",
    "pair_ops_with_their_block",
]
