#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/grouping/pairing.py
"""Pair inline runs with the block marker that closes them.

Block markers in a Quill delta come *after* the content they format (the
trailing-newline convention). Scanning backward lets each marker claim the
unclaimed content right before it in a single pass.
"""

from __future__ import annotations

import logging
from typing import Sequence

from delta2html.ast.groups import BlockGroup, BlotBlock, InlineGroup, PairedGroup, VideoItem
from delta2html.ast.ops import DeltaInsertOp
from delta2html.grouping.array import slice_from_reverse_while

logger = logging.getLogger(__name__)


def can_be_in_block(op: DeltaInsertOp) -> bool:
    """Return True if ``op`` may sit inside a block group."""
    return not (op.is_just_newline() or op.is_custom_embed_block() or op.is_video() or op.is_container_block())


def pair_ops_with_their_block(ops: Sequence[DeltaInsertOp]) -> list[PairedGroup]:
    """Group a flat op sequence into inline, block, video and blot groups.

    Parameters
    ----------
    ops : sequence of DeltaInsertOp
        Operations in document order

    Returns
    -------
    list
        InlineGroup, BlockGroup, VideoItem and BlotBlock values in document order

    Notes
    -----
    A block marker with no eligible content right before it (for example
    another marker, a bare newline or the start of the delta) yields a
    BlockGroup with an empty ``ops`` tuple.

    """
    result: list[PairedGroup] = []

    i = len(ops) - 1
    while i >= 0:
        op = ops[i]

        if op.is_video():
            result.append(VideoItem(op))
        elif op.is_custom_embed_block():
            result.append(BlotBlock(op))
        elif op.is_container_block():
            ops_slice = slice_from_reverse_while(ops, i - 1, can_be_in_block)
            result.append(BlockGroup(op, tuple(ops_slice.elements)))
            if ops_slice.slice_starts_at > -1:
                i = ops_slice.slice_starts_at
        else:
            ops_slice = slice_from_reverse_while(ops, i - 1, DeltaInsertOp.is_inline)
            result.append(InlineGroup(tuple(ops_slice.elements) + (op,)))
            if ops_slice.slice_starts_at > -1:
                i = ops_slice.slice_starts_at
        i -= 1

    result.reverse()
    logger.debug("Paired %d ops into %d groups", len(ops), len(result))
    return result
