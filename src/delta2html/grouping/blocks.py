#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/grouping/blocks.py
"""Merge consecutive blocks that share a block style.

Adjacent code blocks, blockquotes, headers and custom text blocks with the
same style collapse into one BlockGroup so the renderer emits a single
element with internal line breaks. Each category has its own toggle in
:class:`~delta2html.options.grouping.GroupingOptions`.
"""

from __future__ import annotations

from typing import Sequence, Union

from delta2html.ast.groups import BlockGroup, PairedGroup
from delta2html.ast.ops import DeltaInsertOp
from delta2html.grouping.array import group_consecutive_satisfying_class_elements_while
from delta2html.options.grouping import GroupingOptions


def are_both_code_blocks_with_same_lang(g: BlockGroup, g_other: BlockGroup) -> bool:
    return g.op.is_code_block() and g_other.op.is_code_block() and g.op.has_same_lang_as(g_other.op)


def are_both_same_headers_with_same_adi(g: BlockGroup, g_other: BlockGroup) -> bool:
    return g.op.is_same_header_as(g_other.op) and g.op.has_same_adi_as(g_other.op)


def are_both_blockquotes_with_same_adi(g: BlockGroup, g_other: BlockGroup) -> bool:
    return g.op.is_blockquote() and g_other.op.is_blockquote() and g.op.has_same_adi_as(g_other.op)


def are_both_custom_blocks_with_same_attr(g: BlockGroup, g_other: BlockGroup) -> bool:
    return g.op.is_custom_text_block() and g_other.op.is_custom_text_block() and g.op.has_same_attr(g_other.op)


def group_consecutive_same_style_blocks(
    groups: Sequence[PairedGroup],
    options: GroupingOptions,
) -> list[Union[PairedGroup, list[BlockGroup]]]:
    """Bundle runs of same-style blocks into lists.

    Parameters
    ----------
    groups : sequence
        Output of the block pairer
    options : GroupingOptions
        Which categories may merge

    Returns
    -------
    list
        The input groups, with every mergeable run replaced by a list of its
        BlockGroups

    """

    def same_style(g: BlockGroup, g_prev: BlockGroup) -> bool:
        return (
            (options.multi_line_code_block and are_both_code_blocks_with_same_lang(g, g_prev))
            or (options.multi_line_blockquote and are_both_blockquotes_with_same_adi(g, g_prev))
            or (options.multi_line_header and are_both_same_headers_with_same_adi(g, g_prev))
            or (options.multi_line_custom_block and are_both_custom_blocks_with_same_attr(g, g_prev))
        )

    return group_consecutive_satisfying_class_elements_while(groups, BlockGroup, same_style)


def merge_block_run(blocks: Sequence[BlockGroup]) -> BlockGroup:
    """Collapse a run of same-style blocks into one BlockGroup.

    The first block's marker is kept. Contents are joined with a newline op
    after every block but the last; a block with no content contributes a
    single newline op.
    """
    last_index = len(blocks) - 1
    merged: list[DeltaInsertOp] = []
    for i, block in enumerate(blocks):
        if not block.ops:
            merged.append(DeltaInsertOp.create_newline_op())
            continue
        merged.extend(block.ops)
        if i < last_index:
            merged.append(DeltaInsertOp.create_newline_op())
    return BlockGroup(blocks[0].op, tuple(merged))


def merge_same_style_blocks(groups: Sequence[PairedGroup], options: GroupingOptions) -> list[PairedGroup]:
    """Run the same-style merger over the block pairer's output.

    Empty standalone blocks get one newline op so they still render a line
    break.
    """
    result: list[PairedGroup] = []
    for elm in group_consecutive_same_style_blocks(groups, options):
        if isinstance(elm, list):
            result.append(merge_block_run(elm))
        elif isinstance(elm, BlockGroup) and not elm.ops:
            result.append(BlockGroup(elm.op, (DeltaInsertOp.create_newline_op(),)))
        else:
            result.append(elm)
    return result
