#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Operations and group nodes of the delta2html document tree."""

from delta2html.ast.groups import (
    AnyGroup,
    BlockGroup,
    BlotBlock,
    DocumentGroup,
    DocumentTree,
    InlineGroup,
    ListGroup,
    ListItem,
    PairedGroup,
    TableCell,
    TableGroup,
    TableRow,
    VideoItem,
)
from delta2html.ast.ops import DeltaInsertOp, InsertData, InsertDataCustom, InsertDataQuill
from delta2html.ast.utils import group_to_dict, iter_leaf_ops, op_to_dict, tree_to_dict

__all__ = [
    "AnyGroup",
    "BlockGroup",
    "BlotBlock",
    "DeltaInsertOp",
    "DocumentGroup",
    "DocumentTree",
    "InlineGroup",
    "InsertData",
    "InsertDataCustom",
    "InsertDataQuill",
    "ListGroup",
    "ListItem",
    "PairedGroup",
    "TableCell",
    "TableGroup",
    "TableRow",
    "VideoItem",
    "group_to_dict",
    "iter_leaf_ops",
    "op_to_dict",
    "tree_to_dict",
]
