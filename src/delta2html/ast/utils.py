#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/ast/utils.py
"""Traversal and serialization helpers for the document tree."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from delta2html.ast.groups import (
    AnyGroup,
    BlockGroup,
    BlotBlock,
    InlineGroup,
    ListGroup,
    ListItem,
    TableCell,
    TableGroup,
    TableRow,
    VideoItem,
)
from delta2html.ast.ops import DeltaInsertOp, InsertDataCustom


def iter_leaf_ops(groups: Iterable[AnyGroup]) -> Iterator[DeltaInsertOp]:
    """Yield every operation of the tree in document order.

    A block yields its inline ops followed by its marker, which is where the
    marker sits in the source delta. Nested lists follow their parent item.

    Parameters
    ----------
    groups : iterable of groups
        Top-level groups (or any nested kind)

    Yields
    ------
    DeltaInsertOp
        Leaf operations in tree order

    """
    for group in groups:
        if isinstance(group, InlineGroup):
            yield from group.ops
        elif isinstance(group, BlockGroup):
            yield from group.ops
            yield group.op
        elif isinstance(group, (VideoItem, BlotBlock)):
            yield group.op
        elif isinstance(group, ListGroup):
            yield from iter_leaf_ops(group.items)
        elif isinstance(group, ListItem):
            yield from iter_leaf_ops([group.item])
            if group.inner_list is not None:
                yield from iter_leaf_ops([group.inner_list])
        elif isinstance(group, TableGroup):
            yield from iter_leaf_ops(group.rows)
        elif isinstance(group, TableRow):
            yield from iter_leaf_ops(group.cells)
        elif isinstance(group, TableCell):
            yield from iter_leaf_ops([group.item])
        else:
            raise TypeError(f"Unknown group kind: {type(group).__name__}")


def op_to_dict(op: DeltaInsertOp) -> dict[str, Any]:
    """Serialize an op back to the raw delta shape."""
    if isinstance(op.insert, InsertDataCustom):
        insert: Any = {op.insert.type: op.insert.value}
    elif op.is_text():
        insert = op.insert.value
    else:
        insert = {op.insert.type.value: op.insert.value}

    result: dict[str, Any] = {"insert": insert}
    if op.attributes:
        result["attributes"] = dict(op.attributes)
    return result


def group_to_dict(group: AnyGroup) -> dict[str, Any]:
    """Convert a group node to a JSON-serializable dictionary.

    Parameters
    ----------
    group : group node
        Any group kind

    Returns
    -------
    dict
        Dictionary with a ``type`` key holding the group tag

    """
    data: dict[str, Any] = {"type": group.group_type.value}
    if isinstance(group, InlineGroup):
        data["ops"] = [op_to_dict(op) for op in group.ops]
    elif isinstance(group, BlockGroup):
        data["op"] = op_to_dict(group.op)
        data["ops"] = [op_to_dict(op) for op in group.ops]
    elif isinstance(group, (VideoItem, BlotBlock)):
        data["op"] = op_to_dict(group.op)
    elif isinstance(group, ListGroup):
        data["items"] = [group_to_dict(item) for item in group.items]
    elif isinstance(group, ListItem):
        data["item"] = group_to_dict(group.item)
        data["inner_list"] = group_to_dict(group.inner_list) if group.inner_list is not None else None
    elif isinstance(group, TableGroup):
        data["rows"] = [group_to_dict(row) for row in group.rows]
    elif isinstance(group, TableRow):
        data["cells"] = [group_to_dict(cell) for cell in group.cells]
    elif isinstance(group, TableCell):
        data["item"] = group_to_dict(group.item)
    return data


def tree_to_dict(groups: Iterable[AnyGroup]) -> list[dict[str, Any]]:
    """Serialize a whole document tree."""
    return [group_to_dict(group) for group in groups]
