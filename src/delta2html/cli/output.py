#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Output formatting for the delta2html CLI."""

from __future__ import annotations

import json
from typing import IO, Optional

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from delta2html.ast.groups import (
    AnyGroup,
    BlockGroup,
    BlotBlock,
    DocumentTree,
    InlineGroup,
    ListGroup,
    ListItem,
    TableCell,
    TableGroup,
    TableRow,
    VideoItem,
)
from delta2html.ast.ops import DeltaInsertOp
from delta2html.ast.utils import op_to_dict, tree_to_dict

_MAX_LABEL_TEXT = 40


def describe_op(op: DeltaInsertOp) -> str:
    """Return a short, single-line description of an op."""
    raw = op_to_dict(op)
    insert = raw["insert"]
    text = repr(insert) if isinstance(insert, str) else json.dumps(insert, default=str)
    if len(text) > _MAX_LABEL_TEXT:
        text = text[: _MAX_LABEL_TEXT - 3] + "..."
    text = escape(text)
    if op.attributes:
        attrs = ", ".join(f"{k}={v!r}" for k, v in op.attributes.items())
        return f"{text} [dim]{{{escape(attrs)}}}[/dim]"
    return text


def _add_group(parent: Tree, group: AnyGroup) -> None:
    label = f"[bold cyan]{group.group_type.value}[/bold cyan]"

    if isinstance(group, InlineGroup):
        node = parent.add(label)
        for op in group.ops:
            node.add(describe_op(op))
    elif isinstance(group, BlockGroup):
        node = parent.add(f"{label} {describe_op(group.op)}")
        for op in group.ops:
            node.add(describe_op(op))
    elif isinstance(group, (VideoItem, BlotBlock)):
        parent.add(f"{label} {describe_op(group.op)}")
    elif isinstance(group, ListGroup):
        node = parent.add(label)
        for item in group.items:
            _add_group(node, item)
    elif isinstance(group, ListItem):
        node = parent.add(f"{label} {describe_op(group.op)}")
        for op in group.item.ops:
            node.add(describe_op(op))
        if group.inner_list is not None:
            _add_group(node, group.inner_list)
    elif isinstance(group, TableGroup):
        node = parent.add(label)
        for row in group.rows:
            _add_group(node, row)
    elif isinstance(group, TableRow):
        node = parent.add(label)
        for cell in group.cells:
            _add_group(node, cell)
    elif isinstance(group, TableCell):
        node = parent.add(f"{label} {describe_op(group.item.op)}")
        for op in group.item.ops:
            node.add(describe_op(op))


def build_tree_view(tree: DocumentTree, title: str = "document") -> Tree:
    """Build a rich Tree showing the grouped document."""
    root = Tree(f"[bold]{escape(title)}[/bold]")
    for group in tree:
        _add_group(root, group)
    return root


def format_json(tree: DocumentTree) -> str:
    return json.dumps(tree_to_dict(tree), indent=2, ensure_ascii=False, default=str)


def print_tree_view(tree: DocumentTree, file: Optional[IO[str]] = None, title: str = "document") -> None:
    """Print the rich tree view to ``file`` (stdout by default)."""
    console = Console(file=file, highlight=False)
    console.print(build_tree_view(tree, title))


__all__ = ["build_tree_view", "describe_op", "format_json", "print_tree_view"]
