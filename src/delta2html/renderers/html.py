#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/renderers/html.py
"""HTML rendering of the grouped document tree.

This module provides the HtmlRenderer class which maps every group kind of
the document tree to HTML markup. Op-level markup (tags, classes, styles and
attributes of a single op) is delegated to
:class:`~delta2html.renderers.op.OpHtmlConverter`.

Examples
--------
    >>> from delta2html.grouping import group_ops
    >>> from delta2html.parsers import parse_delta
    >>> tree = group_ops(parse_delta([{"insert": "Title"}, {"insert": "\\n", "attributes": {"header": 1}}]))
    >>> HtmlRenderer().render_to_string(tree)
    '<h1>Title</h1>'

"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from delta2html.ast.groups import (
    BlockGroup,
    BlotBlock,
    DocumentGroup,
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
from delta2html.constants import BR_TAG, NEWLINE, GroupType
from delta2html.exceptions import RenderingError
from delta2html.options.html import HtmlRendererOptions
from delta2html.renderers.base import BaseRenderer
from delta2html.renderers.op import OpHtmlConverter
from delta2html.transforms.hooks import RenderHookManager
from delta2html.utils.html import escape_html, make_end_tag, make_start_tag

logger = logging.getLogger(__name__)

CustomRenderer = Callable[[DeltaInsertOp, Optional[DeltaInsertOp]], str]
"""Callback ``(op, context_op) -> html`` for custom embeds."""


class HtmlRenderer(BaseRenderer):
    """Render a document tree to an HTML string.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options
    hooks : RenderHookManager or None, default = None
        Before/after render hooks. A manager whose strictness follows
        ``options.fail_on_hook_errors`` is created when omitted.
    custom_renderer : callable or None, default = None
        ``(op, context_op) -> str`` used for custom embeds. ``context_op`` is
        the block marker the embed sits in, or None. Without a callback custom
        embeds render as an empty string.

    """

    def __init__(
        self,
        options: Optional[HtmlRendererOptions] = None,
        hooks: Optional[RenderHookManager] = None,
        custom_renderer: Optional[CustomRenderer] = None,
    ):
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        super().__init__(options)
        self.options: HtmlRendererOptions = options
        self.hooks = hooks if hooks is not None else RenderHookManager(strict=options.fail_on_hook_errors)
        self.custom_renderer = custom_renderer

    def render_to_string(self, tree: DocumentTree) -> str:
        """Render the document tree to HTML.

        Parameters
        ----------
        tree : tuple of DocumentGroup
            Output of :func:`~delta2html.grouping.group_ops`

        Returns
        -------
        str
            HTML markup, groups concatenated without separators

        Raises
        ------
        RenderingError
            If a custom renderer fails, or a hook fails in strict mode

        """
        html = "".join(self._render_group(group) for group in tree)
        logger.debug("Rendered %d groups to %d characters of HTML", len(tree), len(html))
        return html

    def _render_group(self, group: DocumentGroup) -> str:
        if isinstance(group, ListGroup):
            return self._render_with_hooks(group, lambda: self.render_list(group))
        if isinstance(group, TableGroup):
            return self._render_with_hooks(group, lambda: self.render_table(group))
        if isinstance(group, BlockGroup):
            return self._render_with_hooks(group, lambda: self.render_block(group.op, group.ops))
        if isinstance(group, BlotBlock):
            return self._render_with_hooks(group, lambda: self.render_custom(group.op, None))
        if isinstance(group, VideoItem):
            return self._render_with_hooks(group, lambda: OpHtmlConverter(group.op, self.options).get_html())
        if isinstance(group, InlineGroup):
            return self._render_with_hooks(group, lambda: self.render_inlines(group.ops, is_inline_group=True))
        raise RenderingError(f"Unknown group kind: {type(group).__name__}")

    def _render_with_hooks(self, group: DocumentGroup, render: Callable[[], str]) -> str:
        group_type: GroupType = group.group_type
        html = self.hooks.run_before_render(group_type, group)
        if not html:
            html = render()
        return self.hooks.run_after_render(group_type, html)

    def _list_tag(self, op: DeltaInsertOp) -> str:
        if op.is_ordered_list():
            return self.options.ordered_list_tag
        return self.options.bullet_list_tag

    def render_list(self, group: ListGroup) -> str:
        """Render a list and its nested lists."""
        tag = self._list_tag(group.first_op)
        items = "".join(self.render_list_item(item) for item in group.items)
        return make_start_tag(tag) + items + make_end_tag(tag)

    def render_list_item(self, item: ListItem) -> str:
        parts = OpHtmlConverter(item.op, self.options, ignore_indent=True).get_html_parts()
        inner = self.render_list(item.inner_list) if item.inner_list is not None else ""
        return parts.opening_tag + self.render_inlines(item.item.ops, is_inline_group=False) + inner + parts.closing_tag

    def render_table(self, group: TableGroup) -> str:
        rows = "".join(self.render_table_row(row) for row in group.rows)
        return make_start_tag("table") + make_start_tag("tbody") + rows + make_end_tag("tbody") + make_end_tag("table")

    def render_table_row(self, row: TableRow) -> str:
        return make_start_tag("tr") + "".join(self.render_table_cell(cell) for cell in row.cells) + make_end_tag("tr")

    def render_table_cell(self, cell: TableCell) -> str:
        op = cell.item.op
        parts = OpHtmlConverter(op, self.options).get_html_parts()
        content = self.render_inlines(cell.item.ops, is_inline_group=False)
        return (
            make_start_tag("td", [("data-row", op.attributes.get("table"))])
            + parts.opening_tag
            + content
            + parts.closing_tag
            + make_end_tag("td")
        )

    def render_block(self, block_op: DeltaInsertOp, ops: Sequence[DeltaInsertOp]) -> str:
        """Render a block marker around its content.

        Code blocks keep their raw text, escaped, with newlines intact. Other
        blocks render their inline ops, or a line break when empty.
        """
        parts = OpHtmlConverter(block_op, self.options).get_html_parts()

        if block_op.is_code_block():
            content = "".join(
                self.render_custom(op, block_op) if op.is_custom_embed() else escape_html(str(op.insert.value))
                for op in ops
            )
            return parts.opening_tag + content + parts.closing_tag

        inlines = "".join(self.render_inline(op, block_op) for op in ops)
        return parts.opening_tag + (inlines or BR_TAG) + parts.closing_tag

    def render_inlines(self, ops: Sequence[DeltaInsertOp], is_inline_group: bool = True) -> str:
        """Render a run of inline ops.

        A trailing newline op (other than the first op) is dropped. For an
        inline group the result is wrapped in the paragraph tag; with
        ``multi_line_paragraph`` disabled every line gets its own paragraph.
        """
        last_index = len(ops) - 1
        html = "".join(
            "" if 0 < i == last_index and op.is_just_newline() else self.render_inline(op, None)
            for i, op in enumerate(ops)
        )
        if not is_inline_group:
            return html

        start = make_start_tag(self.options.paragraph_tag)
        end = make_end_tag(self.options.paragraph_tag)
        if html == BR_TAG or self.options.multi_line_paragraph:
            return start + html + end
        return start + (end + start).join(line or BR_TAG for line in html.split(BR_TAG)) + end

    def render_inline(self, op: DeltaInsertOp, context_op: Optional[DeltaInsertOp]) -> str:
        if op.is_custom_embed():
            return self.render_custom(op, context_op)
        return OpHtmlConverter(op, self.options).get_html().replace(NEWLINE, BR_TAG)

    def render_custom(self, op: DeltaInsertOp, context_op: Optional[DeltaInsertOp]) -> str:
        """Render a custom embed through the custom renderer callback."""
        if self.custom_renderer is None:
            logger.debug("No custom renderer registered; skipping custom embed %r", op.insert.type)
            return ""
        try:
            return self.custom_renderer(op, context_op)
        except Exception as e:
            raise RenderingError(
                f"Custom renderer failed for embed '{op.insert.type}': {e}",
                original_error=e,
            ) from e


__all__ = ["CustomRenderer", "HtmlRenderer"]
