#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the grouping engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from delta2html.constants import (
    DEFAULT_MULTI_LINE_BLOCKQUOTE,
    DEFAULT_MULTI_LINE_CODE_BLOCK,
    DEFAULT_MULTI_LINE_CUSTOM_BLOCK,
    DEFAULT_MULTI_LINE_HEADER,
)
from delta2html.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class GroupingOptions(CloneFrozenMixin):
    """Toggles for merging consecutive same-style blocks.

    Each enabled category lets adjacent source paragraphs sharing a block
    style render as one element with internal line breaks. Disabling a
    category keeps one element per source block.

    Parameters
    ----------
    multi_line_blockquote : bool, default True
        Merge consecutive blockquotes with the same align/direction/indent
    multi_line_header : bool, default True
        Merge consecutive headers of the same level and align/direction/indent
    multi_line_code_block : bool, default True
        Merge consecutive code blocks with the same language
    multi_line_custom_block : bool, default True
        Merge consecutive ``renderAsBlock`` text blocks with equal attributes

    """

    multi_line_blockquote: bool = field(
        default=DEFAULT_MULTI_LINE_BLOCKQUOTE,
        metadata={"help": "Merge consecutive blockquotes into one element"},
    )
    multi_line_header: bool = field(
        default=DEFAULT_MULTI_LINE_HEADER,
        metadata={"help": "Merge consecutive headers of the same level into one element"},
    )
    multi_line_code_block: bool = field(
        default=DEFAULT_MULTI_LINE_CODE_BLOCK,
        metadata={"help": "Merge consecutive code blocks of the same language into one element"},
    )
    multi_line_custom_block: bool = field(
        default=DEFAULT_MULTI_LINE_CUSTOM_BLOCK,
        metadata={"help": "Merge consecutive custom text blocks with equal attributes"},
    )
