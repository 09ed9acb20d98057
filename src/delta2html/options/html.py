#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering of the document tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Sequence, Union

from delta2html.constants import (
    DEFAULT_ALLOW_BACKGROUND_CLASSES,
    DEFAULT_BULLET_LIST_TAG,
    DEFAULT_CLASS_PREFIX,
    DEFAULT_INLINE_STYLES,
    DEFAULT_LINK_TARGET,
    DEFAULT_LIST_ITEM_TAG,
    DEFAULT_MENTION_TAG,
    DEFAULT_MULTI_LINE_PARAGRAPH,
    DEFAULT_ORDERED_LIST_TAG,
    DEFAULT_PARAGRAPH_TAG,
    VALID_REL_RE,
    VALID_TARGET_RE,
)
from delta2html.options.base import BaseRendererOptions

if TYPE_CHECKING:
    from delta2html.ast.ops import DeltaInsertOp

CustomTagFn = Callable[[str, "DeltaInsertOp"], Optional[str]]
CustomAttributesFn = Callable[["DeltaInsertOp"], Optional[Mapping[str, str]]]
CustomClassesFn = Callable[["DeltaInsertOp"], Union[str, Sequence[str], None]]
CustomStylesFn = Callable[["DeltaInsertOp"], Optional[Mapping[str, str]]]
InlineStyleConverter = Union[Mapping[str, str], Callable[[str, "DeltaInsertOp"], Optional[str]]]
InlineStyles = Mapping[str, InlineStyleConverter]

INLINE_STYLE_ATTRIBUTES = ("indent", "align", "direction", "font", "size")


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a document tree to HTML.

    Parameters
    ----------
    paragraph_tag : str, default "p"
        Tag wrapping inline groups and align/direction/indent blocks.
    class_prefix : str, default "ql"
        Prefix of generated CSS classes (``ql-indent-1``). Empty disables it.
    inline_styles : bool or mapping, default False
        Emit indent, align, direction, font and size as inline CSS instead
        of classes. A mapping enables inline styles and overrides the CSS
        of single attributes: each value is either a ``{attribute value:
        declaration}`` table or a ``(value, op) -> declaration`` callable,
        e.g. ``{"size": {"huge": "font-size: 6em"}}``. Attributes it does
        not name keep the default declarations.
    multi_line_paragraph : bool, default True
        Keep line breaks of an inline group inside one paragraph. When False
        every line becomes its own paragraph.
    allow_background_classes : bool, default False
        Emit ``background`` as a class when it is a color literal.
    link_target : str or None, default "_blank"
        Default ``target`` for links without their own.
    link_rel : str or None, default None
        Default ``rel`` for links without their own.
    list_item_tag, ordered_list_tag, bullet_list_tag, mention_tag : str
        Tags used for list items, ordered lists, other lists and mentions.
    custom_tag : callable, optional
        ``(format, op) -> tag`` override for block and inline formats.
    custom_attributes : callable, optional
        ``op -> mapping`` of extra attributes.
    custom_classes : callable, optional
        ``op -> str | list[str]`` of extra classes.
    custom_css_styles : callable, optional
        ``op -> mapping`` of extra CSS properties.

    """

    paragraph_tag: str = field(
        default=DEFAULT_PARAGRAPH_TAG,
        metadata={"help": "Tag used for paragraphs"},
    )
    class_prefix: str = field(
        default=DEFAULT_CLASS_PREFIX,
        metadata={"help": "Prefix for generated CSS classes"},
    )
    inline_styles: Union[bool, InlineStyles] = field(
        default=DEFAULT_INLINE_STYLES,
        metadata={"help": "Use inline CSS instead of classes for indent/align/direction/font/size"},
    )
    multi_line_paragraph: bool = field(
        default=DEFAULT_MULTI_LINE_PARAGRAPH,
        metadata={"help": "Keep line breaks inside one paragraph instead of splitting paragraphs"},
    )
    allow_background_classes: bool = field(
        default=DEFAULT_ALLOW_BACKGROUND_CLASSES,
        metadata={"help": "Render background color literals as classes"},
    )
    link_target: Optional[str] = field(
        default=DEFAULT_LINK_TARGET,
        metadata={"help": "Default target attribute for links"},
    )
    link_rel: Optional[str] = field(
        default=None,
        metadata={"help": "Default rel attribute for links"},
    )
    list_item_tag: str = DEFAULT_LIST_ITEM_TAG
    ordered_list_tag: str = DEFAULT_ORDERED_LIST_TAG
    bullet_list_tag: str = DEFAULT_BULLET_LIST_TAG
    mention_tag: str = DEFAULT_MENTION_TAG
    custom_tag: Optional[CustomTagFn] = field(default=None, metadata={"exclude_from_cli": True})
    custom_attributes: Optional[CustomAttributesFn] = field(default=None, metadata={"exclude_from_cli": True})
    custom_classes: Optional[CustomClassesFn] = field(default=None, metadata={"exclude_from_cli": True})
    custom_css_styles: Optional[CustomStylesFn] = field(default=None, metadata={"exclude_from_cli": True})

    def __post_init__(self) -> None:
        """Validate tag names and inline style overrides.

        Raises
        ------
        ValueError
            If a tag option is empty or not alphanumeric, or an inline style
            override names an unknown attribute or is neither a table nor
            a callable

        """
        for name in ("paragraph_tag", "list_item_tag", "ordered_list_tag", "bullet_list_tag", "mention_tag"):
            value = getattr(self, name)
            if not value or not value.isalnum():
                raise ValueError(f"{name} must be a non-empty alphanumeric tag name, got {value!r}")

        if isinstance(self.inline_styles, Mapping):
            for attribute, converter in self.inline_styles.items():
                if attribute not in INLINE_STYLE_ATTRIBUTES:
                    raise ValueError(
                        f"inline_styles key must be one of {', '.join(INLINE_STYLE_ATTRIBUTES)}, got {attribute!r}"
                    )
                if not (isinstance(converter, Mapping) or callable(converter)):
                    raise ValueError(f"inline_styles[{attribute!r}] must be a table or a callable")

    @property
    def inline_styles_enabled(self) -> bool:
        return isinstance(self.inline_styles, Mapping) or bool(self.inline_styles)

    def inline_style_override(self, attribute: str) -> Optional[InlineStyleConverter]:
        """Return the caller's converter for ``attribute``, if any."""
        if isinstance(self.inline_styles, Mapping):
            return self.inline_styles.get(attribute)
        return None

    @property
    def default_link_target(self) -> Optional[str]:
        if self.link_target and VALID_TARGET_RE.match(self.link_target):
            return self.link_target
        return None

    @property
    def default_link_rel(self) -> Optional[str]:
        if self.link_rel and VALID_REL_RE.match(self.link_rel):
            return self.link_rel
        return None
