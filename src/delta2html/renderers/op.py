#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/renderers/op.py
"""HTML for a single delta operation.

:class:`OpHtmlConverter` decides the tag(s), classes, inline styles and
attributes of one op. The document renderer uses it for block markers (which
yield an opening and a closing tag around the block content) and for inline
ops (which yield complete markup).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional

from delta2html.ast.ops import DeltaInsertOp
from delta2html.constants import BLOCK_ATTRIBUTES, INLINE_ATTRIBUTES, ScriptType
from delta2html.options.html import INLINE_STYLE_ATTRIBUTES, HtmlRendererOptions, InlineStyleConverter
from delta2html.utils.html import AttributeValue, escape_html, make_end_tag, make_start_tag
from delta2html.utils.sanitize import is_valid_color_literal

CLASS_ATTRIBUTES = INLINE_STYLE_ATTRIBUTES

FONT_FAMILIES = {
    "serif": "Georgia, Times New Roman, serif",
    "monospace": "Monaco, Courier New, monospace",
}


def _indent_style(value: str, op: DeltaInsertOp) -> str:
    side = "right" if op.attributes.get("direction") == "rtl" else "left"
    return f"padding-{side}:{_indent_size(value)}em"


def _direction_style(value: str, op: DeltaInsertOp) -> Optional[str]:
    if value != "rtl":
        return None
    return "direction:rtl" if op.attributes.get("align") else "direction:rtl;text-align:inherit"


# Per-attribute CSS used in inline-styles mode. A value is either a table keyed
# by attribute value or a callable returning a declaration; None means no CSS.
DEFAULT_INLINE_STYLE_CONVERTERS: Mapping[str, InlineStyleConverter] = MappingProxyType(
    {
        "indent": _indent_style,
        "align": lambda value, op: f"text-align:{value}",
        "direction": _direction_style,
        "font": lambda value, op: f"font-family:{FONT_FAMILIES.get(value, value)}",
        "size": {
            "small": "font-size:0.75em",
            "large": "font-size:1.5em",
            "huge": "font-size:2.5em",
        },
    }
)


class HtmlParts(NamedTuple):
    """Opening tag(s), escaped content and closing tag(s) of an op."""

    opening_tag: str
    content: str
    closing_tag: str


class OpHtmlConverter:
    """Render one op to HTML.

    Parameters
    ----------
    op : DeltaInsertOp
        The op to render
    options : HtmlRendererOptions
        Renderer options
    ignore_indent : bool, default = False
        Drop the ``indent`` attribute. List items are nested structurally and
        never carry an indent class.

    """

    def __init__(self, op: DeltaInsertOp, options: HtmlRendererOptions, ignore_indent: bool = False) -> None:
        self.op = op
        self.options = options
        self.ignore_indent = ignore_indent

    def _attr(self, name: str) -> Any:
        if name == "indent" and self.ignore_indent:
            return None
        return self.op.attributes.get(name)

    def _mention(self) -> Mapping[str, Any]:
        mention = self._attr("mention")
        return mention if isinstance(mention, Mapping) else {}

    def prefix_class(self, class_name: str) -> str:
        if self.options.class_prefix:
            return f"{self.options.class_prefix}-{class_name}"
        return class_name

    def get_custom_classes(self) -> list[str]:
        if self.options.custom_classes is None:
            return []
        result = self.options.custom_classes(self.op)
        if not result:
            return []
        return [result] if isinstance(result, str) else list(result)

    def get_classes(self) -> list[str]:
        """Return the CSS classes of the op; empty in inline-styles mode."""
        if self.options.inline_styles_enabled:
            return []

        props = list(CLASS_ATTRIBUTES)
        if self.options.allow_background_classes:
            props.append("background")

        classes = []
        for prop in props:
            value = self._attr(prop)
            if not value:
                continue
            if prop == "background" and not (isinstance(value, str) and is_valid_color_literal(value)):
                continue
            classes.append(f"{prop}-{value}")

        if self.op.is_formula():
            classes.append("formula")
        if self.op.is_video():
            classes.append("video")
        if self.op.is_image():
            classes.append("image")

        return self.get_custom_classes() + [self.prefix_class(c) for c in classes]

    def get_css_styles(self) -> dict[str, str]:
        """Return the inline CSS properties of the op."""
        inline_styles = self.options.inline_styles_enabled
        props = ["color"]
        if inline_styles or not self.options.allow_background_classes:
            props.append("background")
        if inline_styles:
            props.extend(CLASS_ATTRIBUTES)

        styles: dict[str, str] = {}
        if self.options.custom_css_styles is not None:
            styles.update(self.options.custom_css_styles(self.op) or {})

        for prop in props:
            value = self._attr(prop)
            if value is None or value is False or value == "":
                continue
            if prop == "color":
                styles["color"] = str(value)
            elif prop == "background":
                styles["background-color"] = str(value)
            else:
                styles.update(_parse_declarations(self.get_inline_style(prop, value)))

        return styles

    def get_inline_style(self, attribute: str, value: Any) -> Optional[str]:
        """Return the CSS declaration(s) for one class attribute in inline-styles mode.

        A converter from ``options.inline_styles`` wins over the default one.
        """
        converter = self.options.inline_style_override(attribute)
        if converter is None:
            converter = DEFAULT_INLINE_STYLE_CONVERTERS[attribute]
        if isinstance(converter, Mapping):
            return converter.get(str(value))
        return converter(str(value), self.op)

    def get_link_attrs(self) -> list[tuple[str, AttributeValue]]:
        target = self._attr("target") or self.options.default_link_target
        rel = self._attr("rel") or self.options.default_link_rel
        return [("href", self._attr("link")), ("target", target), ("rel", rel)]

    def get_tag_attributes(self) -> list[tuple[str, AttributeValue]]:
        """Return the attributes of the outermost tag, in output order."""
        attrs: list[tuple[str, AttributeValue]] = []

        classes = self.get_classes()
        if self.op.is_mentions():
            mention_class = self._mention().get("class")
            if mention_class:
                classes.append(mention_class)
        if classes:
            attrs.append(("class", " ".join(classes)))

        styles = self.get_css_styles()
        if styles:
            attrs.append(("style", ";".join(f"{k}:{v}" for k, v in styles.items())))

        if self.options.custom_attributes is not None:
            attrs.extend((self.options.custom_attributes(self.op) or {}).items())

        if self.op.is_image():
            attrs.append(("width", self._attr("width")))
            attrs.append(("src", str(self.op.insert.value)))
        elif self.op.is_a_check_list():
            attrs.append(("data-checked", self.op.is_checked_list()))
        elif self.op.is_video():
            attrs.extend([("frameborder", "0"), ("allowfullscreen", True), ("src", str(self.op.insert.value))])
        elif self.op.is_mentions():
            mention = self._mention()
            attrs.extend([("href", mention.get("link")), ("target", mention.get("target"))])
        elif self.op.is_code_block() and isinstance(self._attr("code-block"), str):
            attrs.append(("data-language", self._attr("code-block")))
        elif not self.op.is_container_block() and self.op.is_link():
            attrs.extend(self.get_link_attrs())

        return [(key, value) for key, value in attrs if value is not None]

    def _custom_tag(self, format_name: str) -> Optional[str]:
        if self.options.custom_tag is None:
            return None
        return self.options.custom_tag(format_name, self.op)

    def get_tags(self) -> list[str]:
        """Return the tags wrapping the op, outermost first."""
        if not self.op.is_text():
            if self.op.is_video():
                return ["iframe"]
            if self.op.is_image():
                return ["img"]
            return ["span"]

        for format_name in BLOCK_ATTRIBUTES:
            value = self._attr(format_name)
            if not value:
                continue
            custom = self._custom_tag(format_name)
            if custom:
                return [custom]
            if format_name == "blockquote":
                return ["blockquote"]
            if format_name == "code-block":
                return ["pre"]
            if format_name == "list":
                return [self.options.list_item_tag]
            if format_name == "header":
                return [f"h{value}" if isinstance(value, int) and 1 <= value <= 6 else self.options.paragraph_tag]
            return [self.options.paragraph_tag]

        if self.op.is_custom_text_block():
            return [self._custom_tag("renderAsBlock") or self.options.paragraph_tag]

        tags = []
        for format_name in INLINE_ATTRIBUTES:
            value = self._attr(format_name)
            if not value:
                continue
            custom = self._custom_tag(format_name)
            if custom:
                tags.append(custom)
            elif format_name in ("link", "mentions"):
                tags.append(self.options.mention_tag)
            elif format_name == "script":
                tags.append("sub" if value == ScriptType.SUB else "sup")
            elif format_name == "bold":
                tags.append("strong")
            elif format_name == "italic":
                tags.append("em")
            elif format_name == "strike":
                tags.append("s")
            elif format_name == "underline":
                tags.append("u")
            elif format_name == "code":
                tags.append("code")
        return tags

    def get_content(self) -> str:
        if self.op.is_container_block():
            return ""
        if self.op.is_text() or self.op.is_formula():
            return escape_html(str(self.op.insert.value))
        return ""

    def get_html_parts(self) -> HtmlParts:
        """Split the op markup into opening tags, content and closing tags."""
        tags = self.get_tags()
        attributes = self.get_tag_attributes()
        content = self.get_content()

        if not tags and attributes:
            tags = ["span"]

        if tags and tags[0] == "img":
            img = make_start_tag("img", attributes, self_closing=True)
            if self._attr("link"):
                img = make_start_tag("a", self.get_link_attrs()) + img + make_end_tag("a")
            return HtmlParts(img, "", "")

        opening = []
        for index, tag in enumerate(tags):
            opening.append(make_start_tag(tag, attributes if index == 0 else None))
        closing = [make_end_tag(tag) for tag in reversed(tags)]
        return HtmlParts("".join(opening), content, "".join(closing))

    def get_html(self) -> str:
        parts = self.get_html_parts()
        return parts.opening_tag + parts.content + parts.closing_tag


def _parse_declarations(declarations: Optional[str]) -> dict[str, str]:
    """Split ``"a: 1; b:2"`` into ``{"a": "1", "b": "2"}``, skipping malformed parts."""
    styles: dict[str, str] = {}
    for declaration in (declarations or "").split(";"):
        name, sep, value = declaration.partition(":")
        if sep and name.strip() and value.strip():
            styles[name.strip()] = value.strip()
    return styles


def _indent_size(value: Any) -> int | float:
    try:
        size = float(value) * 3
    except (TypeError, ValueError):
        return 0
    return int(size) if size == int(size) else size
