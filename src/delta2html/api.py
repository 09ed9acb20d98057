#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/api.py
"""High-level conversion entry points."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from delta2html.ast.groups import DocumentTree
from delta2html.grouping import group_ops
from delta2html.options import ConverterOptions
from delta2html.parsers.delta import parse_delta
from delta2html.renderers.html import CustomRenderer, HtmlRenderer
from delta2html.transforms.hooks import HookCallable, HookPoint, RenderHookManager

logger = logging.getLogger(__name__)

HooksArg = Union[RenderHookManager, Mapping[HookPoint, Union[HookCallable, Sequence[HookCallable]]]]


def _build_hook_manager(hooks: Optional[HooksArg], strict: bool) -> RenderHookManager:
    if isinstance(hooks, RenderHookManager):
        return hooks

    manager = RenderHookManager(strict=strict)
    for target, value in (hooks or {}).items():
        callables = value if isinstance(value, (list, tuple)) else [value]
        for hook in callables:
            manager.register_hook(target, hook)
    return manager


def convert(raw_ops: Any, options: Optional[ConverterOptions] = None) -> DocumentTree:
    """Convert raw delta operations to the grouped document tree.

    Parameters
    ----------
    raw_ops : list or mapping
        A list of raw ``{"insert": ..., "attributes": ...}`` ops, or a delta
        mapping holding an ``ops`` list
    options : ConverterOptions, optional
        Sanitization and grouping options

    Returns
    -------
    tuple of DocumentGroup
        The document tree

    Raises
    ------
    ParsingError
        If ``raw_ops`` is not a delta at all

    Examples
    --------
        >>> tree = convert([{"insert": "a"}, {"insert": "\\n", "attributes": {"list": "bullet"}}])
        >>> type(tree[0]).__name__
        'ListGroup'

    """
    options = options or ConverterOptions()
    ops = parse_delta(raw_ops, options.sanitize)
    return group_ops(ops, options.grouping)


def to_html(
    raw_ops: Any,
    options: Optional[ConverterOptions] = None,
    hooks: Optional[HooksArg] = None,
    custom_renderer: Optional[CustomRenderer] = None,
) -> str:
    """Convert raw delta operations to HTML.

    Parameters
    ----------
    raw_ops : list or mapping
        Raw ops or a delta mapping with an ``ops`` list
    options : ConverterOptions, optional
        Sanitization, grouping and HTML options
    hooks : RenderHookManager or dict, optional
        Either a ready manager, or a mapping of hook point
        (``"before_render"``, ``"after_render"``) to a callable or a list
        of callables
    custom_renderer : callable, optional
        ``(op, context_op) -> str`` used for custom embeds

    Returns
    -------
    str
        HTML markup

    Raises
    ------
    ParsingError
        If ``raw_ops`` is not a delta at all
    RenderingError
        If a custom renderer fails, or a hook fails in strict mode

    Examples
    --------
        >>> to_html([{"insert": "Hello", "attributes": {"bold": True}}, {"insert": "\\n"}])
        '<p><strong>Hello</strong></p>'

    """
    options = options or ConverterOptions()
    tree = convert(raw_ops, options)
    manager = _build_hook_manager(hooks, strict=options.html.fail_on_hook_errors)
    renderer = HtmlRenderer(options.html, hooks=manager, custom_renderer=custom_renderer)
    return renderer.render_to_string(tree)


__all__ = ["HooksArg", "convert", "to_html"]
