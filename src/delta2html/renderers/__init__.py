#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers for the grouped document tree."""

from delta2html.renderers.base import BaseRenderer
from delta2html.renderers.html import CustomRenderer, HtmlRenderer
from delta2html.renderers.op import HtmlParts, OpHtmlConverter

__all__ = [
    "BaseRenderer",
    "CustomRenderer",
    "HtmlParts",
    "HtmlRenderer",
    "OpHtmlConverter",
]
