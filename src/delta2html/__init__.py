"""delta2html - group Quill delta operations into a document tree and render HTML.

A Quill delta is a flat list of insert operations. delta2html pairs inline
runs with the block markers that close them, merges adjacent same-style
blocks, assembles tables and builds nested lists, producing an immutable
document tree. The tree can be rendered to HTML or serialized.

Examples
--------
Render HTML:

    >>> from delta2html import to_html
    >>> to_html({"ops": [{"insert": "Hi"}, {"insert": "\\n", "attributes": {"header": 2}}]})
    '<h2>Hi</h2>'

Work with the document tree:

    >>> from delta2html import convert, tree_to_dict
    >>> tree = convert([{"insert": "a"}, {"insert": "\\n", "attributes": {"list": "ordered"}}])
    >>> tree_to_dict(tree)[0]["type"]
    'list'

See Also
--------
delta2html.grouping : grouping and nesting engine
delta2html.ast : operations and group nodes

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "delta2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from delta2html.api import convert, to_html  # noqa: E402
from delta2html.ast import DeltaInsertOp, iter_leaf_ops, tree_to_dict  # noqa: E402
from delta2html.exceptions import (  # noqa: E402
    ConfigError,
    Delta2HtmlError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from delta2html.grouping import group_ops  # noqa: E402
from delta2html.options import (  # noqa: E402
    ConverterOptions,
    GroupingOptions,
    HtmlRendererOptions,
    SanitizeOptions,
)
from delta2html.parsers import parse_delta  # noqa: E402
from delta2html.renderers import HtmlRenderer  # noqa: E402
from delta2html.transforms import RenderHookManager  # noqa: E402

__all__ = [
    "__version__",
    "ConfigError",
    "ConverterOptions",
    "Delta2HtmlError",
    "DeltaInsertOp",
    "GroupingOptions",
    "HtmlRenderer",
    "HtmlRendererOptions",
    "InvalidOptionsError",
    "ParsingError",
    "RenderHookManager",
    "RenderingError",
    "SanitizeOptions",
    "ValidationError",
    "convert",
    "group_ops",
    "iter_leaf_ops",
    "parse_delta",
    "to_html",
    "tree_to_dict",
]
