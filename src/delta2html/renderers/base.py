#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/renderers/base.py
"""Base class for document tree renderers.

The BaseRenderer provides a consistent interface for turning the grouped
document tree into an output format.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union

from delta2html.ast.groups import DocumentTree
from delta2html.exceptions import InvalidOptionsError
from delta2html.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for document tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from delta2html.ast import iter_leaf_ops
        >>> class TextRenderer(BaseRenderer):
        ...     def render_to_string(self, tree):
        ...         return "".join(str(op.insert.value) for op in iter_leaf_ops(tree))

    """

    def __init__(self, options: Optional[BaseRendererOptions] = None):
        self.options = options

    @abstractmethod
    def render_to_string(self, tree: DocumentTree) -> str:
        """Render the document tree to a string.

        Raises
        ------
        RenderingError
            If rendering fails

        """

    def render(self, tree: DocumentTree, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document tree and write it to ``output``."""
        self.write_text_output(self.render_to_string(tree), output)

    @staticmethod
    def _validate_options_type(
        options: Optional[BaseRendererOptions], expected_type: type, renderer_name: str
    ) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text to a file path or a text/binary stream.

        Raises
        ------
        TypeError
            If output type is not supported

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<p>hi</p>", buffer)
            >>> buffer.getvalue()
            '<p>hi</p>'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
            return

        if not hasattr(output, "write"):
            raise TypeError(f"Unsupported output type: {type(output).__name__}")

        if isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            output.write(text)  # type: ignore[arg-type]
