#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for delta intake, grouping and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from delta2html.exceptions import ConfigError
from delta2html.options.base import BaseRendererOptions, CloneFrozenMixin
from delta2html.options.grouping import GroupingOptions
from delta2html.options.html import HtmlRendererOptions
from delta2html.options.sanitize import SanitizeOptions, UrlSanitizer


def _section(config: Mapping[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{name}] section must be a table, got {type(section).__name__}")
    return dict(section)


@dataclass(frozen=True)
class ConverterOptions(CloneFrozenMixin):
    """Bundle of the option groups used by a full delta-to-HTML conversion.

    Parameters
    ----------
    sanitize : SanitizeOptions
        Options for the delta intake and attribute sanitizer
    grouping : GroupingOptions
        Same-style merge toggles
    html : HtmlRendererOptions
        HTML renderer options

    """

    sanitize: SanitizeOptions = field(default_factory=SanitizeOptions)
    grouping: GroupingOptions = field(default_factory=GroupingOptions)
    html: HtmlRendererOptions = field(default_factory=HtmlRendererOptions)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> ConverterOptions:
        """Build options from a loaded config mapping.

        The mapping may hold ``grouping`` and ``html`` tables; flat keys are
        tried against every group.

        Raises
        ------
        ConfigError
            If a ``grouping`` or ``html`` entry is not a table

        """
        grouping_values = _section(config, "grouping")
        html_values = _section(config, "html")
        for key, value in config.items():
            if key in ("grouping", "html"):
                continue
            grouping_values.setdefault(key, value)
            html_values.setdefault(key, value)
        return cls(
            grouping=GroupingOptions.from_mapping(grouping_values),
            html=HtmlRendererOptions.from_mapping(html_values),
        )


__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ConverterOptions",
    "GroupingOptions",
    "HtmlRendererOptions",
    "SanitizeOptions",
    "UrlSanitizer",
]
