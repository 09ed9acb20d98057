#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for attribute and URL sanitization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from delta2html.options.base import CloneFrozenMixin

UrlSanitizer = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class SanitizeOptions(CloneFrozenMixin):
    """Options controlling how raw attribute values are cleaned.

    Parameters
    ----------
    url_sanitizer : callable or None, default None
        Called with every link, image and video URL. A string return value is
        used as-is; returning None falls back to the built-in sanitizer.

    """

    url_sanitizer: Optional[UrlSanitizer] = field(
        default=None,
        metadata={"help": "Custom URL sanitizer (Python API only)", "exclude_from_cli": True},
    )
