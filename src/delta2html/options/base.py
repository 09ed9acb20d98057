#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for delta2html options.

Every option group is a frozen dataclass. Field metadata carries the help
text used by the command line interface.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build an instance from a mapping, ignoring unknown keys.

        Keys may use dashes instead of underscores, as config files do.
        """
        known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        kwargs = {}
        for key, value in values.items():
            name = key.replace("-", "_")
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Parameters
    ----------
    fail_on_hook_errors : bool, default=False
        Whether a failing render hook aborts rendering with RenderingError.
        If False (default), the failure is logged and the default markup is used.

    """

    fail_on_hook_errors: bool = False
