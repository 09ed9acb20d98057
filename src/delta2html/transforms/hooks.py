#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/transforms/hooks.py
"""Render hooks for the HTML renderer.

Two hook points are available:

- ``before_render``: called with ``(group_type, group)`` before a top-level
  group is rendered. A non-empty string return value replaces the default
  markup for that group.
- ``after_render``: called with ``(group_type, html)`` after a top-level
  group is rendered and returns the final markup.

Examples
--------
Wrap every table:

    >>> from delta2html.transforms import RenderHookManager
    >>> manager = RenderHookManager()
    >>>
    >>> def wrap_tables(group_type, html):
    ...     if group_type == "table":
    ...         return f'<div class="table-wrapper">{html}</div>'
    ...     return html
    >>>
    >>> manager.register_hook("after_render", wrap_tables)

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Literal, Optional, Union

from delta2html.ast.groups import AnyGroup
from delta2html.constants import GroupType
from delta2html.exceptions import RenderingError, ValidationError

logger = logging.getLogger(__name__)

HookPoint = Literal["before_render", "after_render"]

HOOK_POINTS: tuple[HookPoint, ...] = ("before_render", "after_render")

# before_render: (group_type, group) -> str | None
# after_render: (group_type, html) -> str
BeforeRenderHook = Callable[[str, AnyGroup], Optional[str]]
AfterRenderHook = Callable[[str, str], str]
HookCallable = Union[BeforeRenderHook, AfterRenderHook]


class RenderHookManager:
    """Registry and executor for render hooks.

    Parameters
    ----------
    strict : bool, default = False
        If True, a failing hook raises :class:`RenderingError`. If False,
        the failure is logged and the hook is skipped.

    Notes
    -----
    Hooks for the same point run in priority order (lower first); equal
    priorities run in registration order.

    Instances are not thread-safe; create one per renderer.

    """

    def __init__(self, strict: bool = False) -> None:
        self._hooks: dict[HookPoint, list[tuple[int, HookCallable]]] = {}
        self.strict = strict

    def register_hook(self, target: HookPoint, hook: HookCallable, priority: int = 100) -> None:
        """Register a hook for a hook point.

        Parameters
        ----------
        target : {"before_render", "after_render"}
            Hook point
        hook : callable
            Hook function
        priority : int, default = 100
            Execution priority (lower runs first)

        Raises
        ------
        ValidationError
            If ``target`` is not a known hook point

        """
        if target not in HOOK_POINTS:
            raise ValidationError(
                f"Unknown hook point '{target}'. Expected one of: {', '.join(HOOK_POINTS)}",
                parameter_name="target",
                parameter_value=target,
            )

        self._hooks.setdefault(target, []).append((priority, hook))
        logger.debug(f"Registered hook for '{target}' with priority {priority}")

    def unregister_hook(self, target: HookPoint, hook: HookCallable) -> bool:
        """Unregister a hook.

        Returns
        -------
        bool
            True if the hook was found and removed

        """
        if target not in self._hooks:
            return False

        initial_len = len(self._hooks[target])
        self._hooks[target] = [(p, h) for p, h in self._hooks[target] if h != hook]
        return len(self._hooks[target]) < initial_len

    def has_hooks(self, target: HookPoint) -> bool:
        return bool(self._hooks.get(target))

    def _sorted_hooks(self, target: HookPoint) -> list[tuple[int, HookCallable]]:
        return sorted(self._hooks.get(target, []), key=lambda x: x[0])

    def _handle_failure(self, target: HookPoint, priority: int, group_type: str, error: Exception) -> None:
        if self.strict:
            raise RenderingError(
                f"Hook failed at '{target}' for {group_type} group: {error}",
                group_type=group_type,
                original_error=error,
            ) from error
        logger.warning(f"Hook failed at '{target}' with priority {priority}: {error}", exc_info=True)

    def run_before_render(self, group_type: Union[GroupType, str], group: Any) -> Optional[str]:
        """Run ``before_render`` hooks until one returns replacement markup.

        Returns
        -------
        str or None
            Replacement markup, or None to render the group normally

        """
        key = str(getattr(group_type, "value", group_type))
        for priority, hook in self._sorted_hooks("before_render"):
            try:
                html = hook(key, group)
            except Exception as e:
                self._handle_failure("before_render", priority, key, e)
                continue
            if isinstance(html, str) and html:
                return html
        return None

    def run_after_render(self, group_type: Union[GroupType, str], html: str) -> str:
        """Pipe rendered markup through every ``after_render`` hook."""
        key = str(getattr(group_type, "value", group_type))
        result = html
        for priority, hook in self._sorted_hooks("after_render"):
            try:
                returned = hook(key, result)
            except Exception as e:
                self._handle_failure("after_render", priority, key, e)
                continue
            if isinstance(returned, str):
                result = returned
        return result

    def list_hooks(self) -> dict[HookPoint, list[tuple[int, HookCallable]]]:
        """Return a shallow copy of the registered hooks."""
        return {target: list(hooks) for target, hooks in self._hooks.items()}

    def clear(self) -> None:
        self._hooks.clear()
        logger.debug("Cleared all hooks")


__all__ = [
    "AfterRenderHook",
    "BeforeRenderHook",
    "HOOK_POINTS",
    "HookCallable",
    "HookPoint",
    "RenderHookManager",
]
