#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Render-time extension points."""

from delta2html.transforms.hooks import (
    HOOK_POINTS,
    AfterRenderHook,
    BeforeRenderHook,
    HookCallable,
    HookPoint,
    RenderHookManager,
)

__all__ = [
    "AfterRenderHook",
    "BeforeRenderHook",
    "HOOK_POINTS",
    "HookCallable",
    "HookPoint",
    "RenderHookManager",
]
