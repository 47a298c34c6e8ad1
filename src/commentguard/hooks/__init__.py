# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Host hook registry and the comment-checker plugin."""

from commentguard.hooks.manager import HookManager, HookType
from commentguard.hooks.plugin import CommentCheckerPlugin, resolve_custom_prompt

__all__ = [
    "CommentCheckerPlugin",
    "HookManager",
    "HookType",
    "resolve_custom_prompt",
]
