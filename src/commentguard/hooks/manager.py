# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Host hook table for tool-execution lifecycle events.

The host looks hooks up by name and calls them positionally:
``config(config)`` once when its configuration is loaded, then
``tool.execute.before(input, output)`` and ``tool.execute.after(input,
output)`` around every tool run.  Hooks mutate *output* in place to
change what the host sees.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from enum import StrEnum

logger = logging.getLogger("commentguard.hooks.manager")


class HookType(StrEnum):
    CONFIG = "config"
    TOOL_EXECUTE_BEFORE = "tool.execute.before"
    TOOL_EXECUTE_AFTER = "tool.execute.after"


HookCallback = Callable[..., Awaitable[None] | None]


class HookManager:
    """In-process stand-in for the host's hook dispatch."""

    def __init__(self) -> None:
        self._hooks: dict[HookType, list[HookCallback]] = {}

    def register(self, hook: HookType | str, callback: HookCallback) -> None:
        """Add *callback* under *hook*; unknown hook names raise ``ValueError``."""
        hook_type = HookType(hook)
        self._hooks.setdefault(hook_type, []).append(callback)
        logger.debug("registered %s hook %s", hook_type, _name(callback))

    def register_table(self, table: Mapping[str, HookCallback]) -> None:
        for hook, callback in table.items():
            self.register(hook, callback)

    def unregister(self, hook: HookType | str, callback: HookCallback) -> None:
        callbacks = self._hooks.get(HookType(hook), [])
        if callback in callbacks:
            callbacks.remove(callback)

    def callbacks(self, hook: HookType | str) -> list[HookCallback]:
        return list(self._hooks.get(HookType(hook), []))

    async def fire(self, hook: HookType | str, *args: object) -> None:
        """Call every callback for *hook* with the host's positional arguments.

        A callback that raises is logged and skipped; the remaining
        callbacks still run and the host's tool result is never lost.
        """
        hook_type = HookType(hook)
        for callback in self.callbacks(hook_type):
            try:
                result = callback(*args)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("%s hook %s failed", hook_type, _name(callback))

    def clear(self) -> None:
        self._hooks.clear()


def _name(callback: HookCallback) -> str:
    return getattr(callback, "__qualname__", repr(callback))
