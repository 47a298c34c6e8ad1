# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Comment-checker plugin wired into the host's tool-execution hooks.

Typical usage::

    plugin = CommentCheckerPlugin()
    await plugin.start()
    plugin.register(hooks)
    ...
    await hooks.fire("tool.execute.before", call, before)
    await hooks.fire("tool.execute.after", call, after)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from commentguard.binary.downloader import BinaryDownloader
from commentguard.binary.locator import BinaryLocator
from commentguard.binary.resolver import BinaryResolver
from commentguard.checker.invoker import CheckInvoker, is_tool_failure
from commentguard.core.config import Settings, get_settings
from commentguard.core.constants import ToolName
from commentguard.core.logging import setup_logging_from_settings
from commentguard.hooks.manager import HookCallback, HookManager, HookType
from commentguard.models.calls import PendingCall
from commentguard.models.events import AfterOutput, BeforeOutput, ToolCall
from commentguard.tracker.pending import PendingCallTracker

logger = logging.getLogger("commentguard.hooks.plugin")

_TOOL_NAMES = frozenset(t.value for t in ToolName)


def resolve_custom_prompt(config: Any) -> str | None:
    """Read ``comment_checker.custom_prompt`` from host configuration."""
    if not isinstance(config, Mapping):
        return None
    section = config.get("comment_checker")
    if not isinstance(section, Mapping):
        return None
    prompt = section.get("custom_prompt")
    if isinstance(prompt, str) and prompt.strip():
        return prompt
    return None


class CommentCheckerPlugin:
    """Records mutating tool calls and checks them once they complete."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        resolver: BinaryResolver | None = None,
        tracker: PendingCallTracker | None = None,
        invoker: CheckInvoker | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        if resolver is None:
            locator = BinaryLocator(self._settings)
            resolver = BinaryResolver(
                locator, BinaryDownloader(locator, settings=self._settings)
            )
        self.resolver = resolver
        self.tracker = tracker or PendingCallTracker(
            ttl=self._settings.pending_call_ttl,
            sweep_interval=self._settings.sweep_interval,
        )
        self.invoker = invoker or CheckInvoker()
        self.custom_prompt: str | None = self._settings.custom_prompt or None

    # -- lifecycle ---------------------------------------------------------

    async def start(self) -> None:
        """Begin background binary resolution and pending-call sweeps."""
        setup_logging_from_settings(self._settings)
        self.resolver.start_background()
        await self.tracker.start()

    async def stop(self) -> None:
        await self.tracker.stop()

    def hook_table(self) -> dict[str, HookCallback]:
        """Hook name to callback, as the host looks them up."""
        return {
            HookType.CONFIG: self.on_config,
            HookType.TOOL_EXECUTE_BEFORE: self.before,
            HookType.TOOL_EXECUTE_AFTER: self.after,
        }

    def register(self, hooks: HookManager) -> None:
        hooks.register_table(self.hook_table())

    # -- hooks -------------------------------------------------------------

    async def on_config(self, config: Any) -> None:
        self.custom_prompt = resolve_custom_prompt(config) or self._settings.custom_prompt or None

    async def before(
        self,
        call: ToolCall | Mapping[str, Any],
        output: BeforeOutput | Mapping[str, Any],
    ) -> None:
        call = _as_tool_call(call)
        tool = call.tool.lower()
        if tool not in _TOOL_NAMES:
            return

        args = output.args if isinstance(output, BeforeOutput) else (output.get("args") or {})
        try:
            pending = PendingCall.from_tool_args(tool, call.session_id, args)
        except ValidationError as exc:
            logger.debug("unusable %s arguments: %s", tool, exc)
            return

        if pending is None:
            logger.debug("no filePath found for tool: %s", tool)
            return

        self.tracker.record(call.call_id, pending)

    async def after(
        self,
        call: ToolCall | Mapping[str, Any],
        output: AfterOutput | dict[str, Any],
    ) -> None:
        call = _as_tool_call(call)
        pending = self.tracker.take(call.call_id)
        if pending is None:
            return

        if is_tool_failure(_get_output(output)):
            logger.debug("skipping due to tool failure in output")
            return

        binary_path = await self.resolver.resolve()
        if binary_path is None or not binary_path.exists():
            logger.debug("CLI not available, skipping comment check")
            return

        result = await self.invoker.check(pending, binary_path, prompt=self.custom_prompt)
        if result.has_comments and result.message:
            _set_output(output, f"{_get_output(output)}\n\n{result.message}")


def _as_tool_call(call: ToolCall | Mapping[str, Any]) -> ToolCall:
    return call if isinstance(call, ToolCall) else ToolCall.model_validate(dict(call))


def _get_output(output: AfterOutput | dict[str, Any]) -> str:
    if isinstance(output, AfterOutput):
        return output.output
    return str(output.get("output") or "")


def _set_output(output: AfterOutput | dict[str, Any], text: str) -> None:
    if isinstance(output, AfterOutput):
        output.output = text
    else:
        output["output"] = text
