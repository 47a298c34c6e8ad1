# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Run the external comment-checker against one finished tool call.

The checker reads a single JSON line on stdin and reports through its exit
code: ``0`` means clean, ``2`` means new comments were found and the
warning text is on stderr.  Anything else is treated as clean.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from commentguard.core.constants import (
    EXIT_CLEAN,
    EXIT_COMMENTS_FOUND,
    OUTPUT_FAILURE_PATTERNS,
)
from commentguard.models.calls import PendingCall
from commentguard.models.payload import CheckResult, HookPayload, ToolInputPayload

logger = logging.getLogger("commentguard.checker.invoker")

_LOG_PAYLOAD_CHARS = 200


def is_tool_failure(output: str) -> bool:
    """Whether a tool's output text reports that the tool itself failed."""
    lowered = output.lower()
    return lowered.startswith("error") or any(p in lowered for p in OUTPUT_FAILURE_PATTERNS)


def build_payload(call: PendingCall, cwd: str | None = None) -> HookPayload:
    return HookPayload(
        session_id=call.session_id,
        tool_name=call.tool_label,
        cwd=cwd if cwd is not None else os.getcwd(),
        tool_input=ToolInputPayload(
            file_path=call.file_path,
            content=call.content,
            old_string=call.old_string,
            new_string=call.new_string,
            edits=call.edits,
        ),
    )


class CheckInvoker:
    """Spawns the checker executable and classifies its exit status."""

    def __init__(self, *, cwd: str | None = None) -> None:
        self._cwd = cwd

    async def check(
        self,
        call: PendingCall,
        binary_path: Path | None,
        *,
        prompt: str | None = None,
    ) -> CheckResult:
        """Check *call* for new comments; never raises."""
        if binary_path is None:
            logger.debug("comment-checker binary not found")
            return CheckResult.clean()

        if not binary_path.exists():
            logger.debug("comment-checker binary does not exist: %s", binary_path)
            return CheckResult.clean()

        try:
            line = build_payload(call, self._cwd).to_line()
            logger.debug("running comment-checker with input: %s", line[:_LOG_PAYLOAD_CHARS])

            args = [str(binary_path)]
            if prompt and prompt.strip():
                args.extend(["--prompt", prompt])

            proc = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate(line.encode())
        except Exception:
            logger.exception("failed to run comment-checker")
            return CheckResult.clean()

        message = stderr.decode(errors="replace")
        logger.debug(
            "exit code: %s stdout length: %d stderr length: %d",
            proc.returncode,
            len(stdout),
            len(message),
        )

        if proc.returncode == EXIT_CLEAN:
            return CheckResult.clean()

        if proc.returncode == EXIT_COMMENTS_FOUND:
            return CheckResult(has_comments=True, message=message)

        logger.debug("unexpected exit code: %s stderr: %s", proc.returncode, message)
        return CheckResult.clean()
