# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Checker stdin payload and result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from commentguard.core.constants import HOOK_EVENT_NAME
from commentguard.models.calls import EditPair


class ToolInputPayload(BaseModel):
    file_path: str
    content: str | None = None
    old_string: str | None = None
    new_string: str | None = None
    edits: list[EditPair] | None = None


class HookPayload(BaseModel):
    """The JSON document written to the checker's standard input."""

    session_id: str
    tool_name: str
    transcript_path: str = ""
    cwd: str
    hook_event_name: str = HOOK_EVENT_NAME
    tool_input: ToolInputPayload

    def to_line(self) -> str:
        """Serialise as a single JSON line, omitting absent fields."""
        return self.model_dump_json(exclude_none=True)


class CheckResult(BaseModel):
    """Outcome of one checker invocation."""

    has_comments: bool = False
    message: str = Field(default="", description="Checker stderr when comments were found")

    @classmethod
    def clean(cls) -> CheckResult:
        return cls(has_comments=False, message="")
