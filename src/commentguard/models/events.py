# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Host tool-execution hook event models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ToolCall(BaseModel):
    """Identifiers the host passes to both before and after hooks."""

    model_config = ConfigDict(populate_by_name=True)

    tool: str
    session_id: str = Field(validation_alias=AliasChoices("sessionID", "session_id"))
    call_id: str = Field(validation_alias=AliasChoices("callID", "call_id"))


class BeforeOutput(BaseModel):
    """Arguments of the tool call about to run."""

    args: dict[str, Any] = Field(default_factory=dict)


class AfterOutput(BaseModel):
    """Result of a finished tool call; ``output`` may be appended to."""

    title: str = ""
    output: str = ""
    metadata: Any = None
