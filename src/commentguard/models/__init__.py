# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pydantic models for tool calls, checker payloads, and host events."""

from commentguard.models.calls import EditPair, PendingCall
from commentguard.models.events import AfterOutput, BeforeOutput, ToolCall
from commentguard.models.payload import CheckResult, HookPayload, ToolInputPayload

__all__ = [
    "AfterOutput",
    "BeforeOutput",
    "CheckResult",
    "EditPair",
    "HookPayload",
    "PendingCall",
    "ToolCall",
    "ToolInputPayload",
]
