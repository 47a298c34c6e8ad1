# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Invocation of the external comment-checker."""

from commentguard.checker.invoker import CheckInvoker, build_payload, is_tool_failure

__all__ = ["CheckInvoker", "build_payload", "is_tool_failure"]
