# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, protocol markers, and fixed constants."""

from enum import StrEnum


class ToolName(StrEnum):
    """File-mutating host tools whose edits are checked."""

    WRITE = "write"
    EDIT = "edit"
    MULTIEDIT = "multiedit"


class ArchiveFormat(StrEnum):
    TAR_GZ = "tar.gz"
    ZIP = "zip"


# Event marker the external checker expects in its payload.
HOOK_EVENT_NAME = "PostToolUse"

# Exit codes of the external checker.
EXIT_CLEAN = 0
EXIT_COMMENTS_FOUND = 2

# Tool output fragments (lowercase) that mark a failed tool call.
OUTPUT_FAILURE_PATTERNS: tuple[str, ...] = (
    "error:",
    "failed to",
    "could not",
    "permission denied",
    "no such file",
    "oldstring not found",
    "old_string not found",
)

RELEASE_REPO = "code-yeongyu/go-claude-code-comment-checker"
RELEASE_BASE_URL = "https://github.com"
FALLBACK_VERSION = "0.7.0"
BUNDLED_DISTRIBUTION = "comment-checker"

CACHE_SUBPATH = ("opencode-comments-plugin", "bin")
BINARY_BASENAME = "comment-checker"

DEBUG_LOG_FILENAME = "comment-checker-debug.log"

PENDING_CALL_TTL_SECONDS = 60.0
SWEEP_INTERVAL_SECONDS = 10.0
