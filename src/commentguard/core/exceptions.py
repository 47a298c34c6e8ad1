# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for commentguard."""


class CommentGuardError(Exception):
    """Base exception for all commentguard errors."""


class UnsupportedPlatformError(CommentGuardError):
    """No release asset exists for the current OS and architecture."""


class DownloadError(CommentGuardError):
    """Failed to fetch the checker release asset."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ExtractionError(CommentGuardError):
    """The archive extraction utility exited unsuccessfully."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode
