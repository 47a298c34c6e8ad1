# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""commentguard - Flags newly introduced comments in agent file edits."""

__version__ = "0.1.0"

from commentguard.binary import BinaryDownloader, BinaryLocator, BinaryResolver
from commentguard.checker import CheckInvoker
from commentguard.hooks import CommentCheckerPlugin, HookManager, HookType
from commentguard.models import CheckResult, PendingCall
from commentguard.tracker import PendingCallTracker

__all__ = [
    "BinaryDownloader",
    "BinaryLocator",
    "BinaryResolver",
    "CheckInvoker",
    "CheckResult",
    "CommentCheckerPlugin",
    "HookManager",
    "HookType",
    "PendingCall",
    "PendingCallTracker",
    "__version__",
]
