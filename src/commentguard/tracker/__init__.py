# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Before/after tool-call correlation."""

from commentguard.tracker.pending import PendingCallTracker

__all__ = ["PendingCallTracker"]
