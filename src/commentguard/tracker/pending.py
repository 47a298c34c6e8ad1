# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""In-memory table correlating before-hook records with after-hook results.

Entries are keyed by the host's call identifier.  An after event is not
guaranteed to arrive, so entries older than the TTL are dropped by a
background sweep that runs every ``sweep_interval`` seconds.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections.abc import Callable

from commentguard.core.constants import PENDING_CALL_TTL_SECONDS, SWEEP_INTERVAL_SECONDS
from commentguard.models.calls import PendingCall

logger = logging.getLogger("commentguard.tracker.pending")


class PendingCallTracker:
    """TTL-bounded map of call identifier to :class:`PendingCall`.

    Args:
        ttl: Seconds after which an unconsumed entry is discarded.
        sweep_interval: Seconds between background sweeps.
        clock: Monotonic time source, replaceable in tests.
    """

    def __init__(
        self,
        *,
        ttl: float = PENDING_CALL_TTL_SECONDS,
        sweep_interval: float = SWEEP_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._calls: dict[str, PendingCall] = {}
        self._ttl = ttl
        self._sweep_interval = sweep_interval
        self._clock = clock
        self._task: asyncio.Task[None] | None = None

    def __len__(self) -> int:
        return len(self._calls)

    def __contains__(self, call_id: object) -> bool:
        return call_id in self._calls

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    # ------------------------------------------------------------------
    # Table operations
    # ------------------------------------------------------------------

    def record(self, call_id: str, call: PendingCall) -> None:
        """Store *call* under *call_id*, replacing any existing entry."""
        call.timestamp = self._clock()
        if call_id in self._calls:
            logger.debug("overwriting pending call %s", call_id)
        self._calls[call_id] = call

    def take(self, call_id: str) -> PendingCall | None:
        """Remove and return the entry for *call_id*, or ``None``."""
        return self._calls.pop(call_id, None)

    def sweep(self, now: float | None = None) -> int:
        """Drop every entry older than the TTL; return how many were dropped."""
        if now is None:
            now = self._clock()
        expired = [
            call_id
            for call_id, call in self._calls.items()
            if now - call.timestamp > self._ttl
        ]
        for call_id in expired:
            del self._calls[call_id]
        if expired:
            logger.debug("swept %d stale pending call(s)", len(expired))
        return len(expired)

    # ------------------------------------------------------------------
    # Background sweeper
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Start the periodic sweep on the running loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())
        logger.debug("pending-call sweeper started (interval=%ss)", self._sweep_interval)

    async def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        logger.debug("pending-call sweeper stopped")

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval)
            try:
                self.sweep()
            except Exception:
                logger.exception("pending-call sweep failed")
