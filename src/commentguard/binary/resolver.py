# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Single-flight, memoized resolution of the checker executable path.

One :class:`BinaryResolver` is created at plugin startup and shared by
every hook invocation.  The first caller of :meth:`BinaryResolver.resolve`
starts the lookup (bundled install, cache, then download); callers that
arrive while it is running await the same task.  The outcome, including
``None``, is kept for the lifetime of the resolver.
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from pathlib import Path

from commentguard.binary.downloader import BinaryDownloader
from commentguard.binary.locator import BinaryLocator

logger = logging.getLogger("commentguard.binary.resolver")


class ResolverState(StrEnum):
    UNINITIALIZED = "uninitialized"
    RESOLVING = "resolving"
    RESOLVED = "resolved"


class BinaryResolver:
    def __init__(
        self,
        locator: BinaryLocator | None = None,
        downloader: BinaryDownloader | None = None,
    ) -> None:
        self._locator = locator or BinaryLocator()
        self._downloader = downloader or BinaryDownloader(self._locator)
        self._state = ResolverState.UNINITIALIZED
        self._path: Path | None = None
        self._task: asyncio.Task[Path | None] | None = None

    @property
    def state(self) -> ResolverState:
        return self._state

    @property
    def path(self) -> Path | None:
        """The resolved path; ``None`` until resolved or when unavailable."""
        return self._path

    async def resolve(self) -> Path | None:
        """Return the executable path, resolving it at most once."""
        if self._state is ResolverState.RESOLVED:
            return self._path

        return await asyncio.shield(self._ensure_task())

    def resolve_sync(self) -> Path | None:
        """Resolved path if known, else a filesystem-only lookup."""
        if self._path is not None:
            return self._path
        return self._locator.locate()

    def start_background(self) -> asyncio.Task[Path | None] | None:
        """Kick off resolution on the running loop without awaiting it."""
        if self._state is ResolverState.RESOLVED:
            return self._task
        if self._task is None:
            self._ensure_task().add_done_callback(_log_background_result)
        return self._task

    def _ensure_task(self) -> asyncio.Task[Path | None]:
        # No await between the check and the assignment: concurrent callers
        # always see the task created by the first one.
        if self._task is None:
            self._state = ResolverState.RESOLVING
            self._task = asyncio.ensure_future(self._resolve())
        return self._task

    async def _resolve(self) -> Path | None:
        try:
            path = await self._lookup()
        except Exception:
            logger.exception("binary resolution failed")
            path = None
        self._path = path
        self._state = ResolverState.RESOLVED
        return path

    async def _lookup(self) -> Path | None:
        local = self._locator.locate()
        if local is not None and local.exists():
            logger.debug("using sync-resolved path: %s", local)
            return local

        logger.debug("triggering lazy download...")
        downloaded = await self._downloader.ensure_binary()
        if downloaded is not None:
            logger.debug("using downloaded path: %s", downloaded)
            return downloaded

        logger.debug("no binary available")
        return None


def _log_background_result(task: asyncio.Task[Path | None]) -> None:
    if task.cancelled():
        logger.debug("background init cancelled")
        return
    logger.debug("background init complete: %s", task.result() or "no binary")
