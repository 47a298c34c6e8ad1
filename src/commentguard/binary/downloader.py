# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Fetch and stage the comment-checker release binary."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import httpx

from commentguard import __version__
from commentguard.binary.locator import BinaryLocator, asset_name, download_url
from commentguard.binary.platform import descriptor_for, is_windows, platform_key
from commentguard.core.config import Settings, get_settings
from commentguard.core.constants import ArchiveFormat
from commentguard.core.exceptions import (
    DownloadError,
    ExtractionError,
    UnsupportedPlatformError,
)

logger = logging.getLogger("commentguard.binary.downloader")

_USER_AGENT = f"commentguard/{__version__}"


def _check_response(resp: httpx.Response, context: str = "") -> None:
    """Raise :class:`DownloadError` for non-2xx responses."""
    if resp.is_success:
        return
    msg = f"{context}: HTTP {resp.status_code}" if context else f"HTTP {resp.status_code}"
    if resp.reason_phrase:
        msg = f"{msg} {resp.reason_phrase}"
    raise DownloadError(msg, status_code=resp.status_code)


async def _run_extractor(args: list[str]) -> None:
    proc = await asyncio.create_subprocess_exec(
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    _, stderr = await proc.communicate()
    if proc.returncode != 0:
        raise ExtractionError(
            f"{args[0]} extraction failed (exit {proc.returncode}): "
            f"{stderr.decode(errors='replace').strip()}",
            returncode=proc.returncode,
        )


async def extract_archive(archive_path: Path, dest_dir: Path, fmt: ArchiveFormat) -> None:
    """Unpack *archive_path* into *dest_dir* with the platform's utility.

    Raises:
        ExtractionError: The utility exited non-zero.
    """
    logger.debug("Extracting %s: %s to %s", fmt, archive_path, dest_dir)
    if fmt is ArchiveFormat.TAR_GZ:
        args = ["tar", "-xzf", str(archive_path), "-C", str(dest_dir)]
    elif is_windows():
        args = [
            "powershell",
            "-command",
            f"Expand-Archive -Path '{archive_path}' -DestinationPath '{dest_dir}' -Force",
        ]
    else:
        args = ["unzip", "-o", str(archive_path), "-d", str(dest_dir)]
    await _run_extractor(args)


class BinaryDownloader:
    """Downloads the checker release asset into the cache directory.

    Parameters
    ----------
    locator:
        Supplies the cache directory, binary name and package version.
    settings:
        Supplies the release repository.
    key:
        Platform key override (``"linux-x64"`` etc.); defaults to the host.
    """

    def __init__(
        self,
        locator: BinaryLocator | None = None,
        *,
        settings: Settings | None = None,
        key: str | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._locator = locator or BinaryLocator(self._settings)
        self._key = key

    @property
    def platform_key(self) -> str:
        return self._key or platform_key()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={"User-Agent": _USER_AGENT},
            follow_redirects=True,
        )

    async def _fetch(self, url: str) -> bytes:
        async with self._client() as client:
            resp = await client.get(url)
        _check_response(resp, f"download {url}")
        return resp.content

    async def download(self) -> Path | None:
        """Fetch, extract and mark the executable; ``None`` on any failure."""
        try:
            descriptor = descriptor_for(self.platform_key)
        except UnsupportedPlatformError as exc:
            logger.debug("%s", exc)
            return None

        cache_dir = self._locator.cache_dir
        binary_path = self._locator.cached_binary_path

        if binary_path.is_file():
            logger.debug("Binary already cached at: %s", binary_path)
            return binary_path

        version = self._locator.package_version()
        asset = asset_name(version, descriptor)
        url = download_url(self._settings.release_repo, version, descriptor)

        logger.info("Downloading comment-checker binary from %s", url)

        try:
            cache_dir.mkdir(parents=True, exist_ok=True)

            content = await self._fetch(url)
            archive_path = cache_dir / asset
            archive_path.write_bytes(content)
            logger.debug("Downloaded archive to: %s", archive_path)

            await extract_archive(archive_path, cache_dir, descriptor.ext)
            archive_path.unlink(missing_ok=True)

            if not binary_path.is_file():
                raise ExtractionError(f"{asset} did not contain {binary_path.name}")

            if not is_windows():
                binary_path.chmod(0o755)
        except (httpx.HTTPError, DownloadError, ExtractionError, OSError) as exc:
            logger.warning("Failed to download comment-checker: %s", exc)
            logger.warning("Comment checking disabled.")
            return None

        logger.info("comment-checker binary ready at %s", binary_path)
        return binary_path

    async def ensure_binary(self) -> Path | None:
        """Cached executable if present, otherwise :meth:`download`."""
        cached = self._locator.locate_cached()
        if cached is not None:
            logger.debug("Using cached binary: %s", cached)
            return cached
        return await self.download()
