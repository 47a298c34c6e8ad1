# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Filesystem lookup of the comment-checker executable.

Two locations are checked, in order:

1. the ``bin/`` directory shipped inside an installed ``comment-checker``
   distribution, and
2. the per-user cache directory the downloader writes into
   (``$XDG_CACHE_HOME/opencode-comments-plugin/bin``).

Nothing here touches the network.
"""

from __future__ import annotations

import logging
from importlib import metadata
from pathlib import Path

from commentguard.binary.platform import PlatformDescriptor, is_windows
from commentguard.core.config import Settings, get_settings
from commentguard.core.constants import (
    BINARY_BASENAME,
    BUNDLED_DISTRIBUTION,
    CACHE_SUBPATH,
    RELEASE_BASE_URL,
)

logger = logging.getLogger("commentguard.binary.locator")


def binary_name() -> str:
    return f"{BINARY_BASENAME}.exe" if is_windows() else BINARY_BASENAME


def asset_name(version: str, descriptor: PlatformDescriptor) -> str:
    """Release asset file name, e.g. ``comment-checker_v0.7.0_linux_amd64.tar.gz``."""
    return f"{BINARY_BASENAME}_v{version}_{descriptor.asset_suffix}"


def download_url(repo: str, version: str, descriptor: PlatformDescriptor) -> str:
    return (
        f"{RELEASE_BASE_URL}/{repo}/releases/download/"
        f"v{version}/{asset_name(version, descriptor)}"
    )


class BinaryLocator:
    """Finds an already-installed checker executable.

    Args:
        settings: Source of the cache base directory and fallback version.
        cache_dir: Explicit cache directory, overriding the settings.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        cache_dir: Path | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._cache_dir = cache_dir

    @property
    def cache_dir(self) -> Path:
        if self._cache_dir is not None:
            return self._cache_dir
        base = self._settings.cache_home or Path.home() / ".cache"
        return base.joinpath(*CACHE_SUBPATH)

    @property
    def cached_binary_path(self) -> Path:
        """Where the cached executable lives, whether or not it exists."""
        return self.cache_dir / binary_name()

    def locate_bundled(self) -> Path | None:
        try:
            dist = metadata.distribution(BUNDLED_DISTRIBUTION)
        except metadata.PackageNotFoundError:
            logger.debug("bundled package %s not installed", BUNDLED_DISTRIBUTION)
            return None

        name = binary_name()
        for file in dist.files or []:
            if file.name == name and file.parent.name == "bin":
                path = Path(dist.locate_file(file))
                if path.is_file():
                    logger.debug("found binary in bundled package: %s", path)
                    return path
        return None

    def locate_cached(self) -> Path | None:
        path = self.cached_binary_path
        return path if path.is_file() else None

    def locate(self) -> Path | None:
        """Bundled install first, then the cache directory."""
        bundled = self.locate_bundled()
        if bundled is not None:
            return bundled

        cached = self.locate_cached()
        if cached is not None:
            logger.debug("found binary in cache: %s", cached)
            return cached

        logger.debug("no binary found in known locations")
        return None

    def package_version(self) -> str:
        """Version of the bundled distribution, else the fallback."""
        try:
            return metadata.version(BUNDLED_DISTRIBUTION)
        except metadata.PackageNotFoundError:
            return self._settings.fallback_version
