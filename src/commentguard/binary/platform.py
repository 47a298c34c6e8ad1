# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Platform detection and release-asset naming descriptors."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass

from commentguard.core.constants import ArchiveFormat
from commentguard.core.exceptions import UnsupportedPlatformError


@dataclass(frozen=True)
class PlatformDescriptor:
    """How a release asset names one OS/architecture pair."""

    os: str
    arch: str
    ext: ArchiveFormat

    @property
    def asset_suffix(self) -> str:
        """e.g. ``darwin_arm64.tar.gz``."""
        return f"{self.os}_{self.arch}.{self.ext}"


PLATFORM_MAP: dict[str, PlatformDescriptor] = {
    "darwin-arm64": PlatformDescriptor("darwin", "arm64", ArchiveFormat.TAR_GZ),
    "darwin-x64": PlatformDescriptor("darwin", "amd64", ArchiveFormat.TAR_GZ),
    "linux-arm64": PlatformDescriptor("linux", "arm64", ArchiveFormat.TAR_GZ),
    "linux-x64": PlatformDescriptor("linux", "amd64", ArchiveFormat.TAR_GZ),
    "win32-x64": PlatformDescriptor("windows", "amd64", ArchiveFormat.ZIP),
}

_ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
}


def is_windows() -> bool:
    return sys.platform == "win32"


def platform_key(system: str | None = None, machine: str | None = None) -> str:
    """Return the ``<os>-<arch>`` key for *system*/*machine* or the host."""
    system = system or sys.platform
    if system.startswith("linux"):
        system = "linux"
    machine = (machine or platform.machine()).lower()
    return f"{system}-{_ARCH_ALIASES.get(machine, machine)}"


def descriptor_for(key: str) -> PlatformDescriptor:
    """Look up the descriptor for *key*.

    Raises:
        UnsupportedPlatformError: No release asset is published for *key*.
    """
    try:
        return PLATFORM_MAP[key]
    except KeyError:
        raise UnsupportedPlatformError(f"Unsupported platform: {key}") from None


def current_descriptor() -> PlatformDescriptor | None:
    """Descriptor for the running host, or ``None`` when unsupported."""
    return PLATFORM_MAP.get(platform_key())
