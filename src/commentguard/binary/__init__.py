# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Location, download and resolution of the comment-checker executable."""

from commentguard.binary.downloader import BinaryDownloader
from commentguard.binary.locator import BinaryLocator
from commentguard.binary.platform import PLATFORM_MAP, PlatformDescriptor, platform_key
from commentguard.binary.resolver import BinaryResolver, ResolverState

__all__ = [
    "PLATFORM_MAP",
    "BinaryDownloader",
    "BinaryLocator",
    "BinaryResolver",
    "PlatformDescriptor",
    "ResolverState",
    "platform_key",
]
