# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

import pytest

from commentguard.core.config import Settings

@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep host environment and any real bundled install out of tests."""
    for key in list(os.environ):
        if key.startswith("COMMENT_CHECKER_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
    monkeypatch.setattr(
        "commentguard.binary.locator.BUNDLED_DISTRIBUTION",
        "commentguard-tests-no-such-distribution",
    )
    yield


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any handlers ``setup_logging`` attached during a test."""
    yield
    root = logging.getLogger("commentguard")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    path = tmp_path / "cache" / "bin"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def make_checker(tmp_path: Path) -> Callable[..., Path]:
    """Write an executable ``/bin/sh`` stand-in for the comment-checker.

    The script saves its stdin to ``stdin.json`` and its arguments to
    ``args.txt`` next to itself, then runs *body*.
    """

    def _make(body: str = "exit 0\n", directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path / "checker"
        target_dir.mkdir(parents=True, exist_ok=True)
        script = target_dir / "comment-checker"
        script.write_text(
            "#!/bin/sh\n"
            'DIR="$(dirname "$0")"\n'
            'cat > "$DIR/stdin.json"\n'
            'printf "%s\\n" "$@" > "$DIR/args.txt"\n' + body
        )
        script.chmod(0o755)
        return script

    return _make
