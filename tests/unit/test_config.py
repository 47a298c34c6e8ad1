# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for environment-driven settings and the pending-call models."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from commentguard.core.config import Settings, get_settings
from commentguard.core.constants import ToolName
from commentguard.models.calls import PendingCall


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
        s = Settings()
        assert s.debug is False
        assert s.cache_home is None
        assert s.log_file == Path(tempfile.gettempdir()) / "comment-checker-debug.log"
        assert s.release_repo == "code-yeongyu/go-claude-code-comment-checker"
        assert s.fallback_version == "0.7.0"
        assert s.pending_call_ttl == 60.0
        assert s.sweep_interval == 10.0
        assert s.custom_prompt == ""

    def test_debug_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMMENT_CHECKER_DEBUG", "1")
        assert get_settings().debug is True

    def test_xdg_cache_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
        assert Settings().cache_home == tmp_path

    def test_empty_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMMENT_CHECKER_RELEASE_REPO", "")
        assert Settings().release_repo == "code-yeongyu/go-claude-code-comment-checker"

    @pytest.mark.parametrize(("raw", "expected"), [("JSON", "json"), ("text", "text"), ("xml", "text")])
    def test_log_format(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str) -> None:
        monkeypatch.setenv("COMMENT_CHECKER_LOG_FORMAT", raw)
        assert Settings().log_format == expected

    def test_rejects_non_positive_ttl(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMMENT_CHECKER_PENDING_CALL_TTL", "0")
        with pytest.raises(ValidationError):
            Settings()


class TestPendingCallModel:
    def test_tool_label(self) -> None:
        call = PendingCall(file_path="/a", tool=ToolName.WRITE, content="")
        assert call.tool_label == "Write"

    @pytest.mark.parametrize(
        ("tool", "fields"),
        [
            (ToolName.WRITE, {"old_string": "a", "new_string": "b"}),
            (ToolName.EDIT, {"content": "x"}),
            (ToolName.MULTIEDIT, {"content": "x"}),
        ],
    )
    def test_fields_must_match_kind(self, tool: ToolName, fields: dict) -> None:
        with pytest.raises(ValidationError):
            PendingCall(file_path="/a", tool=tool, **fields)

    def test_from_tool_args_drops_unrelated_fields(self) -> None:
        call = PendingCall.from_tool_args(
            "write", "s", {"filePath": "/a", "content": "x", "oldString": "stray"}
        )
        assert call is not None
        assert call.content == "x"
        assert call.old_string is None

    def test_from_tool_args_without_path(self) -> None:
        assert PendingCall.from_tool_args("edit", "s", {"newString": "x"}) is None

    def test_empty_old_string_allowed(self) -> None:
        call = PendingCall.from_tool_args(
            "edit", "s", {"file_path": "/a", "old_string": "", "new_string": "# note"}
        )
        assert call is not None
        assert call.old_string == ""
