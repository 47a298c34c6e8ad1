# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pending tool-call models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from commentguard.core.constants import ToolName


class EditPair(BaseModel):
    """One old/new fragment of a multi-range edit."""

    model_config = ConfigDict(populate_by_name=True)

    old_string: str = Field(
        default="", validation_alias=AliasChoices("old_string", "oldString")
    )
    new_string: str = Field(
        default="", validation_alias=AliasChoices("new_string", "newString")
    )


class PendingCall(BaseModel):
    """The "before" state of a mutating tool call awaiting its result.

    Only the fields matching ``tool`` are populated: ``content`` for a
    whole-file write, ``old_string``/``new_string`` for a single edit and
    ``edits`` for a multi-range edit.
    """

    file_path: str
    tool: ToolName
    session_id: str = ""
    content: str | None = None
    old_string: str | None = None
    new_string: str | None = None
    edits: list[EditPair] | None = None
    timestamp: float = 0.0

    @model_validator(mode="after")
    def _check_mutation_fields(self) -> PendingCall:
        if self.tool is ToolName.WRITE and self.content is None:
            raise ValueError("write call requires content")
        if self.tool is ToolName.EDIT and self.new_string is None:
            raise ValueError("edit call requires new_string")
        if self.tool is ToolName.MULTIEDIT and self.edits is None:
            raise ValueError("multiedit call requires edits")
        return self

    @classmethod
    def from_tool_args(
        cls,
        tool: str | ToolName,
        session_id: str,
        args: dict[str, Any],
    ) -> PendingCall | None:
        """Build a pending call from raw host tool arguments.

        Returns ``None`` when the arguments carry no file path.  Raises
        ``pydantic.ValidationError`` when the fields for *tool* are missing.
        """
        kind = ToolName(str(tool).lower())
        file_path = _first(args, "filePath", "file_path", "path")
        if not file_path:
            return None

        fields: dict[str, Any] = {}
        if kind is ToolName.WRITE:
            fields["content"] = args.get("content")
        elif kind is ToolName.EDIT:
            fields["old_string"] = _first(args, "oldString", "old_string")
            fields["new_string"] = _first(args, "newString", "new_string")
        else:
            fields["edits"] = args.get("edits")

        return cls(file_path=file_path, tool=kind, session_id=session_id, **fields)

    @property
    def tool_label(self) -> str:
        """Capitalised tool name, e.g. ``Edit``."""
        return self.tool.value.capitalize()


def _first(args: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = args.get(key)
        if value is not None:
            return value
    return None
