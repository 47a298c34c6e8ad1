# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Opt-in diagnostic logging with sensitive data redaction.

The plugin runs inside a host process, so nothing is written anywhere
unless debug logging is switched on (``COMMENT_CHECKER_DEBUG=1``), in
which case records are appended to a file in the temp directory.
"""

import json
import logging
import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from commentguard.core.config import Settings

ROOT_LOGGER = "commentguard"

REDACT_PATTERNS = [
    re.compile(r"(sk-ant-[a-zA-Z0-9\-]{10})[a-zA-Z0-9\-]*"),
    re.compile(r"(sk-[a-zA-Z0-9]{10})[a-zA-Z0-9]*"),
    re.compile(r"(AKIA[A-Z0-9]{4})[A-Z0-9]{12}"),
    re.compile(r"(ghp_[A-Za-z0-9]{4})[A-Za-z0-9_]{32,}"),
    re.compile(r"(Bearer\s+[a-zA-Z0-9\-._~+/]{10})[a-zA-Z0-9\-._~+/]*"),
]


def redact_sensitive(text: str) -> str:
    for pattern in REDACT_PATTERNS:
        text = pattern.sub(r"\1[REDACTED]", text)
    return text


def _iso_time(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
        timespec="milliseconds"
    )


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": _iso_time(record),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_sensitive(record.getMessage()),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = redact_sensitive(str(record.exc_info[1]))
        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    """``[<iso timestamp>] [<logger>] <message>`` lines."""

    def __init__(self) -> None:
        super().__init__("[%(isotime)s] [%(name)s] %(levelname)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        record.isotime = _iso_time(record)
        msg = super().format(record)
        return redact_sensitive(msg)


def setup_logging(
    *,
    debug: bool = False,
    log_file: Path | None = None,
    fmt: str = "text",
    stream: bool = False,
    level: str = "DEBUG",
) -> logging.Logger:
    """Configure the ``commentguard`` logger tree.

    Args:
        debug: Append records to *log_file*.
        log_file: Debug log destination; required when *debug* is set.
        fmt: ``"text"`` or ``"json"``.
        stream: Also write to stderr (used by the CLI ``--verbose`` flag).
        level: Threshold for the stderr handler.

    Returns:
        The configured root package logger.
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = False

    formatter: logging.Formatter = JsonFormatter() if fmt == "json" else TextFormatter()

    if debug and log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if stream:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(getattr(logging, level.upper(), logging.DEBUG))
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    if not root.handlers:
        root.addHandler(logging.NullHandler())
        root.setLevel(logging.WARNING)
    else:
        root.setLevel(logging.DEBUG)
    return root


def setup_logging_from_settings(settings: Settings, *, stream: bool = False) -> logging.Logger:
    return setup_logging(
        debug=settings.debug,
        log_file=settings.log_file,
        fmt=settings.log_format,
        stream=stream,
    )
