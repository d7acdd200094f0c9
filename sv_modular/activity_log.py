"""Append-only ``module.log``.

One line per event, ``[<ISO-8601 UTC timestamp>] <message>``. The file is
never read, truncated or rotated, and write errors propagate to the caller.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from sv_modular.utils import utc_timestamp


def format_log_line(message: str, now: datetime | None = None) -> str:
    return f"[{utc_timestamp(now)}] {message}\n"


def append_log(path: Path, message: str, now: datetime | None = None) -> str:
    """Append *message* to the log at *path* and return the written line."""
    line = format_log_line(message, now)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(line)
    return line
