"""Unit tests for the append-only module.log (sv_modular.activity_log)."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from sv_modular.activity_log import append_log, format_log_line

pytestmark = pytest.mark.unit

MOMENT = datetime(2025, 3, 4, 5, 6, 7, 890_000, tzinfo=timezone.utc)


class TestFormatLogLine:
    def test_format(self):
        line = format_log_line("Generated module: bands/song", MOMENT)
        assert line == "[2025-03-04T05:06:07.890Z] Generated module: bands/song\n"


class TestAppendLog:
    def test_creates_file(self, tmp_path: Path):
        path = tmp_path / "module.log"
        line = append_log(path, "Created module: home | route: home", MOMENT)
        assert path.read_text(encoding="utf-8") == line

    def test_appends_without_truncating(self, tmp_path: Path):
        path = tmp_path / "module.log"
        path.write_text("existing line\n", encoding="utf-8")
        append_log(path, "one", MOMENT)
        append_log(path, "two", MOMENT)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines == [
            "existing line",
            "[2025-03-04T05:06:07.890Z] one",
            "[2025-03-04T05:06:07.890Z] two",
        ]

    def test_write_errors_propagate(self, tmp_path: Path):
        with pytest.raises(OSError):
            append_log(tmp_path / "missing-dir" / "module.log", "x", MOMENT)
