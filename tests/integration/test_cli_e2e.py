"""Integration tests for the ``sv-modular`` command line.

These run ``main()`` end-to-end against a temporary SvelteKit-style project
and check exit codes, console output and the resulting project tree.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sv_modular.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SV_MODULAR_ROOT", "SV_MODULAR_SOURCE_DIR",
                 "SV_MODULAR_MANIFEST", "SV_MODULAR_LOG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("COLUMNS", "200")


def _run(project_root: Path, *argv: str) -> int:
    return main(["--root", str(project_root), *argv])


@pytest.mark.integration
class TestCreate:
    def test_success(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        assert _run(project_root, "create", "User Profile") == 0

        out = capsys.readouterr().out
        assert "user-profile" in out
        assert "UserProfilePage.svelte" in out
        assert (project_root / "src/lib/modules/user-profile/store.ts").is_file()
        assert (project_root / "src/routes/user-profile/+page.svelte").is_file()

        manifest = json.loads((project_root / "module.json").read_text(encoding="utf-8"))
        assert manifest["modules"][0]["kind"] == "frontend"

    def test_custom_route(self, project_root: Path):
        assert _run(project_root, "create", "user-profile", "-r", "account/profile") == 0
        assert (project_root / "src/routes/account/profile/+page.svelte").is_file()

    def test_repeat_fails(self, project_root: Path, capsys: pytest.CaptureFixture[str],
                          snapshot):
        _run(project_root, "create", "user-profile")
        before = snapshot(project_root)
        capsys.readouterr()

        assert _run(project_root, "create", "user-profile") == 1
        assert "already exists" in capsys.readouterr().err
        assert snapshot(project_root) == before

    def test_blank_name(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        assert _run(project_root, "create", "   ") == 1
        assert "Invalid module name" in capsys.readouterr().err


@pytest.mark.integration
class TestCreateServer:
    def test_success(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        assert _run(project_root, "create-server", "bands/linkinpark/song") == 0

        out = capsys.readouterr().out
        assert "created successfully" in out
        assert "Response helper" in out
        assert "Files written" in out
        assert "src/routes/api/bands/linkinpark/songs/[id]/+server.ts" in out
        assert (project_root / "src/lib/helpers/response.ts").is_file()

        log = (project_root / "module.log").read_text(encoding="utf-8")
        assert "Created response helper" in log
        assert "Generated module: bands/linkinpark/song" in log

    def test_repeat_fails_without_changes(self, project_root: Path, snapshot):
        assert _run(project_root, "create-server", "bands/linkinpark/song") == 0
        before = snapshot(project_root)

        assert _run(project_root, "create-server", "bands/linkinpark/song") == 1
        assert snapshot(project_root) == before

    def test_corrupt_manifest(self, project_root: Path, corrupt_manifest: Path,
                              capsys: pytest.CaptureFixture[str]):
        assert _run(project_root, "create-server", "song") == 1
        assert "unreadable" in capsys.readouterr().err
        assert not (project_root / "src/lib/modules/song").exists()
        assert corrupt_manifest.read_text(encoding="utf-8") == '{"modules": ['

    def test_undecodable_name(self, project_root: Path, capsys: pytest.CaptureFixture[str],
                              snapshot):
        before = snapshot(project_root)
        assert _run(project_root, "create-server", "bands/s\udcffong") == 1
        assert "Cannot write" in capsys.readouterr().err
        assert snapshot(project_root) == before

    def test_root_from_environment(self, project_root: Path,
                                   monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SV_MODULAR_ROOT", str(project_root))
        assert main(["create-server", "song"]) == 0
        assert (project_root / "src/routes/api/songs/+server.ts").is_file()


@pytest.mark.integration
class TestInitAndPreview:
    def test_init(self, project_root: Path):
        assert _run(project_root, "init", "--name", "my-app") == 0
        manifest = json.loads((project_root / "module.json").read_text(encoding="utf-8"))
        assert manifest == {
            "name": "my-app",
            "version": "1.0.0",
            "type": "module",
            "routes": ["/src/routes"],
            "modules": [],
        }

    def test_init_twice(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        _run(project_root, "init")
        assert _run(project_root, "init") == 1
        assert "already exists" in capsys.readouterr().err

    def test_preview(self, project_root: Path, capsys: pytest.CaptureFixture[str],
                     snapshot):
        before = snapshot(project_root)
        assert _run(project_root, "preview", "song", "--age", "22") == 0
        out = capsys.readouterr().out
        assert "Song User 3" in out
        assert "Song User 1" not in out
        assert snapshot(project_root) == before


@pytest.mark.integration
class TestUsage:
    def test_no_command(self, project_root: Path):
        with pytest.raises(SystemExit) as exc_info:
            _run(project_root)
        assert exc_info.value.code == 1

    def test_missing_argument(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            _run(project_root, "create-server")
        assert exc_info.value.code == 1
        assert "usage" in capsys.readouterr().err

    def test_unknown_command(self, project_root: Path):
        with pytest.raises(SystemExit) as exc_info:
            _run(project_root, "destroy", "song")
        assert exc_info.value.code == 1

    def test_version(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out
