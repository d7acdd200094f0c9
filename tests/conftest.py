"""Shared pytest fixtures for the sv-modular test suite.

Provides reusable fixtures for:
- Temporary SvelteKit-style project roots
- ``Config`` instances pointing at them
- Pre-written manifests (current, legacy and corrupt)
- A snapshot helper for asserting "nothing changed on disk"
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sv_modular.config import Config


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """An empty project directory with a ``src/`` folder (auto-cleanup)."""
    root = tmp_path / "svelte-app"
    (root / "src").mkdir(parents=True)
    yield root


@pytest.fixture
def config(project_root: Path) -> Config:
    """A ``Config`` rooted at the temporary project."""
    return Config(project_root=project_root)


# ---------------------------------------------------------------------------
# Manifests
# ---------------------------------------------------------------------------

@pytest.fixture
def legacy_manifest(config: Config) -> Path:
    """A ``module.json`` mixing both pre-unification entry shapes."""
    config.manifest_path.write_text(
        json.dumps(
            {
                "modules": [
                    {"name": "user-profile", "route": "account/profile"},
                    "bands/linkinpark/song",
                ]
            },
            indent=2,
        ),
        encoding="utf-8",
    )
    return config.manifest_path


@pytest.fixture
def corrupt_manifest(config: Config) -> Path:
    """A ``module.json`` that is not valid JSON."""
    config.manifest_path.write_text('{"modules": [', encoding="utf-8")
    return config.manifest_path


# ---------------------------------------------------------------------------
# Filesystem snapshots
# ---------------------------------------------------------------------------

def snapshot_tree(root: Path) -> dict[str, str | None]:
    """Map every path under *root* to its text content (``None`` for dirs)."""
    tree: dict[str, str | None] = {}
    for path in sorted(root.rglob("*")):
        key = path.relative_to(root).as_posix()
        tree[key] = None if path.is_dir() else path.read_text(encoding="utf-8")
    return tree


@pytest.fixture
def snapshot():
    """The ``snapshot_tree`` helper, exposed as a fixture."""
    return snapshot_tree
