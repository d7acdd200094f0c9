"""The ``module.json`` manifest.

Every generated module is recorded as a tagged entry::

    {"name": "bands/linkinpark/song", "kind": "server", "route": "api/bands/linkinpark/songs"}
    {"name": "user-profile", "kind": "frontend", "route": "user-profile"}

Older manifests stored bare path strings for server modules and
``{name, route}`` objects for frontend modules. Both are read transparently
and rewritten in the tagged form on the next save.

Reading never guesses: ``load_manifest`` reports whether the file was
missing, loaded, or corrupt, and leaves the decision to the caller.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sv_modular.config import Config
from sv_modular.errors import ManifestCorruptError, ManifestExistsError
from sv_modular.naming import build_route_path
from sv_modular.utils import load_json, save_json

ModuleKind = Literal["frontend", "server"]

DEFAULT_VERSION = "1.0.0"
DEFAULT_NAME = "sv-modular-app"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ManifestEntry(BaseModel):
    """One generated module."""

    name: str
    kind: ModuleKind
    route: str


def _upgrade_legacy_entry(raw: Any) -> Any:
    """Map the two legacy entry shapes onto ``ManifestEntry`` fields."""
    if isinstance(raw, str):
        segments = [part for part in raw.split("/") if part.strip() != ""]
        route = f"api/{build_route_path(segments)}" if segments else "api"
        return {"name": raw, "kind": "server", "route": route}
    if isinstance(raw, dict) and "kind" not in raw:
        return {**raw, "kind": "frontend", "route": raw.get("route", raw.get("name", ""))}
    return raw


class Manifest(BaseModel):
    """The whole ``module.json`` document.

    Unknown top-level keys are preserved across a load/save cycle.
    """

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    version: str | None = None
    type: str | None = None
    routes: list[str] | None = None
    modules: list[ManifestEntry] = Field(default_factory=list)

    @field_validator("modules", mode="before")
    @classmethod
    def _accept_legacy_entries(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [_upgrade_legacy_entry(item) for item in value]
        return value

    def find(self, name: str, kind: ModuleKind) -> ManifestEntry | None:
        for entry in self.modules:
            if entry.name == name and entry.kind == kind:
                return entry
        return None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class LoadStatus(str, Enum):
    MISSING = "missing"
    LOADED = "loaded"
    CORRUPT = "corrupt"


class ManifestLoad(BaseModel):
    """Outcome of reading ``module.json``."""

    status: LoadStatus
    manifest: Manifest = Field(default_factory=Manifest)
    error: str | None = None

    def require(self, path: Path) -> Manifest:
        """Return the manifest, raising if the file on disk was corrupt.

        A missing file yields an empty manifest.
        """
        if self.status is LoadStatus.CORRUPT:
            raise ManifestCorruptError(path, self.error or "unknown error")
        return self.manifest


# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------


def load_manifest(path: Path) -> ManifestLoad:
    """Read *path* into a ``ManifestLoad`` without raising on bad content."""
    if not path.exists():
        return ManifestLoad(status=LoadStatus.MISSING)

    try:
        raw = load_json(path)
    except ValueError as exc:
        return ManifestLoad(status=LoadStatus.CORRUPT, error=f"invalid JSON: {exc}")

    if not isinstance(raw, dict):
        return ManifestLoad(
            status=LoadStatus.CORRUPT,
            error=f"expected a JSON object, got {type(raw).__name__}",
        )

    try:
        manifest = Manifest.model_validate(raw)
    except ValidationError as exc:
        return ManifestLoad(
            status=LoadStatus.CORRUPT,
            error=f"{exc.error_count()} invalid field(s)",
        )
    return ManifestLoad(status=LoadStatus.LOADED, manifest=manifest)


def save_manifest(manifest: Manifest, path: Path) -> None:
    """Rewrite the whole manifest, 2-space indented."""
    save_json(manifest.to_json(), path)


def init_manifest(config: Config, project_name: str | None = None) -> Manifest:
    """Create a fresh ``module.json`` for the project at ``config.project_root``.

    The document declares an ES-module package and points ``routes`` at the
    SvelteKit route tree; *project_name* defaults to the root folder name.

    Raises:
        ManifestExistsError: If the manifest file is already present.
    """
    path = config.manifest_path
    if path.exists():
        raise ManifestExistsError(path)

    name = project_name or config.project_root.resolve().name or DEFAULT_NAME
    manifest = Manifest(
        name=name,
        version=DEFAULT_VERSION,
        type="module",
        routes=[f"/{config.relative(config.routes_path)}"],
        modules=[],
    )
    save_manifest(manifest, path)
    return manifest


# ---------------------------------------------------------------------------
# Merge rules
# ---------------------------------------------------------------------------


def record_frontend(manifest: Manifest, name: str, route: str) -> ManifestEntry:
    """Replace-by-name: drop any frontend entry called *name*, then append."""
    entry = ManifestEntry(name=name, kind="frontend", route=route)
    manifest.modules = [
        m for m in manifest.modules if not (m.kind == "frontend" and m.name == name)
    ]
    manifest.modules.append(entry)
    return entry


def record_server(manifest: Manifest, name: str, route: str) -> bool:
    """Append a server entry unless one with the same name exists.

    Returns ``True`` when the entry was added.
    """
    if manifest.find(name, "server") is not None:
        return False
    manifest.modules.append(ManifestEntry(name=name, kind="server", route=route))
    return True
