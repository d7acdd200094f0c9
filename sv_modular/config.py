"""sv-modular configuration.

Typed configuration for a single CLI invocation. All settings use Pydantic v2
models so they are validated at construction time, and every on-disk location
the generators touch is derived from the project root here rather than being
assembled ad hoc in each generator.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Where a SvelteKit project keeps its modules, routes and bookkeeping.

    Instances are created once by the CLI (or by tests) and passed to the
    generators.
    """

    project_root: Path = Field(default=Path("."))
    source_dir: str = Field(default="src", min_length=1)
    manifest_name: str = Field(default="module.json", min_length=1)
    log_name: str = Field(default="module.log", min_length=1)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def source_path(self) -> Path:
        """Root of the SvelteKit ``src/`` tree."""
        return self.project_root / self.source_dir

    @property
    def modules_path(self) -> Path:
        """Directory holding every generated module (``src/lib/modules``)."""
        return self.source_path / "lib" / "modules"

    @property
    def helpers_path(self) -> Path:
        """Shared helpers directory (``src/lib/helpers``)."""
        return self.source_path / "lib" / "helpers"

    @property
    def response_helper_path(self) -> Path:
        """The shared JSON response helper used by every API module."""
        return self.helpers_path / "response.ts"

    @property
    def routes_path(self) -> Path:
        """SvelteKit page route tree (``src/routes``)."""
        return self.source_path / "routes"

    @property
    def api_routes_path(self) -> Path:
        """SvelteKit API route tree (``src/routes/api``)."""
        return self.routes_path / "api"

    @property
    def manifest_path(self) -> Path:
        """Path to ``module.json``."""
        return self.project_root / self.manifest_name

    @property
    def log_path(self) -> Path:
        """Path to ``module.log``."""
        return self.project_root / self.log_name

    def relative(self, path: Path) -> str:
        """Render *path* relative to the project root, with forward slashes."""
        try:
            return path.relative_to(self.project_root).as_posix()
        except ValueError:
            return path.as_posix()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, project_root: str | Path | None = None) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SV_MODULAR_ROOT, SV_MODULAR_SOURCE_DIR, SV_MODULAR_MANIFEST,
            SV_MODULAR_LOG.

        An explicit *project_root* wins over ``SV_MODULAR_ROOT``.
        """
        root = project_root or os.environ.get("SV_MODULAR_ROOT") or "."
        return cls(
            project_root=Path(root),
            source_dir=os.environ.get("SV_MODULAR_SOURCE_DIR", "src"),
            manifest_name=os.environ.get("SV_MODULAR_MANIFEST", "module.json"),
            log_name=os.environ.get("SV_MODULAR_LOG", "module.log"),
        )
