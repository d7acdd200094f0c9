"""Shared orchestration for module generators.

Every generator follows the same sequence:

1. derive names and target paths from the raw CLI input (``plan``),
2. guard: abort when the module directory already exists,
3. load the manifest and abort when it is corrupt,
4. commit the staged files all-or-nothing,
5. record the module in the manifest and rewrite it,
6. append to the activity log.

Steps 2-3 run before anything touches disk, so a refused invocation leaves
the project exactly as it was.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sv_modular.activity_log import append_log
from sv_modular.config import Config
from sv_modular.errors import ModuleExistsError
from sv_modular.manifest import Manifest, ModuleKind, load_manifest, save_manifest
from sv_modular.scaffolder.templates import TemplateRenderer
from sv_modular.scaffolder.writer import FilePlan, WriteResult


class ModulePlan(BaseModel):
    """Everything a generator decided before writing."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: ModuleKind
    name: str
    route: str
    module_path: Path
    files: FilePlan
    context: dict[str, Any] = Field(default_factory=dict)


class GenerationResult(BaseModel):
    """Summary of one successful generation, used for console output."""

    kind: ModuleKind
    name: str
    route: str
    module_path: Path
    written: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)
    manifest_updated: bool = False
    log_lines: list[str] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict)


class ModuleGenerator:
    """Base class; subclasses implement :meth:`plan` and the record/log hooks."""

    kind: ModuleKind

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, raw: str, **options: Any) -> GenerationResult:
        """Generate the module described by *raw*.

        Raises:
            ScaffoldError: On invalid input, an existing module, an occupied
                target file, or a corrupt manifest.  Nothing is written.
            OSError: If writing fails midway.  Partial output is rolled back
                whatever the exception.
        """
        plan = self.plan(raw, **options)

        if plan.module_path.exists():
            raise ModuleExistsError(plan.name, plan.module_path)

        manifest = load_manifest(self.config.manifest_path).require(
            self.config.manifest_path
        )

        written = plan.files.commit()

        updated = self.record(manifest, plan)
        if updated:
            save_manifest(manifest, self.config.manifest_path)

        log_lines = [
            append_log(self.config.log_path, message)
            for message in self.log_messages(plan, written)
        ]

        return GenerationResult(
            kind=plan.kind,
            name=plan.name,
            route=plan.route,
            module_path=plan.module_path,
            written=written.written,
            skipped=written.skipped,
            manifest_updated=updated,
            log_lines=log_lines,
            context=plan.context,
        )

    # -- Hooks -------------------------------------------------------------

    def plan(self, raw: str, **options: Any) -> ModulePlan:
        raise NotImplementedError

    def record(self, manifest: Manifest, plan: ModulePlan) -> bool:
        """Add *plan* to *manifest*; return whether the manifest changed."""
        raise NotImplementedError

    def log_messages(self, plan: ModulePlan, written: WriteResult) -> list[str]:
        raise NotImplementedError

    # -- Helpers -----------------------------------------------------------

    def relative(self, path: Path) -> str:
        return self.config.relative(path)

    def stage(
        self,
        files: FilePlan,
        template: str,
        target: Path,
        context: dict[str, Any],
        *,
        skip_if_exists: bool = False,
    ) -> None:
        """Render *template* and stage it at *target*."""
        files.add(
            self.relative(target),
            self.renderer.render(template, context),
            skip_if_exists=skip_if_exists,
        )
