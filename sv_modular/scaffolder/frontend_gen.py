"""Frontend module generation (``sv-modular create``).

Generates, for a module named ``user-profile``:

- ``src/lib/modules/user-profile/{types,store,service,values}.ts``
- ``src/lib/modules/user-profile/UserProfilePage.svelte``
- ``src/lib/modules/user-profile/components/`` (empty)
- ``src/routes/<route>/+page.svelte`` rendering the page component

The route defaults to the module name and can be overridden.
"""

from __future__ import annotations

from typing import Any

from sv_modular.errors import InvalidModuleNameError
from sv_modular.manifest import Manifest, record_frontend
from sv_modular.naming import to_kebab, to_pascal
from sv_modular.scaffolder.generator import ModuleGenerator, ModulePlan
from sv_modular.scaffolder.writer import FilePlan, WriteResult

_MODULE_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("frontend/store.ts.j2", "store.ts"),
    ("frontend/types.ts.j2", "types.ts"),
    ("frontend/service.ts.j2", "service.ts"),
    ("frontend/values.ts.j2", "values.ts"),
)


def normalize_route(route: str) -> str:
    """Drop empty segments; ``"/admin//users/"`` -> ``"admin/users"``."""
    return "/".join(part for part in route.split("/") if part.strip() != "")


class FrontendModuleGenerator(ModuleGenerator):
    """Generates a page + writable-store counter module."""

    kind = "frontend"

    def plan(self, raw: str, route: str | None = None, **_: Any) -> ModulePlan:
        name = to_kebab(raw)
        if not name:
            raise InvalidModuleNameError(raw)

        route_path = normalize_route(route) if route else name
        page_name = f"{to_pascal(name)}Page"

        context = {
            "name": name,
            "page_name": page_name,
            "route_path": route_path,
        }

        module_path = self.config.modules_path / name
        route_dir = self.config.routes_path / route_path if route_path else self.config.routes_path

        files = FilePlan(self.config.project_root)
        files.add_directory(self.relative(module_path / "components"))
        for template, filename in _MODULE_TEMPLATES:
            self.stage(files, template, module_path / filename, context)
        self.stage(files, "frontend/page.svelte.j2", module_path / f"{page_name}.svelte", context)
        self.stage(files, "frontend/route_page.svelte.j2", route_dir / "+page.svelte", context)

        return ModulePlan(
            kind="frontend",
            name=name,
            route=route_path,
            module_path=module_path,
            files=files,
            context=context,
        )

    def record(self, manifest: Manifest, plan: ModulePlan) -> bool:
        record_frontend(manifest, plan.name, plan.route)
        return True

    def log_messages(self, plan: ModulePlan, written: WriteResult) -> list[str]:
        return [f"Created module: {plan.name} | route: {plan.route}"]
