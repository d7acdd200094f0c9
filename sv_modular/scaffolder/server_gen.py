"""Backend module generation (``sv-modular create-server``).

For ``bands/linkinpark/song`` this generates:

- ``src/lib/modules/bands/linkinpark/song/{types,values,services}.ts`` and
  ``spec.md``
- ``src/routes/api/bands/linkinpark/songs/+server.ts`` (list, create)
- ``src/routes/api/bands/linkinpark/songs/[id]/+server.ts`` (detail,
  update, delete)
- ``src/lib/helpers/response.ts``, only when the project does not have one

Only the leaf of the API route is pluralized; the module directory keeps the
path as given.
"""

from __future__ import annotations

from typing import Any

from sv_modular.manifest import Manifest, record_server
from sv_modular.naming import describe_route, parse_module_path
from sv_modular.runtime.store import build_seed_records
from sv_modular.scaffolder.generator import ModuleGenerator, ModulePlan
from sv_modular.scaffolder.writer import FilePlan, WriteResult

_MODULE_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("server/types.ts.j2", "types.ts"),
    ("server/values.ts.j2", "values.ts"),
    ("server/services.ts.j2", "services.ts"),
    ("server/spec.md.j2", "spec.md"),
)

HELPER_LOG_MESSAGE = "Created response helper"


class ServerModuleGenerator(ModuleGenerator):
    """Generates a typed, in-memory CRUD API module."""

    kind = "server"

    def plan(self, raw: str, **_: Any) -> ModulePlan:
        module = parse_module_path(raw)
        route = describe_route(module)

        context = {
            "name": module.name,
            "folder_path": module.folder_path,
            "route_path": route.route_path,
            "plural_segment": route.plural_segment,
            "seeds": [record.model_dump() for record in build_seed_records(module.name)],
        }

        module_path = self.config.modules_path.joinpath(*module.segments)
        route_dir = self.config.api_routes_path.joinpath(*route.route_path.split("/"))

        files = FilePlan(self.config.project_root)
        self.stage(
            files,
            "server/response.ts.j2",
            self.config.response_helper_path,
            context,
            skip_if_exists=True,
        )
        for template, filename in _MODULE_TEMPLATES:
            self.stage(files, template, module_path / filename, context)
        self.stage(files, "server/list_server.ts.j2", route_dir / "+server.ts", context)
        self.stage(files, "server/detail_server.ts.j2", route_dir / "[id]" / "+server.ts", context)

        return ModulePlan(
            kind="server",
            name=module.folder_path,
            route=f"api/{route.route_path}",
            module_path=module_path,
            files=files,
            context=context,
        )

    def record(self, manifest: Manifest, plan: ModulePlan) -> bool:
        return record_server(manifest, plan.name, plan.route)

    def log_messages(self, plan: ModulePlan, written: WriteResult) -> list[str]:
        messages: list[str] = []
        if self.config.response_helper_path in written.written:
            messages.append(HELPER_LOG_MESSAGE)
        messages.append(f"Generated module: {plan.name}")
        return messages
