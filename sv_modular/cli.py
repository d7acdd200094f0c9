"""Command-line entry point.

Usage::

    sv-modular create user-profile
    sv-modular create "User Profile" --route account/profile
    sv-modular create-server bands/linkinpark/song
    sv-modular init --name my-app
    sv-modular preview bands/linkinpark/song --address "city 2"

Exit codes: ``0`` on success, ``1`` on usage errors and refused generations.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from rich.markup import escape

from sv_modular import __version__
from sv_modular.config import Config
from sv_modular.errors import ScaffoldError
from sv_modular.manifest import init_manifest
from sv_modular.naming import describe_route, parse_module_path
from sv_modular.runtime import RecordStore, ResourceService
from sv_modular.scaffolder import (
    FrontendModuleGenerator,
    GenerationResult,
    ServerModuleGenerator,
)
from sv_modular.utils import (
    console,
    print_checklist,
    print_error,
    print_records_table,
    print_success,
    print_summary_table,
)

RECORD_COLUMNS = ["id", "name", "email", "address", "age"]


class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print_error(f"Error: {message}")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_create(config: Config, args: argparse.Namespace) -> int:
    console.print(f"\n[cyan]Generating frontend module:[/cyan] [bold]{escape(args.name)}[/bold]")
    result = FrontendModuleGenerator(config).generate(args.name, route=args.route)
    page_name = result.context["page_name"]
    print_checklist([
        f"Module created: {result.name}",
        f"Page component: {page_name}.svelte",
        f"Route generated: /{result.route}",
        f"Logged to {config.log_name}",
        f"Updated {config.manifest_name}",
    ])
    return 0


def _cmd_create_server(config: Config, args: argparse.Namespace) -> int:
    result = ServerModuleGenerator(config).generate(args.path)
    print_success(f"Module '{result.name}' created successfully.")
    print_summary_table(
        {
            "Module": config.relative(result.module_path),
            "Routes": f"/{result.route}, /{result.route}/[id]",
            "Response helper": "already present, left untouched" if result.skipped else "created",
            config.manifest_name: (
                "updated" if result.manifest_updated else f"already lists '{result.name}'"
            ),
            "Files written": str(len(result.written)),
        },
        title="create-server",
    )
    _print_written(config, result)
    return 0


def _cmd_init(config: Config, args: argparse.Namespace) -> int:
    manifest = init_manifest(config, args.name)
    print_success(f"Created {config.manifest_name} for '{manifest.name}'")
    return 0


def _cmd_preview(config: Config, args: argparse.Namespace) -> int:
    module = parse_module_path(args.path)
    route = describe_route(module)
    service = ResourceService(module.name, RecordStore.seeded(module.name))
    response = service.list_records(address=args.address, age=args.age, search=args.search)
    print_records_table(
        response.data,
        RECORD_COLUMNS,
        title=f"GET /api/{route.route_path} ({len(response.data)} of {len(service.store)})",
    )
    return 0


def _print_written(config: Config, result: GenerationResult) -> None:
    for path in result.written:
        console.print(f"    {config.relative(path)}", style="dim", markup=False, highlight=False)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sv-modular",
        description="Module generator for SvelteKit modular architecture",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  sv-modular create user-profile\n"
            "  sv-modular create user-profile --route account/profile\n"
            "  sv-modular create-server bands/linkinpark/song\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--root", "-C",
        default=None,
        help="Project root (default: $SV_MODULAR_ROOT or the current directory)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    create = subparsers.add_parser(
        "create", help="Generate a frontend module (page, store, service)"
    )
    create.add_argument("name", help="Module name, normalized to kebab-case")
    create.add_argument("--route", "-r", default=None, help="Custom route path")
    create.set_defaults(handler=_cmd_create)

    create_server = subparsers.add_parser(
        "create-server", help="Generate a backend module (API routes, services, types)"
    )
    create_server.add_argument("path", help="Module path, e.g. barcelona/player")
    create_server.set_defaults(handler=_cmd_create_server)

    init = subparsers.add_parser("init", help="Create an empty module.json")
    init.add_argument("--name", default=None, help="Project name (default: root folder name)")
    init.set_defaults(handler=_cmd_init)

    preview = subparsers.add_parser(
        "preview", help="Show what a server module's list endpoint returns on fresh seed data"
    )
    preview.add_argument("path", help="Module path, e.g. barcelona/player")
    preview.add_argument("--address", default=None, help="Exact address (case-insensitive)")
    preview.add_argument("--age", default=None, help="Exact age")
    preview.add_argument("--search", "-s", default=None, help="Substring of the name")
    preview.set_defaults(handler=_cmd_preview)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``sv-modular`` and ``python -m sv_modular``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = Config.from_env(args.root)

    try:
        return args.handler(config, args)
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
