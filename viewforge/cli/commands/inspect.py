"""
Inspect command implementation.

Builds the project model without generating anything and prints a JSON
summary of routes, files and redirects.
"""

import argparse
from pathlib import Path
from typing import Any, Dict

from viewforge.errors import ViewForgeError
from viewforge.model.builder import build_model
from viewforge.model.schema import load_project_file
from viewforge.model.types import ProjectModel

from ..errors import handle_cli_exception
from ..output import print_json
from .build import resolve_meta


def summarize_model(model: ProjectModel) -> Dict[str, Any]:
    routes = []
    for route in model.routes.values():
        routes.append(
            {
                "id": route.id,
                "path": route.full_path,
                "file": route.file.name if route.file else None,
                "indexFile": route.index_file.name if route.index_file else None,
                "children": list(route.children),
            }
        )

    files = []
    for file in model.iter_files():
        files.append(
            {
                "name": file.name,
                "type": file.type.value,
                "routeId": file.route_id,
                "components": len(file.components),
                "handlers": list(file.handlers),
                "nested": [nested.name for nested in file.nested_files],
                "usingReactRouter": file.using_react_router,
                "usingGraphQL": file.using_graphql,
            }
        )

    return {
        "name": model.project.name,
        "usingGraphQL": model.using_graphql,
        "routes": routes,
        "files": files,
        "redirects": [
            {"kind": rule.kind.value, "from": rule.from_path, "to": rule.to_path}
            for rule in model.redirects
        ],
    }


def cmd_inspect(args: argparse.Namespace) -> None:
    """Handle the 'inspect' subcommand."""
    try:
        project = load_project_file(Path(args.project))
        model = build_model(project, resolve_meta(args.config_data, args))
    except (ViewForgeError, OSError) as exc:
        handle_cli_exception(exc, verbose=args.verbose)
        return

    print_json(summarize_model(model))
