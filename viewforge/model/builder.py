"""
Model Builder.

Drives normalization and analysis across every route and produces the
read-only :class:`ProjectModel` consumed by code generation. Designed
components found inside prop values are resolved through an explicit
work queue so that the order in which files are created stays inspectable.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Dict, List, Optional, Union

from viewforge.constants import FileType

from .analyzer import collect_file_data, create_file
from .names import format_route_component_name, format_route_index_component_name
from .normalizer import normalize_routes
from .schema import ProjectDocument, parse_project
from .types import NestedFileRequest, ProjectModel, RedirectKind, RedirectRule, Route

logger = logging.getLogger(__name__)


def build_model(
    project: Union[ProjectDocument, Dict[str, Any]],
    meta: Optional[Dict[str, str]] = None,
) -> ProjectModel:
    """
    Build the project model from a project document.

    Args:
        project: Validated project document or its raw mapping
        meta: Optional namespace -> import module overrides for component
            libraries; merged over the project's own ``libraries`` table

    Returns:
        Fully analyzed project model
    """
    document = parse_project(project)
    libraries = dict(document.libraries)
    libraries.update(meta or {})

    model = ProjectModel(
        project=document,
        meta=libraries,
        routes=normalize_routes(document.routes),
        root_routes=[route.id for route in document.routes],
        functions=dict(document.functions),
        using_graphql=bool(document.graph_ql_endpoint_url),
    )

    queue: Deque[NestedFileRequest] = deque()
    all_route_paths = model.route_paths()

    for route in model.routes.values():
        route_file = create_file(FileType.ROUTE, format_route_component_name(route), route.id)
        route_file.route_paths.update(all_route_paths)
        queue.extend(collect_file_data(model, route_file, route.components, route.root_component_id))
        route.file = route_file
        model.files.append(route_file)

        if route.have_index:
            index_file = create_file(FileType.ROUTE_INDEX, format_route_index_component_name(route), route.id)
            queue.extend(collect_file_data(model, index_file, route.components, route.index_component_id))
            route.index_file = index_file
            model.files.append(index_file)

        model.redirects.extend(_redirect_rules(route))

    _resolve_nested_files(model, queue)

    logger.info(
        "Built model: %d routes, %d files, %d redirects",
        len(model.routes),
        sum(1 for _ in model.iter_files()),
        len(model.redirects),
    )
    return model


def _resolve_nested_files(model: ProjectModel, queue: Deque[NestedFileRequest]) -> None:
    while queue:
        request = queue.popleft()
        nested = create_file(request.type, request.name, request.parent.route_id)
        # Any designed component may navigate, so it is always router-aware.
        nested.using_react_router = True
        queue.extend(collect_file_data(model, nested, request.components, request.root_component_id))
        request.parent.nested_files.append(nested)


def _redirect_rules(route: Route) -> List[RedirectRule]:
    rules: List[RedirectRule] = []
    if route.redirect:
        rules.append(RedirectRule(RedirectKind.UNCONDITIONAL, route.id, route.full_path, route.redirect_to))
    if route.redirect_authenticated:
        rules.append(
            RedirectRule(RedirectKind.AUTHENTICATED, route.id, route.full_path, route.redirect_authenticated_to)
        )
    if route.redirect_anonymous:
        rules.append(
            RedirectRule(RedirectKind.ANONYMOUS, route.id, route.full_path, route.redirect_anonymous_to)
        )
    return rules


def count_files(model: ProjectModel, file_type: FileType) -> int:
    return sum(1 for file in model.iter_files() if file.type is file_type)


__all__ = ["build_model", "count_files"]