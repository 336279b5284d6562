"""
Value-expression analysis.

Walks one prop value (and every value nested in it) and records what the
owning file needs in order to emit it: imports, handlers, refs, state
slots, GraphQL documents. Inline component trees are not analyzed here;
they are returned as :class:`NestedFileRequest` items for the builder's
work queue.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Tuple

from viewforge.constants import FileType
from viewforge.errors import ValueExpressionError
from viewforge.model.names import format_designed_component_name, format_mutation_name, format_query_name
from viewforge.model.normalizer import normalize_components
from viewforge.model.path import Path
from viewforge.model.schema import parse_component
from viewforge.model.types import (
    ComponentFile,
    HandlerDefinition,
    NestedFileRequest,
    Value,
    ValueSource,
)

from .builtins import is_builtin
from .common import (
    ACTION_LOGOUT,
    ACTION_METHOD,
    ACTION_MUTATION,
    ACTION_NAVIGATE,
    action_type,
    coerce_value,
    nested_static_values,
)

if TYPE_CHECKING:
    from viewforge.model.types import ProjectModel

logger = logging.getLogger(__name__)


def walk_value(
    value: Value,
    model: "ProjectModel",
    file: ComponentFile,
    path: Path,
) -> List[NestedFileRequest]:
    """Record the requirements of ``value`` into ``file``."""
    requests: List[NestedFileRequest] = []
    pending: List[Tuple[Value, Path]] = [(value, path)]

    while pending:
        current, current_path = pending.pop()
        source = current.source
        data = current.data

        if source is ValueSource.STATIC:
            nested = nested_static_values(current)
            pending.extend((item, current_path.extend(key)) for key, item in reversed(nested))

        elif source is ValueSource.DESIGNER:
            request = _designer_request(data, file, current_path)
            if request is not None:
                requests.append(request)

        elif source is ValueSource.STATE:
            _register_state(data, file, current_path)

        elif source is ValueSource.FUNCTION:
            args = _register_function(data, model, file)
            pending.extend(
                (coerce_value(arg), current_path.extend(name)) for name, arg in reversed(args)
            )

        elif source is ValueSource.ACTIONS:
            file.handlers[current_path.serialize()] = HandlerDefinition(
                path=current_path,
                actions=list(data.get("actions") or []),
            )
            nested_args = _register_actions(data, model, file, current_path)
            pending.extend(reversed(nested_args))

        elif source is ValueSource.ROUTE_PARAMS:
            file.need_route_params = True

        elif source is ValueSource.DATA:
            _require_graphql(model, "GraphQL data values")
            file.queries[format_query_name(current_path)] = str(data.get("query") or "")
            file.using_graphql = True

    return requests


def _designer_request(data, file: ComponentFile, path: Path):
    document = parse_component(data.get("component"))
    if document is None:
        return None
    name = format_designed_component_name(path)
    file.add_import_file(name)
    components = normalize_components(document)
    logger.debug("File %s spawns designed component %s", file.name, name)
    return NestedFileRequest(
        name=name,
        type=FileType.DESIGNED_COMPONENT,
        components=components,
        root_component_id=document.id,
        parent=file,
    )


def _register_state(data, file: ComponentFile, path: Path) -> None:
    target_id = data.get("componentId")
    slot = data.get("stateSlot")
    if target_id not in file.components:
        raise ValueExpressionError(
            f"State value at {path} refers to component {target_id}, which is not part of {file.name}"
        )
    if not slot:
        raise ValueExpressionError(f"State value at {path} has no state slot")
    file.add_active_state_slot(target_id, slot)
    file.add_prop_state(path.component_id, path.prop_name, system=path.is_system_prop)


def _register_function(data, model: "ProjectModel", file: ComponentFile):
    name = data.get("function")
    function_source = data.get("functionSource", "project")
    if function_source == "builtin":
        if not is_builtin(name):
            raise ValueExpressionError(f"Unknown builtin function '{name}'")
        file.add_builtin_function(name)
    else:
        if name not in model.functions:
            raise ValueExpressionError(f"Unknown project function '{name}'")
        file.add_project_function(name)
    return list((data.get("args") or {}).items())


def _register_actions(data, model: "ProjectModel", file: ComponentFile, path: Path):
    nested: List[Tuple[Value, Path]] = []
    for index, action in enumerate(data.get("actions") or []):
        kind = action_type(action)
        action_path = path.extend(index)

        if kind == ACTION_NAVIGATE:
            route_id = action.get("routeId")
            route = model.routes.get(route_id)
            if route is None:
                raise ValueExpressionError(f"Navigate action at {path} targets unknown route {route_id}")
            file.route_paths[route_id] = route.full_path
            file.add_helper("buildRoutePath")
            for name, param in (action.get("routeParams") or {}).items():
                nested.append((coerce_value(param), action_path.extend(name)))

        elif kind == ACTION_METHOD:
            target_id = action.get("componentId")
            if target_id not in file.components:
                raise ValueExpressionError(
                    f"Method action at {path} targets component {target_id} outside {file.name}"
                )
            file.add_ref(target_id)
            for arg_index, arg in enumerate(action.get("args") or []):
                nested.append((coerce_value(arg), action_path.extend(arg_index)))

        elif kind == ACTION_MUTATION:
            _require_graphql(model, "GraphQL mutations")
            file.mutations[format_mutation_name(action_path)] = str(action.get("mutation") or "")
            file.using_graphql = True
            for name, arg in (action.get("args") or {}).items():
                nested.append((coerce_value(arg), action_path.extend(name)))

        elif kind == ACTION_LOGOUT:
            file.add_helper("logout")

    return nested


def _require_graphql(model: "ProjectModel", what: str) -> None:
    if not model.using_graphql:
        raise ValueExpressionError(
            f"{what} require a GraphQL endpoint",
            hint="Set graphQLEndpointURL in the project document.",
        )


__all__ = ["walk_value"]
