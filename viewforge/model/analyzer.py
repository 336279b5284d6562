"""
File Analyzer.

Walks one file's component subtree in preorder (parent before children,
children in declared order) and accumulates every requirement needed to
emit that file. Inline designed components discovered in prop values are
returned as requests instead of being analyzed re-entrantly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterator, List

from viewforge.constants import INVALID_ID, FileType
from viewforge.errors import OutletPlacementError
from viewforge.values.walker import walk_value

from .components import ComponentKind, split_component_name
from .names import format_route_component_name, format_route_index_component_name
from .path import Path
from .types import Component, ComponentFile, NestedFileRequest, ValueSource

if TYPE_CHECKING:
    from .types import ProjectModel

logger = logging.getLogger(__name__)


def create_file(file_type: FileType, name: str, route_id: int = INVALID_ID) -> ComponentFile:
    return ComponentFile(type=file_type, name=name, route_id=route_id)


def walk_components_tree(components: Dict[int, Component], root_id: int) -> Iterator[Component]:
    """Yield the subtree rooted at ``root_id`` in preorder."""
    if root_id == INVALID_ID or root_id not in components:
        return
    stack = [root_id]
    while stack:
        component = components[stack.pop()]
        yield component
        stack.extend(reversed(component.children))


def reachable_components(components: Dict[int, Component], root_id: int) -> Dict[int, Component]:
    return {component.id: component for component in walk_components_tree(components, root_id)}


def collect_file_data(
    model: "ProjectModel",
    file: ComponentFile,
    components: Dict[int, Component],
    root_component_id: int,
) -> List[NestedFileRequest]:
    """
    Populate ``file`` from the subtree rooted at ``root_component_id``.

    Args:
        model: Project model under construction (routes already normalized)
        file: Freshly created file record
        components: Id-indexed component map containing the subtree
        root_component_id: Root of this file's subtree, may be ``INVALID_ID``

    Returns:
        Nested DESIGNED_COMPONENT file requests in discovery order

    Raises:
        OutletPlacementError: If an Outlet appears outside a ROUTE file
    """
    file.components = reachable_components(components, root_component_id)
    file.root_component_id = root_component_id
    requests: List[NestedFileRequest] = []

    for component in walk_components_tree(file.components, root_component_id):
        if component.kind is ComponentKind.GENERIC:
            file.add_import_component(component.namespace, component.local_name)
        elif component.kind is ComponentKind.OUTLET:
            _register_outlet(model, file)
        elif component.kind is ComponentKind.LIST:
            _register_list_item(component, file)

        if component.style:
            file.css[component.id] = component.style

        for prop_name, value in component.props.items():
            requests.extend(walk_value(value, model, file, Path.for_prop(component.id, prop_name)))

        for prop_name, value in component.system_props.items():
            requests.extend(
                walk_value(value, model, file, Path.for_prop(component.id, prop_name, system=True))
            )

    logger.debug(
        "Analyzed %s: %d components, %d handlers, %d nested files",
        file.name,
        len(file.components),
        len(file.handlers),
        len(requests),
    )
    return requests


def _register_list_item(component: Component, file: ComponentFile) -> None:
    value = component.props.get("component")
    if value is None or value.source is not ValueSource.STATIC:
        return
    namespace, name = split_component_name(str(value.data.get("value") or ""))
    if namespace:
        file.add_import_component(namespace, name)


def _register_outlet(model: "ProjectModel", file: ComponentFile) -> None:
    if file.type is not FileType.ROUTE:
        raise OutletPlacementError(f"Found Outlet in a non-route file: {file.name}")

    route = model.routes[file.route_id]
    if not route.children and not route.have_index:
        return

    file.using_react_router = True
    for child_id in route.children:
        file.add_import_file(format_route_component_name(model.routes[child_id]))
    if route.have_index:
        file.add_import_file(format_route_index_component_name(route))


__all__ = ["create_file", "walk_components_tree", "reachable_components", "collect_file_data"]
