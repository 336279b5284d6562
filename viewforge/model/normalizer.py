"""
Model Normalizer.

Flattens the nested route/component documents into id-indexed maps. Both
traversals are iterative preorder walks over an explicit stack, so deep
trees never hit the interpreter recursion limit.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from viewforge.constants import INVALID_ID
from viewforge.errors import ModelError, ValueExpressionError

from .components import parse_component_name
from .schema import ComponentDocument, RouteDocument, ValueDocument
from .types import ALWAYS_VISIBLE, Component, Route, Value, ValueSource

logger = logging.getLogger(__name__)


def concat_path(prefix: str, path: str) -> str:
    """Join a parent's full path with a child segment."""
    if prefix == "":
        return path
    if prefix == "/":
        return f"/{path}"
    return f"{prefix}/{path}"


def convert_value(document: ValueDocument) -> Value:
    try:
        source = ValueSource(document.source)
    except ValueError:
        raise ValueExpressionError(f"Unknown value source '{document.source}'") from None
    return Value(source=source, data=dict(document.source_data))


def _convert_props(props: Dict[str, ValueDocument]) -> Dict[str, Value]:
    return {name: convert_value(value) for name, value in props.items()}


def normalize_components(
    root: Optional[ComponentDocument],
    accumulator: Optional[Dict[int, Component]] = None,
    parent_id: int = INVALID_ID,
) -> Dict[int, Component]:
    """
    Flatten one component tree into ``accumulator`` and return it.

    A ``None`` root contributes nothing. Entries are inserted in preorder,
    parents before children, siblings in declared order.
    """
    if accumulator is None:
        accumulator = {}
    if root is None:
        return accumulator

    stack: List[Tuple[ComponentDocument, int]] = [(root, parent_id)]
    while stack:
        document, owner_id = stack.pop()
        if document.id in accumulator:
            raise ModelError(f"Duplicate component id {document.id} ({document.name})")
        parsed = parse_component_name(document.name)
        system_props = _convert_props(document.system_props)
        system_props.setdefault("visible", ALWAYS_VISIBLE)
        accumulator[document.id] = Component(
            id=document.id,
            name=document.name,
            namespace=parsed.namespace,
            local_name=parsed.name,
            kind=parsed.kind,
            parent_id=owner_id,
            children=[child.id for child in document.children],
            props=_convert_props(document.props),
            system_props=system_props,
            style=dict(document.style) if document.style else None,
        )
        for child in reversed(document.children):
            stack.append((child, document.id))

    return accumulator


def normalize_routes(
    routes: Iterable[RouteDocument],
    accumulator: Optional[Dict[int, Route]] = None,
    current_full_path: str = "",
    parent_id: int = INVALID_ID,
) -> Dict[int, Route]:
    """
    Flatten the nested route documents into ``accumulator`` keyed by route id.

    Each route's ``components`` map merges its root and index subtrees.
    """
    if accumulator is None:
        accumulator = {}

    stack: List[Tuple[RouteDocument, str, int]] = [
        (route, current_full_path, parent_id) for route in reversed(list(routes))
    ]
    while stack:
        document, prefix, owner_id = stack.pop()
        if document.id in accumulator:
            raise ModelError(f"Duplicate route id {document.id} ({document.path!r})")
        full_path = concat_path(prefix, document.path)

        components: Dict[int, Component] = {}
        normalize_components(document.component, components)
        normalize_components(document.index_component, components)

        accumulator[document.id] = Route(
            id=document.id,
            path=document.path,
            full_path=full_path,
            parent_id=owner_id,
            children=[child.id for child in document.children],
            components=components,
            root_component_id=document.component.id if document.component is not None else INVALID_ID,
            index_component_id=(
                document.index_component.id if document.index_component is not None else INVALID_ID
            ),
            have_index=document.have_index,
            redirect=document.redirect,
            redirect_to=document.redirect_to,
            redirect_authenticated=document.redirect_authenticated,
            redirect_authenticated_to=document.redirect_authenticated_to,
            redirect_anonymous=document.redirect_anonymous,
            redirect_anonymous_to=document.redirect_anonymous_to,
        )
        logger.debug("Normalized route %s (%s), %d components", document.id, full_path, len(components))

        for child in reversed(document.children):
            stack.append((child, full_path, document.id))

    return accumulator


__all__ = ["concat_path", "convert_value", "normalize_components", "normalize_routes"]
