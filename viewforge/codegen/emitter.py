"""
Tree lowering.

Turns a file's component subtree into an output element tree. Lowering is
a pure function of ``(file, model)``: it reads the requirements recorded
by the analyzer and never mutates them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from viewforge.constants import FileType
from viewforge.errors import OutletPlacementError, UnknownPseudoComponentError
from viewforge.model.components import ComponentKind, split_component_name
from viewforge.model.names import (
    format_component_save_ref_method_name,
    format_component_state_slot_key,
    format_designed_component_name,
    format_state_key_for_prop,
    format_style_class_name,
)
from viewforge.model.path import Path
from viewforge.model.types import ALWAYS_VISIBLE, Component, ComponentFile, ValueSource
from viewforge.values.lowering import append_class_name, lower_value

from .jsx import (
    ArrowFunctionExpression,
    CallExpression,
    Expression,
    Identifier,
    JSXAttribute,
    JSXChild,
    JSXElement,
    JSXExpressionContainer,
    JSXText,
    LogicalExpression,
    StringLiteral,
    is_constant,
    is_true_literal,
    member_chain,
    state_accessor,
    this_member,
)

if TYPE_CHECKING:
    from viewforge.model.types import ProjectModel

logger = logging.getLogger(__name__)

Lowered = Optional[Expression]


def generate_jsx_ast(file: ComponentFile, model: "ProjectModel") -> Lowered:
    """Lower the file's root component; ``None`` means the file renders nothing."""
    root = file.root_component
    if root is None:
        return None
    return _lower_component(root, file, model)


def _lower_component(component: Component, file: ComponentFile, model: "ProjectModel"):
    is_root = component.id == file.root_component_id
    kind = component.kind

    if kind is ComponentKind.TEXT:
        return _lower_text(component, file, model, wrap=not is_root)
    if kind is ComponentKind.LIST:
        return _lower_list(component, file, model, wrap=not is_root)
    if kind is ComponentKind.OUTLET:
        return _lower_outlet(file, model)
    if kind is ComponentKind.UNKNOWN_PSEUDO:
        raise UnknownPseudoComponentError(f"Unknown pseudo-component: {component.local_name}")

    element = _lower_element(component, file, model)
    return _wrap_visibility(component, element, file, model, is_root)


# =============================================================================
# Pseudo-components
# =============================================================================


def _lower_text(component: Component, file: ComponentFile, model: "ProjectModel", *, wrap: bool):
    value = component.props.get("text")
    if value is None:
        return None

    expression = lower_value(value, model, file, Path.for_prop(component.id, "text"))
    if not wrap:
        return expression
    if isinstance(expression, StringLiteral):
        return JSXText(expression.value)
    return JSXExpressionContainer(expression)


def _list_item_component_name(component: Component) -> Optional[str]:
    value = component.props["component"]
    if value.source is ValueSource.DESIGNER:
        if value.data.get("component") is None:
            return None
        return format_designed_component_name(Path.for_prop(component.id, "component"))
    name = value.data.get("value")
    if not isinstance(name, str) or not name:
        return None
    return split_component_name(name)[1]


def _lower_list(component: Component, file: ComponentFile, model: "ProjectModel", *, wrap: bool):
    if "data" not in component.props or "component" not in component.props:
        return None
    item_component_name = _list_item_component_name(component)
    if item_component_name is None:
        return None

    data = lower_value(component.props["data"], model, file, Path.for_prop(component.id, "data"))

    # data.map((item, idx) => <ItemComponent key={idx} item={item} />)
    item_element = JSXElement(
        item_component_name,
        (
            JSXAttribute("key", JSXExpressionContainer(Identifier("idx"))),
            JSXAttribute("item", JSXExpressionContainer(Identifier("item"))),
        ),
    )
    expression = CallExpression(
        member_chain(data, "map"),
        (ArrowFunctionExpression((Identifier("item"), Identifier("idx")), item_element),),
    )
    return JSXExpressionContainer(expression) if wrap else expression


def _route_element(path: str, component_name: str, *, exact: bool = False) -> JSXElement:
    attributes: List[JSXAttribute] = [JSXAttribute("path", StringLiteral(path))]
    if exact:
        attributes.append(JSXAttribute("exact"))
    attributes.append(JSXAttribute("component", JSXExpressionContainer(Identifier(component_name))))
    return JSXElement("Route", tuple(attributes))


def _lower_outlet(file: ComponentFile, model: "ProjectModel") -> Optional[JSXElement]:
    if file.type is not FileType.ROUTE:
        raise OutletPlacementError(f"Found Outlet in a non-route file: {file.name}")

    route = model.routes[file.route_id]
    if not route.children and not route.have_index:
        return None

    entries: List[JSXElement] = []
    if route.have_index and route.index_file is not None:
        entries.append(_route_element(route.full_path, route.index_file.name, exact=True))
    for child_id in route.children:
        child_route = model.routes[child_id]
        entries.append(_route_element(child_route.full_path, child_route.file.name))

    return JSXElement("Switch", (), tuple(entries))


# =============================================================================
# Generic elements
# =============================================================================


def _attribute(name: str, expression: Expression) -> JSXAttribute:
    if isinstance(expression, StringLiteral):
        return JSXAttribute(name, expression)
    return JSXAttribute(name, JSXExpressionContainer(expression))


def _lower_prop(
    component: Component,
    prop_name: str,
    file: ComponentFile,
    model: "ProjectModel",
) -> JSXAttribute:
    if file.is_prop_from_state(component.id, prop_name):
        state_key = format_state_key_for_prop(component, prop_name, False)
        return JSXAttribute(prop_name, JSXExpressionContainer(state_accessor(state_key)))

    path = Path.for_prop(component.id, prop_name)
    expression = lower_value(component.props[prop_name], model, file, path)

    if prop_name == "className" and component.id in file.css:
        class_name = format_style_class_name(file.name, component.id)
        if isinstance(expression, StringLiteral):
            expression = StringLiteral(" ".join(part for part in (expression.value, class_name) if part))
        else:
            expression = append_class_name(expression, class_name)

    return _attribute(prop_name, expression)


def _lower_element(component: Component, file: ComponentFile, model: "ProjectModel") -> JSXElement:
    attributes = [_lower_prop(component, prop_name, file, model) for prop_name in component.props]

    if component.id in file.css and "className" not in component.props:
        attributes.append(JSXAttribute("className", StringLiteral(format_style_class_name(file.name, component.id))))

    if component.id in file.refs:
        method_name = format_component_save_ref_method_name(component)
        attributes.append(JSXAttribute("ref", JSXExpressionContainer(this_member(method_name))))

    for slot_name in file.active_state_slots.get(component.id, ()):
        state_key = format_component_state_slot_key(component, slot_name)
        attributes.append(JSXAttribute(slot_name, JSXExpressionContainer(state_accessor(state_key))))

    children: List[JSXChild] = []
    for child_id in component.children:
        child = _lower_component(file.components[child_id], file, model)
        if child is not None:
            children.append(child)

    return JSXElement(component.local_name, tuple(attributes), tuple(children))


def _wrap_visibility(
    component: Component,
    element: JSXElement,
    file: ComponentFile,
    model: "ProjectModel",
    is_root: bool,
):
    # The root is rendered whenever the file is, so it is never guarded.
    if is_root:
        return element

    if file.is_prop_from_state(component.id, "visible", system=True):
        condition: Expression = state_accessor(format_state_key_for_prop(component, "visible", True))
        return JSXExpressionContainer(LogicalExpression("&&", condition, element))

    visible = component.system_props.get("visible", ALWAYS_VISIBLE)
    condition = lower_value(visible, model, file, Path.for_prop(component.id, "visible", system=True))

    if is_true_literal(condition):
        return element
    if is_constant(condition):
        if getattr(condition, "value", None):
            return element
        logger.debug("Dropping component %s of %s: never visible", component.id, file.name)
        return None
    return JSXExpressionContainer(LogicalExpression("&&", condition, element))


__all__ = ["generate_jsx_ast"]
