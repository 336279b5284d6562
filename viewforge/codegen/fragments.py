"""
Source fragments spliced into component files by the assembler.

Each generator reads the requirements the analyzer recorded on a file and
returns ready-to-insert source lines: import declarations, handler methods
and their constructor bindings, initial state, and ref plumbing.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from viewforge.constants import FileType
from viewforge.model.names import (
    format_component_ref_name,
    format_component_save_ref_method_name,
    format_component_state_slot_key,
    format_graphql_constant_name,
    format_handler_method_name,
    format_mutation_name,
    format_state_key_for_prop,
)
from viewforge.model.path import Path
from viewforge.model.types import ComponentFile, HandlerDefinition, ValueSource
from viewforge.values.common import (
    ACTION_LOGOUT,
    ACTION_METHOD,
    ACTION_MUTATION,
    ACTION_NAVIGATE,
    ACTION_URL,
    coerce_value,
)
from viewforge.values.lowering import lower_value

from .jsx import NullLiteral
from .printer import indent_block, print_node

if TYPE_CHECKING:
    from viewforge.model.types import ProjectModel


@dataclass
class HandlerFragment:
    method: str
    binding: str


@dataclass
class RefFragments:
    init: List[str] = field(default_factory=list)
    save: List[str] = field(default_factory=list)
    bind: List[str] = field(default_factory=list)


def _bind(method_name: str) -> str:
    return f"this.{method_name} = this.{method_name}.bind(this);"


def _named_import(names: List[str], module: str) -> str:
    return f"import {{ {', '.join(names)} }} from '{module}';"


# =============================================================================
# Imports
# =============================================================================


def graphql_operations(file: ComponentFile) -> List[tuple]:
    """``(prop name, constant name, document)`` for queries then mutations."""
    operations = []
    for name, document in list(file.queries.items()) + list(file.mutations.items()):
        operations.append((name, format_graphql_constant_name(name), document))
    return operations


def generate_imports(file: ComponentFile, model: "ProjectModel") -> List[str]:
    lines = ["import React from 'react';"]

    if file.using_react_router:
        if file.type is FileType.DESIGNED_COMPONENT:
            lines.append(_named_import(["withRouter"], "react-router-dom"))
        else:
            lines.append(_named_import(["Switch", "Route"], "react-router-dom"))

    operations = graphql_operations(file)
    if operations:
        lines.append(_named_import(["compose", "graphql"], "react-apollo"))
        lines.append("import gql from 'graphql-tag';")

    for namespace in sorted(file.import_components):
        names = sorted(file.import_components[namespace])
        lines.append(_named_import(names, model.import_module_for(namespace)))

    if file.import_project_functions:
        lines.append(_named_import(file.import_project_functions, "../functions"))
    if file.import_builtin_functions:
        lines.append(_named_import(file.import_builtin_functions, "../builtins"))
    if file.import_helpers:
        lines.append(_named_import(file.import_helpers, "../helpers"))

    for name in file.import_files:
        lines.append(f"import {name} from './{name}';")

    for _, constant, document in operations:
        body = document.replace("`", "\\`")
        lines.append("")
        lines.append(f"const {constant} = gql`\n{indent_block(body.strip())}\n`;")

    return lines


# =============================================================================
# Handlers
# =============================================================================


def _lower_arg(raw, model: "ProjectModel", file: ComponentFile, path: Path) -> str:
    return print_node(lower_value(coerce_value(raw), model, file, path))


def _object_source(entries: List[tuple]) -> str:
    if not entries:
        return "{}"
    items = ", ".join(f"{key if key.isidentifier() else json.dumps(key)}: {value}" for key, value in entries)
    return f"{{ {items} }}"


def _action_statements(action, index: int, handler: HandlerDefinition, file: ComponentFile, model: "ProjectModel") -> List[str]:
    kind = action.get("type")
    action_path = handler.path.extend(index)

    if kind == ACTION_NAVIGATE:
        route_path = file.route_paths[action["routeId"]]
        params = [
            (name, _lower_arg(param, model, file, action_path.extend(name)))
            for name, param in (action.get("routeParams") or {}).items()
        ]
        return [f"this.props.history.push(buildRoutePath({json.dumps(route_path)}, {_object_source(params)}));"]

    if kind == ACTION_URL:
        url = json.dumps(str(action.get("url") or ""))
        if action.get("newWindow"):
            return [f"window.open({url}, '_blank');"]
        return [f"window.location.href = {url};"]

    if kind == ACTION_METHOD:
        target = file.components[action["componentId"]]
        args = ", ".join(
            _lower_arg(arg, model, file, action_path.extend(arg_index))
            for arg_index, arg in enumerate(action.get("args") or [])
        )
        ref_name = format_component_ref_name(target)
        return [f"if (this.{ref_name}) this.{ref_name}.{action['method']}({args});"]

    if kind == ACTION_MUTATION:
        variables = [
            (name, _lower_arg(arg, model, file, action_path.extend(name)))
            for name, arg in (action.get("args") or {}).items()
        ]
        return [f"this.props.{format_mutation_name(action_path)}({{ variables: {_object_source(variables)} }});"]

    if kind == ACTION_LOGOUT:
        return ["logout();"]

    return []


def generate_handler(handler: HandlerDefinition, file: ComponentFile, model: "ProjectModel") -> HandlerFragment:
    method_name = format_handler_method_name(handler.path)
    statements: List[str] = []
    for index, action in enumerate(handler.actions):
        statements.extend(_action_statements(action, index, handler, file, model))

    body = "\n".join(statements)
    method = f"{method_name}() {{\n{indent_block(body)}\n}}" if body else f"{method_name}() {{}}"
    return HandlerFragment(method=method, binding=_bind(method_name))


# =============================================================================
# State
# =============================================================================


def _slot_initial_value(component, slot: str, model: "ProjectModel", file: ComponentFile) -> str:
    value = component.props.get(slot)
    if value is None or value.source not in (ValueSource.STATIC, ValueSource.CONST):
        return print_node(NullLiteral())
    return print_node(lower_value(value, model, file, Path.for_prop(component.id, slot)))


def generate_state(file: ComponentFile, model: "ProjectModel") -> List[str]:
    entries: List[str] = []

    for component_id, slots in file.active_state_slots.items():
        component = file.components[component_id]
        for slot in slots:
            key = format_component_state_slot_key(component, slot)
            entries.append(f"{key}: () => {_slot_initial_value(component, slot, model, file)},")

    for system, table in ((False, file.props_state), (True, file.system_props_state)):
        for component_id, prop_names in table.items():
            component = file.components[component_id]
            props = component.system_props if system else component.props
            for prop_name in prop_names:
                key = format_state_key_for_prop(component, prop_name, system)
                path = Path.for_prop(component_id, prop_name, system=system)
                expression = print_node(lower_value(props[prop_name], model, file, path))
                entries.append(f"{key}: () => {expression},")

    if not entries:
        return []
    return ["this.state = {", *(indent_block(entry) for entry in entries), "};"]


# =============================================================================
# Refs
# =============================================================================


def generate_refs(file: ComponentFile) -> RefFragments:
    fragments = RefFragments()
    for component_id in file.refs:
        component = file.components[component_id]
        ref_name = format_component_ref_name(component)
        method_name = format_component_save_ref_method_name(component)
        fragments.init.append(f"this.{ref_name} = null;")
        fragments.save.append(f"{method_name}(ref) {{\n{indent_block(f'this.{ref_name} = ref;')}\n}}")
        fragments.bind.append(_bind(method_name))
    return fragments


# =============================================================================
# Default export
# =============================================================================


def generate_export(file: ComponentFile) -> str:
    exported = file.name
    if file.type is FileType.DESIGNED_COMPONENT and file.using_react_router:
        exported = f"withRouter({exported})"

    operations = graphql_operations(file)
    if operations:
        enhancers = ", ".join(
            f"graphql({constant}, {{ name: '{name}' }})" for name, constant, _ in operations
        )
        exported = f"compose({enhancers})({exported})"
    return exported


__all__ = [
    "HandlerFragment",
    "RefFragments",
    "graphql_operations",
    "generate_imports",
    "generate_handler",
    "generate_state",
    "generate_refs",
    "generate_export",
]
