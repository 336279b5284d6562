"""
Deterministic naming for generated files, classes, methods and state keys.

Every name here is a pure function of route/component identity so that
recompiling an unchanged project yields byte-identical output.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .path import Path
    from .types import Component, Route


def pascal_case(value: str) -> str:
    """Convert an arbitrary string into a PascalCase identifier fragment."""
    parts = [part for part in re.split(r"[^A-Za-z0-9]+", str(value)) if part]
    return "".join(part[:1].upper() + part[1:] for part in parts)


def identifier_part(value) -> str:
    """
    Capitalize a prop name or key for use inside an identifier.

    Characters that cannot appear in an identifier are escaped as
    ``_<hex>_`` rather than dropped, so ``on-click`` and ``onClick`` stay
    distinct.
    """
    text = "".join(char if char.isascii() and char.isalnum() else f"_{ord(char):x}_" for char in str(value))
    return text[:1].upper() + text[1:]


def _key_suffix(path: "Path") -> str:
    return "".join(identifier_part(key) for key in path.keys)


def format_route_component_name(route: "Route") -> str:
    return f"Route{pascal_case(route.path)}{route.id}"


def format_route_index_component_name(route: "Route") -> str:
    return f"{format_route_component_name(route)}Index"


def format_designed_component_name(path: "Path") -> str:
    system = "System" if path.is_system_prop else ""
    return f"Designed{path.component_id}{system}{identifier_part(path.prop_name)}{_key_suffix(path)}"


def format_handler_method_name(path: "Path") -> str:
    system = "System" if path.is_system_prop else ""
    return f"_handle{path.component_id}{system}{identifier_part(path.prop_name)}{_key_suffix(path)}"


def format_query_name(path: "Path") -> str:
    return f"data{path.component_id}{identifier_part(path.prop_name)}{_key_suffix(path)}"


def format_mutation_name(path: "Path") -> str:
    return f"mutate{path.component_id}{identifier_part(path.prop_name)}{_key_suffix(path)}"


def format_graphql_constant_name(operation_name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", operation_name).upper()


def format_component_ref_name(component: "Component") -> str:
    return f"_componentRef{component.id}"


def format_component_save_ref_method_name(component: "Component") -> str:
    return f"_saveComponentRef{component.id}"


def format_state_key_for_prop(component: "Component", prop_name: str, system: bool) -> str:
    kind = "SystemProp" if system else "Prop"
    return f"component{component.id}{kind}{identifier_part(prop_name)}"


def format_component_state_slot_key(component: "Component", slot_name: str) -> str:
    return f"component{component.id}Slot{identifier_part(slot_name)}"


def format_style_class_name(file_name: str, component_id: int) -> str:
    return f"{file_name}__c{component_id}"


__all__ = [
    "pascal_case",
    "identifier_part",
    "format_route_component_name",
    "format_route_index_component_name",
    "format_designed_component_name",
    "format_handler_method_name",
    "format_query_name",
    "format_mutation_name",
    "format_graphql_constant_name",
    "format_component_ref_name",
    "format_component_save_ref_method_name",
    "format_state_key_for_prop",
    "format_component_state_slot_key",
    "format_style_class_name",
]
