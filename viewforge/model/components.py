"""Component name parsing and pseudo-component classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

PSEUDO_TEXT = "Text"
PSEUDO_LIST = "List"
PSEUDO_OUTLET = "Outlet"


class ComponentKind(str, Enum):
    """Closed set of lowering strategies, resolved once per component."""

    TEXT = "text"
    LIST = "list"
    OUTLET = "outlet"
    GENERIC = "generic"
    UNKNOWN_PSEUDO = "unknownPseudo"


_PSEUDO_KINDS = {
    PSEUDO_TEXT: ComponentKind.TEXT,
    PSEUDO_LIST: ComponentKind.LIST,
    PSEUDO_OUTLET: ComponentKind.OUTLET,
}


@dataclass(frozen=True)
class ComponentName:
    namespace: str
    name: str
    kind: ComponentKind


def split_component_name(full_name: str) -> Tuple[str, str]:
    """Split ``Namespace.Local`` into ``(namespace, local)``; no dot means no namespace."""
    namespace, sep, name = full_name.rpartition(".")
    if not sep:
        return "", full_name
    return namespace, name


def parse_component_name(full_name: str) -> ComponentName:
    namespace, name = split_component_name(full_name)
    if namespace:
        kind = ComponentKind.GENERIC
    else:
        kind = _PSEUDO_KINDS.get(name, ComponentKind.UNKNOWN_PSEUDO)
    return ComponentName(namespace=namespace, name=name, kind=kind)


__all__ = [
    "ComponentKind",
    "ComponentName",
    "PSEUDO_TEXT",
    "PSEUDO_LIST",
    "PSEUDO_OUTLET",
    "split_component_name",
    "parse_component_name",
]
