"""
Normalized project model.

The normalizer turns validated input documents into these flat, id-indexed
records; the analyzer fills in one :class:`ComponentFile` per generation
unit. After :func:`viewforge.model.builder.build_model` returns, nothing
here is mutated again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from viewforge.constants import INVALID_ID, FileType

from .components import ComponentKind
from .path import Path
from .schema import ProjectDocument


class ValueSource(str, Enum):
    STATIC = "static"
    CONST = "const"
    DESIGNER = "designer"
    STATE = "state"
    FUNCTION = "function"
    ACTIONS = "actions"
    ROUTE_PARAMS = "routeParams"
    DATA = "data"


@dataclass(frozen=True)
class Value:
    """A prop value expression: its source kind plus source-specific data."""

    source: ValueSource
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def static(cls, value: Any) -> "Value":
        return cls(ValueSource.STATIC, {"value": value})


ALWAYS_VISIBLE = Value.static(True)


@dataclass
class Component:
    id: int
    name: str
    namespace: str
    local_name: str
    kind: ComponentKind
    parent_id: int = INVALID_ID
    children: List[int] = field(default_factory=list)
    props: Dict[str, Value] = field(default_factory=dict)
    system_props: Dict[str, Value] = field(default_factory=dict)
    style: Optional[Dict[str, Any]] = None


@dataclass
class Route:
    id: int
    path: str
    full_path: str
    parent_id: int = INVALID_ID
    children: List[int] = field(default_factory=list)
    components: Dict[int, Component] = field(default_factory=dict)
    root_component_id: int = INVALID_ID
    index_component_id: int = INVALID_ID
    have_index: bool = False
    redirect: bool = False
    redirect_to: str = ""
    redirect_authenticated: bool = False
    redirect_authenticated_to: str = ""
    redirect_anonymous: bool = False
    redirect_anonymous_to: str = ""
    file: Optional["ComponentFile"] = None
    index_file: Optional["ComponentFile"] = None


@dataclass
class HandlerDefinition:
    """Actions bound to one event prop, addressed by its path."""

    path: Path
    actions: List[Dict[str, Any]]


@dataclass
class ComponentFile:
    """
    One generation unit and every requirement needed to emit it.

    Collections keep first-registration order so generated output is
    deterministic; ``add_*`` helpers ignore duplicates.
    """

    type: FileType
    name: str
    route_id: int = INVALID_ID
    components: Dict[int, Component] = field(default_factory=dict)
    root_component_id: int = INVALID_ID
    import_components: Dict[str, List[str]] = field(default_factory=dict)
    import_files: List[str] = field(default_factory=list)
    import_project_functions: List[str] = field(default_factory=list)
    import_builtin_functions: List[str] = field(default_factory=list)
    import_helpers: List[str] = field(default_factory=list)
    handlers: Dict[str, HandlerDefinition] = field(default_factory=dict)
    refs: List[int] = field(default_factory=list)
    active_state_slots: Dict[int, List[str]] = field(default_factory=dict)
    props_state: Dict[int, List[str]] = field(default_factory=dict)
    system_props_state: Dict[int, List[str]] = field(default_factory=dict)
    css: Dict[int, Dict[str, Any]] = field(default_factory=dict)
    queries: Dict[str, str] = field(default_factory=dict)
    mutations: Dict[str, str] = field(default_factory=dict)
    route_paths: Dict[int, str] = field(default_factory=dict)
    nested_files: List["ComponentFile"] = field(default_factory=list)
    using_react_router: bool = False
    using_graphql: bool = False
    need_route_params: bool = False

    @property
    def root_component(self) -> Optional[Component]:
        return self.components.get(self.root_component_id)

    def add_import_component(self, namespace: str, name: str) -> None:
        _add_unique(self.import_components.setdefault(namespace, []), name)

    def add_import_file(self, name: str) -> None:
        _add_unique(self.import_files, name)

    def add_project_function(self, name: str) -> None:
        _add_unique(self.import_project_functions, name)

    def add_builtin_function(self, name: str) -> None:
        _add_unique(self.import_builtin_functions, name)

    def add_helper(self, name: str) -> None:
        _add_unique(self.import_helpers, name)

    def add_ref(self, component_id: int) -> None:
        _add_unique(self.refs, component_id)

    def add_active_state_slot(self, component_id: int, slot: str) -> None:
        _add_unique(self.active_state_slots.setdefault(component_id, []), slot)

    def add_prop_state(self, component_id: int, prop_name: str, *, system: bool) -> None:
        target = self.system_props_state if system else self.props_state
        _add_unique(target.setdefault(component_id, []), prop_name)

    def is_prop_from_state(self, component_id: int, prop_name: str, *, system: bool = False) -> bool:
        target = self.system_props_state if system else self.props_state
        return prop_name in target.get(component_id, ())


class RedirectKind(str, Enum):
    UNCONDITIONAL = "unconditional"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class RedirectRule:
    """
    A global redirect emitted in the entry point.

    ``AUTHENTICATED`` redirects signed-in users away (the route requires
    anonymity); ``ANONYMOUS`` redirects anonymous users away (the route
    requires authentication).
    """

    kind: RedirectKind
    route_id: int
    from_path: str
    to_path: str


@dataclass(frozen=True)
class NestedFileRequest:
    """Pending DESIGNED_COMPONENT file discovered while walking values."""

    name: str
    type: FileType
    components: Dict[int, Component]
    root_component_id: int
    parent: ComponentFile


@dataclass
class ProjectModel:
    project: ProjectDocument
    meta: Dict[str, str]
    routes: Dict[int, Route]
    root_routes: List[int]
    functions: Dict[str, Any]
    files: List[ComponentFile] = field(default_factory=list)
    redirects: List[RedirectRule] = field(default_factory=list)
    using_graphql: bool = False

    def route_paths(self) -> Dict[int, str]:
        return {route_id: route.full_path for route_id, route in self.routes.items()}

    def iter_files(self) -> Iterator[ComponentFile]:
        """Yield every file, nested designed components right after their parent."""
        stack = list(reversed(self.files))
        while stack:
            file = stack.pop()
            yield file
            stack.extend(reversed(file.nested_files))

    def import_module_for(self, namespace: str) -> str:
        return self.meta.get(namespace, namespace.lower())


def _add_unique(items: List[Any], item: Any) -> None:
    if item not in items:
        items.append(item)


__all__ = [
    "ValueSource",
    "Value",
    "ALWAYS_VISIBLE",
    "Component",
    "Route",
    "HandlerDefinition",
    "ComponentFile",
    "RedirectKind",
    "RedirectRule",
    "NestedFileRequest",
    "ProjectModel",
]
