"""
Validated input documents for viewforge projects.

The compiler consumes an already-parsed nested document describing routes
and component trees. These pydantic models validate that document and give
the normalizer typed access to it. Keys are camelCase on the wire and
snake_case in Python.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from viewforge.errors import ProjectValidationError


class _Document(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ValueDocument(_Document):
    """A prop value: a source kind plus source-specific data."""

    source: str
    source_data: Dict[str, Any] = Field(default_factory=dict)


class ComponentDocument(_Document):
    id: int
    name: str
    props: Dict[str, ValueDocument] = Field(default_factory=dict)
    system_props: Dict[str, ValueDocument] = Field(default_factory=dict)
    children: List["ComponentDocument"] = Field(default_factory=list)
    style: Optional[Dict[str, Union[str, int, float]]] = None


class RouteDocument(_Document):
    id: int
    path: str = ""
    component: Optional[ComponentDocument] = None
    index_component: Optional[ComponentDocument] = None
    have_index: bool = False
    children: List["RouteDocument"] = Field(default_factory=list)
    redirect: bool = False
    redirect_to: str = ""
    redirect_authenticated: bool = False
    redirect_authenticated_to: str = ""
    redirect_anonymous: bool = False
    redirect_anonymous_to: str = ""


class FunctionArgDocument(_Document):
    name: str


class FunctionDocument(_Document):
    args: List[FunctionArgDocument] = Field(default_factory=list)
    body: str = ""


class ProjectDocument(_Document):
    name: str = "viewforge-app"
    author: str = ""
    version: Optional[str] = None
    component_libs: List[str] = Field(default_factory=list)
    libraries: Dict[str, str] = Field(default_factory=dict)
    functions: Dict[str, FunctionDocument] = Field(default_factory=dict)
    graph_ql_endpoint_url: Optional[str] = Field(default=None, alias="graphQLEndpointURL")
    routes: List[RouteDocument] = Field(default_factory=list)


ComponentDocument.model_rebuild()
RouteDocument.model_rebuild()


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def parse_project(data: Union[ProjectDocument, Dict[str, Any]]) -> ProjectDocument:
    """Validate a raw project mapping."""
    if isinstance(data, ProjectDocument):
        return data
    try:
        return ProjectDocument.model_validate(data)
    except ValidationError as exc:
        raise ProjectValidationError(
            f"Invalid project document: {_describe_validation_error(exc)}"
        ) from exc


def parse_component(data: Any) -> Optional[ComponentDocument]:
    """Validate an inline component tree carried by a designer value."""
    if data is None or isinstance(data, ComponentDocument):
        return data
    try:
        return ComponentDocument.model_validate(data)
    except ValidationError as exc:
        raise ProjectValidationError(
            f"Invalid inline component: {_describe_validation_error(exc)}"
        ) from exc


def load_project_file(path: Path) -> ProjectDocument:
    """Load a project document from a JSON or YAML file."""
    if not path.exists():
        raise ProjectValidationError(f"Project file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ProjectValidationError(f"Could not parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ProjectValidationError(f"Project file {path} must contain a mapping")
    return parse_project(data)


__all__ = [
    "ValueDocument",
    "ComponentDocument",
    "RouteDocument",
    "FunctionDocument",
    "ProjectDocument",
    "parse_project",
    "parse_component",
    "load_project_file",
]
