"""Shared pytest fixtures: small project documents and a factory for building more."""

from typing import Any, Dict, List, Optional

import pytest

from viewforge.model.builder import build_model


class DocumentFactory:
    """Builds raw (camelCase) project document fragments."""

    # Values

    def static(self, value: Any) -> Dict[str, Any]:
        return {"source": "static", "sourceData": {"value": value}}

    def const(self, value: Any) -> Dict[str, Any]:
        return {"source": "const", "sourceData": {"value": value}}

    def state(self, component_id: int, slot: str) -> Dict[str, Any]:
        return {"source": "state", "sourceData": {"componentId": component_id, "stateSlot": slot}}

    def route_param(self, name: str) -> Dict[str, Any]:
        return {"source": "routeParams", "sourceData": {"paramName": name}}

    def function(self, name: str, args: Optional[Dict[str, Any]] = None, *, builtin: bool = False) -> Dict[str, Any]:
        return {
            "source": "function",
            "sourceData": {
                "function": name,
                "functionSource": "builtin" if builtin else "project",
                "args": args or {},
            },
        }

    def actions(self, *actions: Dict[str, Any]) -> Dict[str, Any]:
        return {"source": "actions", "sourceData": {"actions": list(actions)}}

    def designer(self, component: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        return {"source": "designer", "sourceData": {"component": component}}

    def data(self, query: str, path: List[str]) -> Dict[str, Any]:
        return {"source": "data", "sourceData": {"query": query, "path": path}}

    # Tree

    def component(
        self,
        component_id: int,
        name: str,
        props: Optional[Dict[str, Any]] = None,
        children: Optional[List[Dict[str, Any]]] = None,
        system_props: Optional[Dict[str, Any]] = None,
        style: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "id": component_id,
            "name": name,
            "props": props or {},
            "systemProps": system_props or {},
            "children": children or [],
        }
        if style is not None:
            document["style"] = style
        return document

    def text(self, component_id: int, text: Any, **kwargs: Any) -> Dict[str, Any]:
        value = text if isinstance(text, dict) else self.static(text)
        return self.component(component_id, "Text", {"text": value}, **kwargs)

    def route(
        self,
        route_id: int,
        path: str,
        component: Optional[Dict[str, Any]] = None,
        *,
        index_component: Optional[Dict[str, Any]] = None,
        children: Optional[List[Dict[str, Any]]] = None,
        **extra: Any,
    ) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "id": route_id,
            "path": path,
            "component": component,
            "indexComponent": index_component,
            "haveIndex": index_component is not None,
            "children": children or [],
        }
        document.update(extra)
        return document

    def project(self, routes: List[Dict[str, Any]], **extra: Any) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "name": "demo-app",
            "author": "Demo Author",
            "componentLibs": ["reactstrap@^5.0.0"],
            "routes": routes,
        }
        document.update(extra)
        return document


@pytest.fixture
def doc() -> DocumentFactory:
    return DocumentFactory()


@pytest.fixture
def nested_routes_project(doc):
    """Root route with an Outlet, an index page and two child routes."""
    root = doc.component(
        1,
        "Bootstrap.Container",
        children=[
            doc.text(2, "Header"),
            doc.component(3, "Outlet"),
        ],
    )
    return doc.project(
        [
            doc.route(
                1,
                "/",
                root,
                index_component=doc.component(4, "Bootstrap.Jumbotron", children=[doc.text(5, "Welcome")]),
                children=[
                    doc.route(2, "users", doc.component(10, "Bootstrap.Card")),
                    doc.route(3, "about", doc.component(20, "Bootstrap.Card")),
                ],
            )
        ]
    )


@pytest.fixture
def nested_routes_model(nested_routes_project):
    return build_model(nested_routes_project)
