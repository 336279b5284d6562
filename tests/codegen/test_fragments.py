"""Imports, handlers, state, refs and export fragments."""

import pytest

from viewforge.codegen.fragments import (
    generate_export,
    generate_handler,
    generate_imports,
    generate_refs,
    generate_state,
    graphql_operations,
)
from viewforge.model.builder import build_model

GRAPHQL_ENDPOINT = "https://api.example.com/graphql"


@pytest.fixture
def form_model(doc):
    """Container with an input, a button acting on it, and a text mirroring its value."""
    focus = {"type": "method", "componentId": 2, "method": "focus", "args": []}
    navigate = {"type": "navigate", "routeId": 1}
    root = doc.component(
        1,
        "Bootstrap.Container",
        children=[
            doc.component(2, "Bootstrap.Input", props={"placeholder": doc.static("Name"), "value": doc.static("hi")}),
            doc.component(3, "Bootstrap.Button", props={"onClick": doc.actions(focus, navigate)}),
            doc.text(4, doc.state(2, "value")),
        ],
    )
    return build_model(doc.project([doc.route(1, "/home", root)]))


@pytest.fixture
def form_file(form_model):
    return form_model.routes[1].file


# =============================================================================
# Imports
# =============================================================================


def test_imports_group_library_components_and_helpers(form_model, form_file):
    assert generate_imports(form_file, form_model) == [
        "import React from 'react';",
        "import { Button, Container, Input } from 'bootstrap';",
        "import { buildRoutePath } from '../helpers';",
    ]


def test_imports_honour_library_module_overrides(doc):
    project = doc.project([doc.route(1, "/", doc.component(1, "Bootstrap.Container"))])
    model = build_model(project, {"Bootstrap": "reactstrap"})
    assert "import { Container } from 'reactstrap';" in generate_imports(model.routes[1].file, model)


def test_route_file_with_outlet_imports_router_and_child_files(nested_routes_model):
    imports = generate_imports(nested_routes_model.routes[1].file, nested_routes_model)
    assert imports[1] == "import { Switch, Route } from 'react-router-dom';"
    assert "import RouteUsers2 from './RouteUsers2';" in imports
    assert "import Route1Index from './Route1Index';" in imports


def test_project_and_builtin_functions_are_imported(doc):
    root = doc.component(
        1,
        "Lib.Label",
        props={
            "title": doc.function("shout", {"text": doc.static("hi")}),
            "count": doc.function("concat", {"a": doc.static(1), "b": doc.static(2)}, builtin=True),
        },
    )
    project = doc.project(
        [doc.route(1, "/", root)],
        functions={"shout": {"args": [{"name": "text"}], "body": "return text.toUpperCase();"}},
    )
    model = build_model(project)
    imports = generate_imports(model.routes[1].file, model)

    assert "import { shout } from '../functions';" in imports
    assert "import { concat } from '../builtins';" in imports


# =============================================================================
# Handlers
# =============================================================================


def test_handler_runs_actions_in_order(form_model, form_file):
    handler = generate_handler(form_file.handlers["3.props.onClick"], form_file, form_model)

    assert handler.binding == "this._handle3OnClick = this._handle3OnClick.bind(this);"
    assert handler.method == (
        "_handle3OnClick() {\n"
        "  if (this._componentRef2) this._componentRef2.focus();\n"
        '  this.props.history.push(buildRoutePath("/home", {}));\n'
        "}"
    )


def _single_handler(doc, *actions, **project_extra):
    root = doc.component(1, "Lib.Button", props={"onClick": doc.actions(*actions)})
    model = build_model(doc.project([doc.route(1, "/users/:id", root)], **project_extra))
    file = model.routes[1].file
    (handler,) = file.handlers.values()
    return generate_handler(handler, file, model)


def test_navigate_passes_route_params(doc):
    navigate = {"type": "navigate", "routeId": 1, "routeParams": {"id": doc.static(7)}}
    handler = _single_handler(doc, navigate)
    assert 'this.props.history.push(buildRoutePath("/users/:id", { id: 7 }));' in handler.method


def test_url_actions(doc):
    same_window = _single_handler(doc, {"type": "url", "url": "https://example.com"})
    new_window = _single_handler(doc, {"type": "url", "url": "https://example.com", "newWindow": True})

    assert 'window.location.href = "https://example.com";' in same_window.method
    assert "window.open(\"https://example.com\", '_blank');" in new_window.method


def test_logout_action(doc):
    assert "logout();" in _single_handler(doc, {"type": "logout"}).method


def test_mutation_action_passes_variables(doc):
    mutation = {"type": "mutation", "mutation": "mutation { go }", "args": {"id": doc.static(5)}}
    handler = _single_handler(doc, mutation, graphQLEndpointURL=GRAPHQL_ENDPOINT)
    assert "this.props.mutate1OnClick0({ variables: { id: 5 } });" in handler.method


def test_handler_without_actions_has_empty_body(doc):
    assert _single_handler(doc).method == "_handle1OnClick() {}"


# =============================================================================
# State and refs
# =============================================================================


def test_state_slot_starts_from_static_prop(form_model, form_file):
    state = generate_state(form_file, form_model)

    assert state[0] == "this.state = {"
    assert state[1] == '  component2SlotValue: () => "hi",'
    assert state[-1] == "};"


def test_state_slot_without_static_prop_starts_null(doc):
    root = doc.component(
        1,
        "Lib.Form",
        children=[
            doc.component(2, "Lib.Checkbox"),
            doc.component(3, "Lib.Label", props={"active": doc.state(2, "checked")}),
        ],
    )
    model = build_model(doc.project([doc.route(1, "/", root)]))
    state = generate_state(model.routes[1].file, model)

    assert "  component2SlotChecked: () => null," in state
    assert "  component3PropActive: () => this.state.component2SlotChecked()," in state


def test_no_state_means_no_state_lines(nested_routes_model):
    assert generate_state(nested_routes_model.routes[1].file, nested_routes_model) == []


def test_refs(form_file):
    refs = generate_refs(form_file)

    assert refs.init == ["this._componentRef2 = null;"]
    assert refs.bind == ["this._saveComponentRef2 = this._saveComponentRef2.bind(this);"]
    assert refs.save == ["_saveComponentRef2(ref) {\n  this._componentRef2 = ref;\n}"]


# =============================================================================
# Export
# =============================================================================


def test_route_file_exports_its_class(form_file):
    assert generate_export(form_file) == "RouteHome1"


def test_designed_file_is_wrapped_with_router(doc):
    root = doc.component(1, "Lib.Container", props={"header": doc.designer(doc.component(50, "Lib.Card"))})
    model = build_model(doc.project([doc.route(1, "/", root)]))
    (designed,) = model.routes[1].file.nested_files

    assert designed.name == "Designed1Header"
    assert generate_export(designed) == "withRouter(Designed1Header)"
    assert "import { withRouter } from 'react-router-dom';" in generate_imports(designed, model)
    assert "import Designed1Header from './Designed1Header';" in generate_imports(model.routes[1].file, model)


def test_graphql_file_declares_documents_and_composes_export(doc):
    root = doc.component(1, "Lib.Table", props={"rows": doc.data("query { rows }", ["rows"])})
    model = build_model(doc.project([doc.route(1, "/home", root)], graphQLEndpointURL=GRAPHQL_ENDPOINT))
    file = model.routes[1].file
    imports = generate_imports(file, model)

    assert graphql_operations(file) == [("data1Rows", "DATA1_ROWS", "query { rows }")]
    assert "import { compose, graphql } from 'react-apollo';" in imports
    assert "import gql from 'graphql-tag';" in imports
    assert imports[-1] == "const DATA1_ROWS = gql`\n  query { rows }\n`;"
    assert generate_export(file) == "compose(graphql(DATA1_ROWS, { name: 'data1Rows' }))(RouteHome1)"


def test_event_props_differing_only_in_separators_get_separate_handlers(doc):
    root = doc.component(
        1,
        "Lib.Button",
        props={"onClick": doc.actions({"type": "logout"}), "on-click": doc.actions({"type": "logout"})},
    )
    model = build_model(doc.project([doc.route(1, "/", root)]))
    file = model.routes[1].file
    methods = [generate_handler(handler, file, model).method for handler in file.handlers.values()]

    assert [method.split("(")[0] for method in methods] == ["_handle1OnClick", "_handle1On_2d_click"]
