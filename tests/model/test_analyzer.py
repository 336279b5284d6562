"""File Analyzer: requirement collection over one file's subtree."""

import pytest

from viewforge.constants import FileType
from viewforge.errors import OutletPlacementError
from viewforge.model.analyzer import collect_file_data, create_file, walk_components_tree
from viewforge.model.builder import build_model
from viewforge.model.normalizer import normalize_components
from viewforge.model.schema import parse_component


@pytest.fixture
def page_model(doc):
    root = doc.component(
        1,
        "Bootstrap.Container",
        style={"backgroundColor": "red"},
        children=[
            doc.component(2, "Bootstrap.Button", props={"label": doc.static("Go")}),
            doc.component(3, "Bootstrap.Button"),
            doc.component(4, "Charts.Line", style={"height": 200}),
            doc.component(
                5,
                "List",
                props={"data": doc.static([1, 2]), "component": doc.static("Bootstrap.ListGroupItem")},
            ),
        ],
    )
    return build_model(doc.project([doc.route(1, "/page", root)]))


def test_walk_components_tree_is_preorder(doc):
    tree = parse_component(
        doc.component(1, "L.A", children=[doc.component(2, "L.B", children=[doc.component(3, "L.C")]), doc.component(4, "L.D")])
    )
    components = normalize_components(tree)
    assert [component.id for component in walk_components_tree(components, 1)] == [1, 2, 3, 4]


def test_walk_of_invalid_root_is_empty():
    assert list(walk_components_tree({}, -1)) == []


def test_library_components_grouped_by_namespace(page_model):
    route_file = page_model.routes[1].file
    assert route_file.import_components == {
        "Bootstrap": ["Container", "Button", "ListGroupItem"],
        "Charts": ["Line"],
    }


def test_styles_recorded_per_component(page_model):
    route_file = page_model.routes[1].file
    assert route_file.css == {1: {"backgroundColor": "red"}, 4: {"height": 200}}


def test_file_without_requirements_has_empty_collections(page_model):
    route_file = page_model.routes[1].file
    assert route_file.handlers == {}
    assert route_file.refs == []
    assert not route_file.using_react_router
    assert not route_file.need_route_params


def test_collect_file_data_rejects_outlet_outside_route(doc, nested_routes_model):
    components = normalize_components(parse_component(doc.component(50, "Outlet")))
    designed = create_file(FileType.DESIGNED_COMPONENT, "Designed50")

    with pytest.raises(OutletPlacementError):
        collect_file_data(nested_routes_model, designed, components, 50)


def test_collect_file_data_returns_nested_requests(doc, nested_routes_model):
    inline = doc.component(60, "Lib.Inline")
    components = normalize_components(
        parse_component(doc.component(50, "Lib.Host", props={"slot": doc.designer(inline)}))
    )
    designed = create_file(FileType.DESIGNED_COMPONENT, "Designed50")

    requests = collect_file_data(nested_routes_model, designed, components, 50)

    assert [request.name for request in requests] == ["Designed50Slot"]
    assert requests[0].parent is designed
    assert requests[0].root_component_id == 60
    assert set(requests[0].components) == {60}
