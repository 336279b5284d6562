"""Path Locator addressing and the deterministic naming contract."""

from viewforge.model.components import ComponentKind, parse_component_name, split_component_name
from viewforge.model.names import (
    format_component_state_slot_key,
    format_designed_component_name,
    format_graphql_constant_name,
    format_handler_method_name,
    format_query_name,
    format_route_component_name,
    format_route_index_component_name,
    format_state_key_for_prop,
    format_style_class_name,
    identifier_part,
    pascal_case,
)
from viewforge.model.path import Path, StepType
from viewforge.model.types import Component, Route


# =============================================================================
# Path Locator
# =============================================================================


def test_path_for_prop_serializes_component_switch_and_name():
    path = Path.for_prop(3, "text")
    assert path.serialize() == "3.props.text"
    assert path.component_id == 3
    assert path.prop_name == "text"
    assert not path.is_system_prop


def test_system_prop_path_uses_system_switch():
    path = Path.for_prop(7, "visible", system=True)
    assert path.serialize() == "7.systemProps.visible"
    assert path.is_system_prop


def test_extend_appends_key_steps_without_mutating():
    base = Path.for_prop(3, "onClick")
    extended = base.extend(0, "userId")

    assert base.serialize() == "3.props.onClick"
    assert extended.serialize() == "3.props.onClick.0.userId"
    assert extended.keys == (0, "userId")
    assert all(step.type is StepType.KEY for step in extended.steps[3:])


def test_equal_paths_compare_equal():
    assert Path.for_prop(1, "a").extend("b") == Path.for_prop(1, "a").extend("b")


# =============================================================================
# Component names
# =============================================================================


def test_split_component_name_on_last_dot():
    assert split_component_name("Bootstrap.Button") == ("Bootstrap", "Button")
    assert split_component_name("Text") == ("", "Text")
    assert split_component_name("My.Lib.Card") == ("My.Lib", "Card")


def test_parse_component_name_classifies_pseudo_components():
    assert parse_component_name("Text").kind is ComponentKind.TEXT
    assert parse_component_name("List").kind is ComponentKind.LIST
    assert parse_component_name("Outlet").kind is ComponentKind.OUTLET
    assert parse_component_name("Frobnicate").kind is ComponentKind.UNKNOWN_PSEUDO
    assert parse_component_name("Lib.Text").kind is ComponentKind.GENERIC


# =============================================================================
# Naming contract
# =============================================================================


def test_pascal_case_strips_separators():
    assert pascal_case("user-list/:id") == "UserListId"
    assert pascal_case("/") == ""


def test_route_names_are_pure_functions_of_identity():
    route = Route(id=4, path="users/:id", full_path="/users/:id")
    assert format_route_component_name(route) == "RouteUsersId4"
    assert format_route_index_component_name(route) == "RouteUsersId4Index"
    assert format_route_component_name(route) == format_route_component_name(
        Route(id=4, path="users/:id", full_path="/users/:id")
    )


def test_value_names_follow_the_path():
    path = Path.for_prop(10, "renderItem")
    assert format_designed_component_name(path) == "Designed10RenderItem"
    assert format_handler_method_name(Path.for_prop(3, "onClick")) == "_handle3OnClick"
    assert format_query_name(Path.for_prop(7, "items")) == "data7Items"


def test_graphql_constant_name_is_upper_snake():
    assert format_graphql_constant_name("data7Items") == "DATA7_ITEMS"


def test_style_class_name_combines_file_and_component():
    assert format_style_class_name("RouteHome1", 5) == "RouteHome1__c5"


def test_identifier_part_escapes_instead_of_folding():
    assert identifier_part("onClick") == "OnClick"
    assert identifier_part("on-click") == "On_2d_click"
    assert identifier_part(0) == "0"
    assert identifier_part("on-click") != identifier_part("onClick")


def test_prop_names_differing_only_in_separators_get_distinct_names():
    button = Component(id=1, name="Lib.Button", namespace="Lib", local_name="Button", kind=ComponentKind.GENERIC)

    assert format_handler_method_name(Path.for_prop(1, "on-click")) != format_handler_method_name(
        Path.for_prop(1, "onClick")
    )
    assert format_state_key_for_prop(button, "aria-label", False) == "component1PropAria_2d_label"
    assert format_state_key_for_prop(button, "aria-label", False) != format_state_key_for_prop(
        button, "ariaLabel", False
    )
    assert format_component_state_slot_key(button, "is_open") == "component1SlotIs_5f_open"
