"""
Value-expression lowering.

Turns one prop value into an output expression node. Lowering never
records anything on the file; every requirement it relies on (imports,
handler methods, state keys) was registered by :mod:`.walker` during
analysis.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from viewforge.errors import ValueExpressionError
from viewforge.codegen.jsx import (
    ArrayExpression,
    CallExpression,
    Expression,
    Identifier,
    NullLiteral,
    ObjectExpression,
    ObjectProperty,
    literal,
    member_chain,
    state_accessor,
    this_member,
)
from viewforge.model.names import (
    format_component_state_slot_key,
    format_designed_component_name,
    format_handler_method_name,
    format_query_name,
)
from viewforge.model.path import Path
from viewforge.model.types import ComponentFile, Value, ValueSource

from .builtins import BUILTIN_FUNCTIONS
from .common import coerce_value

if TYPE_CHECKING:
    from viewforge.model.types import ProjectModel


def lower_value(
    value: Value,
    model: "ProjectModel",
    file: ComponentFile,
    path: Path,
) -> Expression:
    source = value.source
    data = value.data

    if source is ValueSource.STATIC:
        inner = data.get("value")
        if isinstance(inner, list):
            return ArrayExpression(
                tuple(
                    lower_value(coerce_value(item), model, file, path.extend(index))
                    for index, item in enumerate(inner)
                )
            )
        if isinstance(inner, dict) and "source" not in inner:
            return ObjectExpression(
                tuple(
                    ObjectProperty(str(key), lower_value(coerce_value(item), model, file, path.extend(key)))
                    for key, item in inner.items()
                )
            )
        return literal(inner)

    if source is ValueSource.CONST:
        return literal(data.get("value"))

    if source is ValueSource.DESIGNER:
        if data.get("component") is None:
            return NullLiteral()
        return Identifier(format_designed_component_name(path))

    if source is ValueSource.STATE:
        target = file.components.get(data.get("componentId"))
        if target is None:
            raise ValueExpressionError(f"State value at {path} refers to a component outside {file.name}")
        return state_accessor(format_component_state_slot_key(target, data.get("stateSlot")))

    if source is ValueSource.FUNCTION:
        return _lower_function_call(data, model, file, path)

    if source is ValueSource.ACTIONS:
        return this_member(format_handler_method_name(path))

    if source is ValueSource.ROUTE_PARAMS:
        return member_chain(this_member("props", "match", "params"), str(data.get("paramName")))

    if source is ValueSource.DATA:
        fields = [str(name) for name in data.get("path") or []]
        return member_chain(this_member("props", format_query_name(path)), *fields)

    raise ValueExpressionError(f"Cannot lower value with source '{source}'")


def _lower_function_call(data, model: "ProjectModel", file: ComponentFile, path: Path) -> Expression:
    name = data.get("function")
    if data.get("functionSource", "project") == "builtin":
        arg_names: List[str] = list(BUILTIN_FUNCTIONS[name].args)
    else:
        arg_names = [arg.name for arg in model.functions[name].args]

    raw_args = data.get("args") or {}
    arguments = []
    for arg_name in arg_names:
        if arg_name in raw_args:
            arguments.append(lower_value(coerce_value(raw_args[arg_name]), model, file, path.extend(arg_name)))
        else:
            arguments.append(NullLiteral())
    return CallExpression(Identifier(name), tuple(arguments))


def append_class_name(expression: Expression, class_name: str) -> Expression:
    """``[expression, "class"].join(" ")`` for computed class names."""
    return CallExpression(
        member_chain(ArrayExpression((expression, literal(class_name))), "join"),
        (literal(" "),),
    )


__all__ = ["lower_value", "append_class_name"]
