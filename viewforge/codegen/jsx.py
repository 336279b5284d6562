"""
Output node types for generated JavaScript/JSX.

A deliberately small, immutable subset of the babel-types vocabulary: just
the expressions and JSX constructs the emitter and the fragment generators
produce. :mod:`viewforge.codegen.printer` turns them into source text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class NumericLiteral:
    value: Union[int, float]


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool


@dataclass(frozen=True)
class NullLiteral:
    pass


@dataclass(frozen=True)
class ThisExpression:
    pass


@dataclass(frozen=True)
class MemberExpression:
    object: "Expression"
    property: "Expression"
    computed: bool = False


@dataclass(frozen=True)
class CallExpression:
    callee: "Expression"
    arguments: Tuple["Expression", ...] = ()


@dataclass(frozen=True)
class ArrowFunctionExpression:
    params: Tuple[Identifier, ...]
    body: "Expression"


@dataclass(frozen=True)
class LogicalExpression:
    operator: str
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class ObjectProperty:
    key: str
    value: "Expression"


@dataclass(frozen=True)
class ObjectExpression:
    properties: Tuple[ObjectProperty, ...] = ()


@dataclass(frozen=True)
class ArrayExpression:
    elements: Tuple["Expression", ...] = ()


@dataclass(frozen=True)
class JSXExpressionContainer:
    expression: "Expression"


@dataclass(frozen=True)
class JSXText:
    value: str


@dataclass(frozen=True)
class JSXAttribute:
    """``name`` alone when ``value`` is None (boolean shorthand)."""

    name: str
    value: Optional[Union[StringLiteral, JSXExpressionContainer]] = None


@dataclass(frozen=True)
class JSXElement:
    name: str
    attributes: Tuple[JSXAttribute, ...] = ()
    children: Tuple["JSXChild", ...] = field(default=())

    @property
    def self_closing(self) -> bool:
        return not self.children


Expression = Union[
    Identifier,
    StringLiteral,
    NumericLiteral,
    BooleanLiteral,
    NullLiteral,
    ThisExpression,
    MemberExpression,
    CallExpression,
    ArrowFunctionExpression,
    LogicalExpression,
    ObjectExpression,
    ArrayExpression,
    JSXElement,
]

JSXChild = Union[JSXElement, JSXText, JSXExpressionContainer]

Node = Union[Expression, JSXExpressionContainer, JSXText, JSXAttribute, ObjectProperty]


def this_member(*names: str) -> Expression:
    """Build ``this.a.b.c``."""
    expression: Expression = ThisExpression()
    for name in names:
        expression = MemberExpression(expression, Identifier(name))
    return expression


def member_chain(base: Expression, *names: Union[int, str]) -> Expression:
    expression = base
    for name in names:
        if isinstance(name, int) or not str(name).isidentifier():
            expression = MemberExpression(expression, literal(name), computed=True)
        else:
            expression = MemberExpression(expression, Identifier(str(name)))
    return expression


def state_accessor(state_key: str) -> CallExpression:
    """``this.state.<key>()``"""
    return CallExpression(this_member("state", state_key))


def literal(value) -> Expression:
    """Convert a JSON-compatible Python value to a literal expression."""
    if value is None:
        return NullLiteral()
    if isinstance(value, bool):
        return BooleanLiteral(value)
    if isinstance(value, (int, float)):
        return NumericLiteral(value)
    if isinstance(value, str):
        return StringLiteral(value)
    if isinstance(value, (list, tuple)):
        return ArrayExpression(tuple(literal(item) for item in value))
    if isinstance(value, dict):
        return ObjectExpression(
            tuple(ObjectProperty(str(key), literal(item)) for key, item in value.items())
        )
    raise TypeError(f"Cannot convert {type(value).__name__} to a literal")


def is_true_literal(node: Expression) -> bool:
    return isinstance(node, BooleanLiteral) and node.value is True


def is_constant(node: Expression) -> bool:
    return isinstance(node, (StringLiteral, NumericLiteral, BooleanLiteral, NullLiteral))


__all__ = [
    "Identifier",
    "StringLiteral",
    "NumericLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "ThisExpression",
    "MemberExpression",
    "CallExpression",
    "ArrowFunctionExpression",
    "LogicalExpression",
    "ObjectProperty",
    "ObjectExpression",
    "ArrayExpression",
    "JSXExpressionContainer",
    "JSXText",
    "JSXAttribute",
    "JSXElement",
    "Expression",
    "JSXChild",
    "Node",
    "this_member",
    "member_chain",
    "state_accessor",
    "literal",
    "is_true_literal",
    "is_constant",
]
