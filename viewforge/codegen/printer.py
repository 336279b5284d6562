"""
Source printer for output nodes.

Prints expressions on one line where possible and JSX elements with one
child per line, two-space indentation. Output is a pure function of the
node, so identical trees print identically.
"""

from __future__ import annotations

import json
import re

from .jsx import (
    ArrayExpression,
    ArrowFunctionExpression,
    BooleanLiteral,
    CallExpression,
    Identifier,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXText,
    LogicalExpression,
    MemberExpression,
    Node,
    NullLiteral,
    NumericLiteral,
    ObjectExpression,
    StringLiteral,
    ThisExpression,
)

INDENT = "  "

_UNSAFE_JSX_TEXT = re.compile(r"[{}<>]")
_UNSAFE_ATTRIBUTE = re.compile(r"[\"\\\n]")


def print_node(node: Node) -> str:
    """Return the JavaScript source for ``node``."""
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, StringLiteral):
        return json.dumps(node.value, ensure_ascii=False)
    if isinstance(node, NumericLiteral):
        return json.dumps(node.value)
    if isinstance(node, BooleanLiteral):
        return "true" if node.value else "false"
    if isinstance(node, NullLiteral):
        return "null"
    if isinstance(node, ThisExpression):
        return "this"
    if isinstance(node, MemberExpression):
        target = _wrap_operand(node.object)
        if node.computed:
            return f"{target}[{print_node(node.property)}]"
        return f"{target}.{print_node(node.property)}"
    if isinstance(node, CallExpression):
        arguments = ", ".join(print_node(argument) for argument in node.arguments)
        return f"{_wrap_operand(node.callee)}({arguments})"
    if isinstance(node, ArrowFunctionExpression):
        params = ", ".join(param.name for param in node.params)
        body = print_node(node.body)
        if isinstance(node.body, ObjectExpression):
            body = f"({body})"
        elif "\n" in body:
            body = f"(\n{indent_block(body)}\n)"
        return f"({params}) => {body}"
    if isinstance(node, LogicalExpression):
        right = print_node(node.right)
        if "\n" in right:
            right = f"(\n{indent_block(right)}\n)"
        return f"{_wrap_operand(node.left)} {node.operator} {right}"
    if isinstance(node, ObjectExpression):
        if not node.properties:
            return "{}"
        items = ", ".join(f"{_print_key(prop.key)}: {print_node(prop.value)}" for prop in node.properties)
        return f"{{ {items} }}"
    if isinstance(node, ArrayExpression):
        return "[" + ", ".join(print_node(element) for element in node.elements) + "]"
    if isinstance(node, JSXExpressionContainer):
        return "{" + print_node(node.expression) + "}"
    if isinstance(node, JSXText):
        if _UNSAFE_JSX_TEXT.search(node.value) or _loses_whitespace(node.value):
            return "{" + json.dumps(node.value, ensure_ascii=False) + "}"
        return node.value
    if isinstance(node, JSXAttribute):
        return _print_attribute(node)
    if isinstance(node, JSXElement):
        return _print_element(node)
    raise TypeError(f"Cannot print node of type {type(node).__name__}")


def _loses_whitespace(text: str) -> bool:
    # JSX trims whitespace adjacent to line breaks.
    return "\n" in text or text != text.strip()


def indent_block(text: str, level: int = 1) -> str:
    prefix = INDENT * level
    return "\n".join(prefix + line if line else line for line in text.split("\n"))


def _wrap_operand(node: Node) -> str:
    printed = print_node(node)
    if isinstance(node, (LogicalExpression, ArrowFunctionExpression, JSXElement)):
        return f"({printed})"
    return printed


def _print_key(key: str) -> str:
    return key if key.isidentifier() else json.dumps(key)


def _print_attribute(attribute: JSXAttribute) -> str:
    value = attribute.value
    if value is None:
        return attribute.name
    if isinstance(value, StringLiteral):
        if _UNSAFE_ATTRIBUTE.search(value.value):
            return f"{attribute.name}={{{print_node(value)}}}"
        return f'{attribute.name}="{value.value}"'
    return f"{attribute.name}={print_node(value)}"


def _print_element(element: JSXElement) -> str:
    opening = element.name
    if element.attributes:
        opening += " " + " ".join(_print_attribute(attribute) for attribute in element.attributes)
    if element.self_closing:
        return f"<{opening} />"
    children = "\n".join(indent_block(print_node(child)) for child in element.children)
    return f"<{opening}>\n{children}\n</{element.name}>"


__all__ = ["print_node", "indent_block", "INDENT"]
