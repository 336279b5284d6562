"""Builtin functions available to every project, with their JavaScript sources."""

from __future__ import annotations

from typing import Dict, List, NamedTuple


class BuiltinFunction(NamedTuple):
    args: List[str]
    body: str


BUILTIN_FUNCTIONS: Dict[str, BuiltinFunction] = {
    "not": BuiltinFunction(["value"], "return !value;"),
    "and": BuiltinFunction(["a", "b"], "return Boolean(a && b);"),
    "or": BuiltinFunction(["a", "b"], "return Boolean(a || b);"),
    "equals": BuiltinFunction(["a", "b"], "return a === b;"),
    "concat": BuiltinFunction(["a", "b"], "return String(a) + String(b);"),
    "toNumber": BuiltinFunction(["value"], "return Number(value);"),
    "toString": BuiltinFunction(["value"], "return String(value);"),
    "isEmpty": BuiltinFunction(
        ["value"],
        "return value === null || value === undefined || value.length === 0;",
    ),
}


def is_builtin(name: str) -> bool:
    return name in BUILTIN_FUNCTIONS


__all__ = ["BuiltinFunction", "BUILTIN_FUNCTIONS", "is_builtin"]
