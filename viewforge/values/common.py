"""Helpers shared by value analysis and lowering."""

from __future__ import annotations

from typing import Any, List, Tuple, Union

from viewforge.errors import ValueExpressionError
from viewforge.model.types import Value, ValueSource

ACTION_NAVIGATE = "navigate"
ACTION_URL = "url"
ACTION_METHOD = "method"
ACTION_MUTATION = "mutation"
ACTION_LOGOUT = "logout"

KNOWN_ACTIONS = (ACTION_NAVIGATE, ACTION_URL, ACTION_METHOD, ACTION_MUTATION, ACTION_LOGOUT)


def coerce_value(raw: Any) -> Value:
    """Turn a nested raw value document into a :class:`Value`.

    Mappings without a ``source`` key are treated as literal static data.
    """
    if isinstance(raw, Value):
        return raw
    if isinstance(raw, dict) and "source" in raw:
        try:
            source = ValueSource(raw["source"])
        except ValueError:
            raise ValueExpressionError(f"Unknown value source '{raw['source']}'") from None
        return Value(source=source, data=dict(raw.get("sourceData") or {}))
    return Value.static(raw)


def nested_static_values(value: Value) -> List[Tuple[Union[int, str], Value]]:
    """Return ``(key, value)`` pairs of a static array/object value, else empty."""
    inner = value.data.get("value")
    if value.source is not ValueSource.STATIC:
        return []
    if isinstance(inner, list):
        return [(index, coerce_value(item)) for index, item in enumerate(inner)]
    if isinstance(inner, dict) and "source" not in inner:
        return [(key, coerce_value(item)) for key, item in inner.items()]
    return []


def action_type(action: Any) -> str:
    kind = action.get("type") if isinstance(action, dict) else None
    if kind not in KNOWN_ACTIONS:
        raise ValueExpressionError(f"Unknown action type '{kind}'")
    return kind


__all__ = [
    "ACTION_NAVIGATE",
    "ACTION_URL",
    "ACTION_METHOD",
    "ACTION_MUTATION",
    "ACTION_LOGOUT",
    "KNOWN_ACTIONS",
    "coerce_value",
    "nested_static_values",
    "action_type",
]
