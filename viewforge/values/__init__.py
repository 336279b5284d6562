"""Prop value-expressions: requirement analysis and lowering."""

from .lowering import lower_value
from .walker import walk_value

__all__ = ["lower_value", "walk_value"]
