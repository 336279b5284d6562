"""Unified error model for viewforge."""

from __future__ import annotations

from typing import Optional


class ViewForgeError(Exception):
    """Base class for all compiler errors surfaced to users."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        components = [self.message]
        if self.code:
            components[-1] = f"{components[-1]} ({self.code})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class ModelError(ViewForgeError):
    """Raised when the project model is malformed."""

    code = "VF_MODEL"


class OutletPlacementError(ModelError):
    """Raised when an Outlet appears outside of a route file."""

    code = "VF_OUTLET"
    hint = "Outlet may only be placed in a route's root component tree."


class UnknownPseudoComponentError(ModelError):
    """Raised for a namespace-less component name with no built-in lowering."""

    code = "VF_PSEUDO"
    hint = "Known pseudo-components are Text, List and Outlet."


class ProjectValidationError(ViewForgeError):
    """Raised when the input project document fails validation."""

    code = "VF_INPUT"


class ValueExpressionError(ViewForgeError):
    """Raised when a prop value cannot be analyzed or lowered."""

    code = "VF_VALUE"


class ConfigError(ViewForgeError):
    """Raised for invalid workspace configuration."""

    code = "VF_CONFIG"


__all__ = [
    "ViewForgeError",
    "ModelError",
    "OutletPlacementError",
    "UnknownPseudoComponentError",
    "ProjectValidationError",
    "ValueExpressionError",
    "ConfigError",
]
