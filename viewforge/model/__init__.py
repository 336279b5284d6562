"""Project model: input documents, normalization, analysis and the model builder."""

from .path import Path, PathStep, PropSwitch, StepType
from .types import (
    Component,
    ComponentFile,
    HandlerDefinition,
    ProjectModel,
    RedirectKind,
    RedirectRule,
    Route,
    Value,
    ValueSource,
)

__all__ = [
    "Path",
    "PathStep",
    "PropSwitch",
    "StepType",
    "Component",
    "ComponentFile",
    "HandlerDefinition",
    "ProjectModel",
    "RedirectKind",
    "RedirectRule",
    "Route",
    "Value",
    "ValueSource",
]
