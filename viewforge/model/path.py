"""Path Locator: stable addresses of values inside the component tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

StepValue = Union[int, str]


class StepType(str, Enum):
    COMPONENT_ID = "componentId"
    SWITCH = "switch"
    COMPONENT_PROP_NAME = "propName"
    KEY = "key"


class PropSwitch(str, Enum):
    PROPS = "props"
    SYSTEM_PROPS = "systemProps"


@dataclass(frozen=True)
class PathStep:
    type: StepType
    value: StepValue

    def serialize(self) -> str:
        if isinstance(self.value, Enum):
            return str(self.value.value)
        return str(self.value)


@dataclass(frozen=True)
class Path:
    """
    Ordered sequence of addressing steps.

    The first three steps always name a component, a props/systemProps
    switch and a prop name; any further KEY steps address nested values
    (object keys, array indices, action arguments).
    """

    steps: Tuple[PathStep, ...]

    @classmethod
    def for_prop(cls, component_id: int, prop_name: str, *, system: bool = False) -> "Path":
        switch = PropSwitch.SYSTEM_PROPS if system else PropSwitch.PROPS
        return cls(
            (
                PathStep(StepType.COMPONENT_ID, component_id),
                PathStep(StepType.SWITCH, switch.value),
                PathStep(StepType.COMPONENT_PROP_NAME, prop_name),
            )
        )

    def extend(self, *keys: StepValue) -> "Path":
        return Path(self.steps + tuple(PathStep(StepType.KEY, key) for key in keys))

    @property
    def component_id(self) -> int:
        return int(self.steps[0].value)

    @property
    def is_system_prop(self) -> bool:
        return self.steps[1].value == PropSwitch.SYSTEM_PROPS.value

    @property
    def prop_name(self) -> str:
        return str(self.steps[2].value)

    @property
    def keys(self) -> Tuple[StepValue, ...]:
        return tuple(step.value for step in self.steps[3:])

    def serialize(self) -> str:
        return ".".join(step.serialize() for step in self.steps)

    def __str__(self) -> str:
        return self.serialize()


__all__ = ["Path", "PathStep", "StepType", "PropSwitch"]
