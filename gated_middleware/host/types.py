from typing import Any, Callable, Optional, TypeVar

from gated_middleware.models import GateState


InputAction = TypeVar("InputAction")
OutputAction = TypeVar("OutputAction")
State = TypeVar("State")
ControlAction = TypeVar("ControlAction")


GetState = Callable[[], State]

ControlActionMap = Callable[[InputAction], Optional[ControlAction]]

StateMap = Callable[[State], GateState]

FlagStateMap = Callable[[State], bool]

Projection = Callable[[Any], Any] | str
