from typing import Callable

from gated_middleware.host.types import InputAction, OutputAction, State
from gated_middleware.models import GateState

from .gate import Gate


class StateGate(Gate[InputAction, OutputAction, State]):
    """
    Gate derived from application state. Owns no gate value: both
    predicates project whichever state snapshot they are given, so control
    lives entirely in the host's reducers.
    """

    __slots__ = ("_state_map",)

    def __init__(self, state_map: Callable[[State], GateState]) -> None:
        self._state_map = state_map

    def should_handle_action(self, action: InputAction, state: State) -> bool:
        return self._state_map(state) == GateState.ACTIVE

    def should_dispatch_action(self, action: OutputAction, state: State) -> bool:
        return self._state_map(state) == GateState.ACTIVE
