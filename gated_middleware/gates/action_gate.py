from typing import Callable, Generic, Optional

from gated_middleware.host.types import (
    ControlAction,
    InputAction,
    OutputAction,
    State,
)
from gated_middleware.logging import GateDebug, LogLevel, Logger, get_logger
from gated_middleware.models import GateState

from .gate import Gate


class ActionGate(
    Gate[InputAction, OutputAction, State],
    Generic[InputAction, OutputAction, State, ControlAction],
):
    """
    Gate driven by control actions found in the action stream.

    Holds the current gate value, starting at ``initial_state``. Every
    incoming action goes through ``control_action_map``: ``None`` means a
    regular action, which is handled only while the gate is active. Any
    other result is a control action. It is always handled, and moves the
    gate to ACTIVE when equal to ``turn_on`` or to BYPASS when equal to
    ``turn_off`` (``turn_on`` is compared first). Payloads matching neither
    leave the gate untouched but are still handled.

    Application state is ignored by both predicates.
    """

    __slots__ = (
        "_control_action_map",
        "_turn_on",
        "_turn_off",
        "_current",
        "_logger",
    )

    def __init__(
        self,
        control_action_map: Callable[[InputAction], Optional[ControlAction]],
        turn_on: ControlAction,
        turn_off: ControlAction,
        initial_state: GateState,
        logger: Logger | None = None,
    ) -> None:
        self._control_action_map = control_action_map
        self._turn_on = turn_on
        self._turn_off = turn_off
        self._current = initial_state
        self._logger = logger or get_logger()

    def should_handle_action(self, action: InputAction, state: State) -> bool:
        control_action = self._control_action_map(action)
        if control_action is None:
            return self._current == GateState.ACTIVE

        # The only place the gate value changes.
        previous = self._current
        if control_action == self._turn_on:
            self._current = GateState.ACTIVE

        elif control_action == self._turn_off:
            self._current = GateState.BYPASS

        if previous != self._current and self._logger.enabled(LogLevel.DEBUG):
            self._logger.log(
                GateDebug(
                    message="Gate state changed by control action",
                    gate=type(self).__name__,
                    control_action=repr(control_action),
                    previous=previous.value,
                    current=self._current.value,
                )
            )

        return True

    def should_dispatch_action(self, action: OutputAction, state: State) -> bool:
        return self._current == GateState.ACTIVE
