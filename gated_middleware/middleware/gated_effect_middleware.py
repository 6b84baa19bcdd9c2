from __future__ import annotations

import weakref

from gated_middleware.gates import Gate
from gated_middleware.host import IO, EffectMiddleware, GetState
from gated_middleware.host.types import InputAction, OutputAction, State
from gated_middleware.logging import GateSuppressed, GateTrace, LogLevel, Logger, get_logger
from gated_middleware.models import ActionSource, DispatchedAction


class GatedEffectMiddleware(EffectMiddleware[InputAction, OutputAction, State]):
    """
    Wraps a request/response middleware. The gate is checked against the
    state passed with the action; when closed, an inert ``IO`` is returned.

    When open, the inner middleware's ``IO`` runs as usual, but each action
    it dispatches is forwarded only if both gate predicates still hold for
    the state read at that moment. The effect usually runs after the
    reducer, so it must not reuse the earlier decision.
    """

    def __init__(
        self,
        middleware: EffectMiddleware[InputAction, OutputAction, State],
        gate: Gate[InputAction, OutputAction, State],
        logger: Logger | None = None,
    ) -> None:
        self._middleware = middleware
        self._gate = gate
        self._logger = logger or get_logger()

    @property
    def middleware(self) -> EffectMiddleware[InputAction, OutputAction, State]:
        return self._middleware

    def handle(
        self,
        action: InputAction,
        source: ActionSource,
        get_state: GetState[State],
    ) -> IO[OutputAction]:
        handled = self._gate.should_handle_action(action, get_state())
        self._trace(action, "handle" if handled else "skip")

        if not handled:
            return IO.pure()

        gated_reference = weakref.ref(self)

        def gate_response(response: DispatchedAction[OutputAction]) -> IO[OutputAction]:
            gated = gated_reference()
            if gated is None:
                return IO.pure()

            return gated._gate_response(action, response, get_state)

        return self._middleware.handle(action, source, get_state).flat_map(gate_response)

    def _gate_response(
        self,
        action: InputAction,
        response: DispatchedAction[OutputAction],
        get_state: GetState[State],
    ) -> IO[OutputAction]:
        if not (
            self._gate.should_handle_action(action, get_state())
            and self._gate.should_dispatch_action(response.action, get_state())
        ):
            if self._logger.enabled(LogLevel.DEBUG):
                self._logger.log(
                    GateSuppressed(
                        message="Dropped action emitted while gate is bypassed",
                        middleware=type(self._middleware).__name__,
                        action=repr(response.action),
                        reason="gate_closed",
                    )
                )

            return IO.pure()

        self._trace(response.action, "dispatch")

        return IO(lambda output: output.dispatch_action(response))

    def _trace(self, action: InputAction | OutputAction, decision: str) -> None:
        if self._logger.enabled(LogLevel.TRACE):
            self._logger.log(
                GateTrace(
                    middleware=type(self._middleware).__name__,
                    action=repr(action),
                    decision=decision,
                )
            )
