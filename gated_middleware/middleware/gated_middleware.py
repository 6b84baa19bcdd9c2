from __future__ import annotations

import weakref

from gated_middleware.gates import Gate
from gated_middleware.host import (
    ActionHandler,
    AfterReducer,
    GetState,
    Middleware,
)
from gated_middleware.host.types import InputAction, OutputAction, State
from gated_middleware.logging import GateSuppressed, GateTrace, LogLevel, Logger, get_logger
from gated_middleware.models import ActionSource


_SUPPRESSED_MESSAGES = {
    "missing_context": "No state reader received yet, treating gate as bypassed",
    "gate_closed": "Dropped action emitted while gate is bypassed",
}


class GatedMiddleware(Middleware[InputAction, OutputAction, State]):
    """
    Wraps a context-then-handle middleware and decides, through its gate,
    whether the inner middleware sees each action and whether the actions
    it emits reach the store.

    The gate is evaluated against the state visible before the reducer. If
    the inner middleware handles an action, the ``AfterReducer`` it returns
    is handed back to the host unchanged, so it still runs when the reducer
    closes the gate. That lets the inner middleware notice it is about to be
    bypassed and cancel its timers. An action handled while the gate is
    closed never reaches the inner middleware, even if the reducer opens the
    gate. A follow-up action is needed to restart it.

    Emissions go through the gate's dispatch predicate at the moment they
    happen, against the state at that moment. The wrapped output only holds
    a weak reference to this middleware. Once it is discarded, emissions are
    dropped.
    """

    def __init__(
        self,
        middleware: Middleware[InputAction, OutputAction, State],
        gate: Gate[InputAction, OutputAction, State],
        logger: Logger | None = None,
    ) -> None:
        self._middleware = middleware
        self._gate = gate
        self._get_state: GetState[State] | None = None
        self._logger = logger or get_logger()

    @property
    def middleware(self) -> Middleware[InputAction, OutputAction, State]:
        return self._middleware

    def receive_context(
        self,
        get_state: GetState[State],
        output: ActionHandler[OutputAction],
    ) -> None:
        self._get_state = get_state
        gated_reference = weakref.ref(self)

        def dispatch(action: OutputAction, source: ActionSource) -> None:
            gated = gated_reference()
            if gated is None:
                return

            gated._dispatch_if_open(action, source, output)

        self._middleware.receive_context(get_state, ActionHandler(dispatch))

    def handle(
        self,
        action: InputAction,
        source: ActionSource,
    ) -> AfterReducer:
        if self._get_state is None:
            self._suppressed(action, "missing_context")
            return AfterReducer.do_nothing()

        handled = self._gate.should_handle_action(action, self._get_state())
        self._trace(action, "handle" if handled else "skip")

        if not handled:
            return AfterReducer.do_nothing()

        return self._middleware.handle(action, source)

    def _dispatch_if_open(
        self,
        action: OutputAction,
        source: ActionSource,
        output: ActionHandler[OutputAction],
    ) -> None:
        if self._gate.should_dispatch_action(action, self._get_state()):
            self._trace(action, "dispatch")
            output.dispatch(action, source)
            return

        self._suppressed(action, "gate_closed")

    def _trace(self, action: InputAction | OutputAction, decision: str) -> None:
        if self._logger.enabled(LogLevel.TRACE):
            self._logger.log(
                GateTrace(
                    middleware=type(self._middleware).__name__,
                    action=repr(action),
                    decision=decision,
                )
            )

    def _suppressed(self, action: InputAction | OutputAction, reason: str) -> None:
        if self._logger.enabled(LogLevel.DEBUG):
            self._logger.log(
                GateSuppressed(
                    message=_SUPPRESSED_MESSAGES[reason],
                    middleware=type(self._middleware).__name__,
                    action=repr(action),
                    reason=reason,
                )
            )
