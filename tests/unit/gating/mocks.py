from dataclasses import dataclass, field
from typing import Any, List, Tuple

from gated_middleware import (
    IO,
    ActionHandler,
    ActionSource,
    AfterReducer,
    EffectMiddleware,
    GateState,
    Middleware,
)


@dataclass
class AppState:
    sample_enabled: GateState = GateState.ACTIVE
    sample_flag: bool = True


@dataclass(frozen=True)
class SomethingElse:
    pass


@dataclass(frozen=True)
class OneMore:
    pass


@dataclass(frozen=True)
class ToggleSampleMiddleware:
    enabled: bool


@dataclass(frozen=True)
class SetSampleGate:
    gate: GateState


def enable_sample(action: Any) -> bool | None:
    if isinstance(action, ToggleSampleMiddleware):
        return action.enabled

    return None


class Store:
    """In-memory host: holds state and records every action it receives."""

    def __init__(self) -> None:
        self.state = AppState()
        self.dispatched: List[Tuple[Any, ActionSource]] = []
        self.action_handler = ActionHandler(self._receive)

    @property
    def actions_received(self) -> List[Any]:
        return [action for action, _ in self.dispatched]

    def get_state(self) -> AppState:
        return self.state

    def _receive(self, action: Any, source: ActionSource) -> None:
        self.dispatched.append((action, source))


class SampleMiddleware(Middleware[Any, Any, AppState]):
    def __init__(self) -> None:
        self.get_state = None
        self.output: ActionHandler | None = None
        self.receive_context_count = 0
        self.handle_action_count = 0
        self.handle_action_after_reducer_count = 0
        self.handled: List[Any] = []
        self.gates_after_reducer: List[GateState] = []

    def receive_context(self, get_state, output) -> None:
        self.get_state = get_state
        self.output = output
        self.receive_context_count += 1

    def send(self, action: Any, source: ActionSource | None = None) -> None:
        if self.output is not None:
            self.output.dispatch(action, source or ActionSource.here())

    def handle(self, action: Any, source: ActionSource) -> AfterReducer:
        self.handle_action_count += 1
        self.handled.append(action)

        def after_reducer() -> None:
            self.handle_action_after_reducer_count += 1
            if self.get_state is not None:
                self.gates_after_reducer.append(self.get_state().sample_enabled)

        return AfterReducer.do(after_reducer)


@dataclass
class SampleEffectMiddleware(EffectMiddleware[Any, Any, AppState]):
    response: Any = field(default_factory=OneMore)
    handle_action_count: int = 0
    effect_run_count: int = 0

    def handle(self, action: Any, source: ActionSource, get_state) -> IO[Any]:
        self.handle_action_count += 1

        def run(output: ActionHandler) -> None:
            self.effect_run_count += 1
            output.dispatch(self.response, source)

        return IO(run)
