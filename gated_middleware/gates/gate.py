from typing import Generic

from gated_middleware.host.types import InputAction, OutputAction, State


class Gate(Generic[InputAction, OutputAction, State]):
    """
    Gating strategy. ``should_handle_action`` decides whether an incoming
    action reaches the inner middleware, ``should_dispatch_action`` whether
    an action the inner middleware emits reaches the store.
    """

    __slots__ = ()

    def should_handle_action(self, action: InputAction, state: State) -> bool:
        raise NotImplementedError("Gate subclasses must implement should_handle_action()")

    def should_dispatch_action(self, action: OutputAction, state: State) -> bool:
        raise NotImplementedError("Gate subclasses must implement should_dispatch_action()")
