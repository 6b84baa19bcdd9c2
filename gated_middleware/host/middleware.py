from typing import Generic

from gated_middleware.models import ActionSource

from .action_handler import ActionHandler
from .after_reducer import AfterReducer
from .gateable import Gateable
from .types import GetState, InputAction, OutputAction, State


class Middleware(Gateable, Generic[InputAction, OutputAction, State]):
    """
    Context-then-handle middleware. The host calls ``receive_context`` once
    with its state reader and output sink, then ``handle`` for every action
    before the reducer runs. The returned ``AfterReducer`` is invoked by the
    host once the reducer is done.
    """

    def receive_context(
        self,
        get_state: GetState[State],
        output: ActionHandler[OutputAction],
    ) -> None:
        pass

    def handle(
        self,
        action: InputAction,
        source: ActionSource,
    ) -> AfterReducer:
        raise NotImplementedError("Middleware subclasses must implement handle()")
