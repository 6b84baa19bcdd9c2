from typing import Generic

from gated_middleware.models import ActionSource

from .gateable import Gateable
from .io import IO
from .types import GetState, InputAction, OutputAction, State


class EffectMiddleware(Gateable, Generic[InputAction, OutputAction, State]):
    """
    Request/response middleware. ``handle`` receives the state reader with
    every action and returns a deferred ``IO`` the host runs later against
    its output sink.
    """

    def handle(
        self,
        action: InputAction,
        source: ActionSource,
        get_state: GetState[State],
    ) -> IO[OutputAction]:
        raise NotImplementedError("EffectMiddleware subclasses must implement handle()")
