from operator import attrgetter
from typing import Any, Callable

from gated_middleware.exceptions import InvalidProjectionError
from gated_middleware.host.types import Projection


def to_control_action_map(control_action: Projection) -> Callable[[Any], Any]:
    """
    Normalize a control-action mapping. A dotted attribute path resolves to
    ``None`` (not a control action) as soon as any segment is missing or
    ``None``.
    """
    if isinstance(control_action, str):
        path = control_action.split(".")

        def project(action: Any) -> Any:
            value = action
            for attribute in path:
                value = getattr(value, attribute, None)
                if value is None:
                    return None

            return value

        return project

    if callable(control_action):
        return control_action

    raise InvalidProjectionError(control_action)


def to_state_map(state: Projection) -> Callable[[Any], Any]:
    if isinstance(state, str):
        return attrgetter(state)

    if callable(state):
        return state

    raise InvalidProjectionError(state)
