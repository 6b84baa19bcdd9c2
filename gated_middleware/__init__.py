"""
Gated middleware.

Wraps a store middleware so it can be switched between ``active`` and
``bypass`` at runtime, either by control actions flowing through the store
or by a value kept in application state. Control actions always reach the
inner middleware so it can clean up when it is switched off.
"""

from gated_middleware.exceptions import (
    GatedMiddlewareError as GatedMiddlewareError,
    InvalidGateStateError as InvalidGateStateError,
    InvalidProjectionError as InvalidProjectionError,
)
from gated_middleware.models import (
    ActionSource as ActionSource,
    DispatchedAction as DispatchedAction,
    GateState as GateState,
)
from gated_middleware.host import (
    IO as IO,
    ActionHandler as ActionHandler,
    AfterReducer as AfterReducer,
    EffectMiddleware as EffectMiddleware,
    Middleware as Middleware,
)
from gated_middleware.gates import (
    ActionGate as ActionGate,
    Gate as Gate,
    StateGate as StateGate,
)
from gated_middleware.middleware import (
    GatedEffectMiddleware as GatedEffectMiddleware,
    GatedMiddleware as GatedMiddleware,
)
from gated_middleware.combinators import (
    gated as gated,
    gated_by_flag as gated_by_flag,
    gated_by_gate_state as gated_by_gate_state,
    gated_by_state as gated_by_state,
    gated_by_state_flag as gated_by_state_flag,
)
