"""
Constructors for gated middlewares.

Each function wraps ``middleware`` in the gated wrapper matching its shape:
``GatedEffectMiddleware`` for an ``EffectMiddleware``, ``GatedMiddleware``
otherwise. Every call builds its own gate, so gated middlewares never share
gate state.

Control-action mappings and state projections are either callables or
dotted attribute paths (``"enable_sample"``, ``"settings.sample_enabled"``).
"""

from typing import Any

from gated_middleware.gates import (
    ActionGate,
    Gate,
    StateGate,
    to_control_action_map,
    to_state_map,
)
from gated_middleware.host import EffectMiddleware
from gated_middleware.host.types import Projection
from gated_middleware.middleware import GatedEffectMiddleware, GatedMiddleware
from gated_middleware.models import GateState


def gated(
    middleware: Any,
    control_action: Projection,
    turn_on: Any,
    turn_off: Any,
    default: GateState,
) -> GatedMiddleware | GatedEffectMiddleware:
    """
    Gate ``middleware`` by control actions. Any action for which
    ``control_action`` returns something other than ``None`` is always
    forwarded; it opens the gate when equal to ``turn_on`` and closes it
    when equal to ``turn_off``. Other actions are forwarded only while the
    gate is active. The gate starts at ``default``.
    """
    return _wrap(
        middleware,
        ActionGate(
            to_control_action_map(control_action),
            turn_on,
            turn_off,
            GateState.decode(default),
        ),
    )


def gated_by_flag(
    middleware: Any,
    control_action: Projection,
    default: GateState,
) -> GatedMiddleware | GatedEffectMiddleware:
    return gated(
        middleware,
        control_action,
        turn_on=True,
        turn_off=False,
        default=default,
    )


def gated_by_gate_state(
    middleware: Any,
    control_action: Projection,
    default: GateState,
) -> GatedMiddleware | GatedEffectMiddleware:
    return gated(
        middleware,
        control_action,
        turn_on=GateState.ACTIVE,
        turn_off=GateState.BYPASS,
        default=default,
    )


def gated_by_state(
    middleware: Any,
    state: Projection,
) -> GatedMiddleware | GatedEffectMiddleware:
    """
    Gate ``middleware`` by a ``GateState`` projected from application state,
    read before the reducer for each action.
    """
    return _wrap(middleware, StateGate(to_state_map(state)))


def gated_by_state_flag(
    middleware: Any,
    state: Projection,
) -> GatedMiddleware | GatedEffectMiddleware:
    state_map = to_state_map(state)

    return _wrap(
        middleware,
        StateGate(lambda current: GateState.from_flag(state_map(current))),
    )


def _wrap(middleware: Any, gate: Gate) -> GatedMiddleware | GatedEffectMiddleware:
    if isinstance(middleware, EffectMiddleware):
        return GatedEffectMiddleware(middleware, gate)

    return GatedMiddleware(middleware, gate)
