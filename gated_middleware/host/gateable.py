from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gated_middleware.models import GateState

from .types import Projection

if TYPE_CHECKING:
    from gated_middleware.middleware import GatedEffectMiddleware, GatedMiddleware


class Gateable:
    """
    Fluent access to the gating combinators. Mixed into both middleware
    shapes so any middleware can be wrapped with ``middleware.gated(...)``.
    """

    def gated(
        self,
        control_action: Projection,
        turn_on: Any,
        turn_off: Any,
        default: GateState,
    ) -> GatedMiddleware | GatedEffectMiddleware:
        from gated_middleware.combinators import gated

        return gated(
            self,
            control_action,
            turn_on=turn_on,
            turn_off=turn_off,
            default=default,
        )

    def gated_by_flag(
        self,
        control_action: Projection,
        default: GateState,
    ) -> GatedMiddleware | GatedEffectMiddleware:
        from gated_middleware.combinators import gated_by_flag

        return gated_by_flag(self, control_action, default=default)

    def gated_by_gate_state(
        self,
        control_action: Projection,
        default: GateState,
    ) -> GatedMiddleware | GatedEffectMiddleware:
        from gated_middleware.combinators import gated_by_gate_state

        return gated_by_gate_state(self, control_action, default=default)

    def gated_by_state(
        self,
        state: Projection,
    ) -> GatedMiddleware | GatedEffectMiddleware:
        from gated_middleware.combinators import gated_by_state

        return gated_by_state(self, state)

    def gated_by_state_flag(
        self,
        state: Projection,
    ) -> GatedMiddleware | GatedEffectMiddleware:
        from gated_middleware.combinators import gated_by_state_flag

        return gated_by_state_flag(self, state)
