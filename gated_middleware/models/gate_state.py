from __future__ import annotations

from enum import Enum

from gated_middleware.exceptions import InvalidGateStateError


class GateState(str, Enum):
    """
    Whether the inner middleware of a gated middleware participates in
    action processing.

    ACTIVE: the inner middleware handles every action and may dispatch.
    BYPASS: the inner middleware only receives control actions and its
    emissions are dropped.

    Serializes as its lowercase value, so it can live inside application
    state that is encoded with msgspec or pydantic.
    """

    ACTIVE = "active"
    BYPASS = "bypass"

    def encode(self) -> str:
        return self.value

    @classmethod
    def decode(cls, text: str) -> GateState:
        try:
            return cls(text)

        except ValueError as err:
            raise InvalidGateStateError(text) from err

    @classmethod
    def from_flag(cls, enabled: bool) -> GateState:
        return cls.ACTIVE if enabled else cls.BYPASS
