class GatedMiddlewareError(Exception):
    pass


class InvalidProjectionError(GatedMiddlewareError, TypeError):
    def __init__(self, projection: object) -> None:
        super().__init__(
            f"Expected a callable or an attribute path string, got {type(projection).__name__}"
        )
        self.projection = projection


class InvalidGateStateError(GatedMiddlewareError, ValueError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Unknown gate state {text!r}, expected 'active' or 'bypass'")
        self.text = text
