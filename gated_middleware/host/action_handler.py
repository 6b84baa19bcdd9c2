from __future__ import annotations

from typing import Callable, Generic, TypeVar

from gated_middleware.models import ActionSource, DispatchedAction


T = TypeVar("T")
U = TypeVar("U")


class ActionHandler(Generic[T]):
    """
    Output sink of a middleware. Forwards ``(action, source)`` toward the
    host store's dispatch pipeline.
    """

    __slots__ = ("_dispatch",)

    def __init__(self, dispatch: Callable[[T, ActionSource], None]) -> None:
        self._dispatch = dispatch

    def dispatch(self, action: T, source: ActionSource | None = None) -> None:
        if source is None:
            source = ActionSource.here(depth=2)

        self._dispatch(action, source)

    def dispatch_action(self, dispatched: DispatchedAction[T]) -> None:
        self._dispatch(dispatched.action, dispatched.source)

    def contramap(self, transform: Callable[[U], T]) -> ActionHandler[U]:
        return ActionHandler(
            lambda action, source: self._dispatch(transform(action), source)
        )
