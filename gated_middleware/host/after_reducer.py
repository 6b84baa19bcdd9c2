from __future__ import annotations

from typing import Callable, Sequence


class AfterReducer:
    """
    Continuation a middleware returns from ``handle``. The host calls
    ``reducer_is_done()`` once the reducer has processed the action.
    """

    __slots__ = ("_callbacks",)

    def __init__(self, callbacks: Sequence[Callable[[], None]] = ()) -> None:
        self._callbacks = tuple(callbacks)

    @classmethod
    def do_nothing(cls) -> AfterReducer:
        return cls()

    @classmethod
    def do(cls, callback: Callable[[], None]) -> AfterReducer:
        return cls((callback,))

    def reducer_is_done(self) -> None:
        for callback in self._callbacks:
            callback()

    def __add__(self, other: AfterReducer) -> AfterReducer:
        return AfterReducer(self._callbacks + other._callbacks)

    def __len__(self) -> int:
        return len(self._callbacks)
