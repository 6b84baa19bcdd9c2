from __future__ import annotations

from typing import Callable, Generic, TypeVar

from gated_middleware.models import ActionSource, DispatchedAction

from .action_handler import ActionHandler


T = TypeVar("T")
U = TypeVar("U")


class IO(Generic[T]):
    """
    Deferred side effect returned by an ``EffectMiddleware``. Nothing runs
    until the host calls ``run(output)``, usually after the reducer.
    """

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[ActionHandler[T]], None]) -> None:
        self._run = run

    @classmethod
    def pure(cls) -> IO[T]:
        return cls(lambda output: None)

    def run(self, output: ActionHandler[T]) -> None:
        self._run(output)

    def flat_map(self, transform: Callable[[DispatchedAction[T]], IO[U]]) -> IO[U]:
        """
        Run this effect and, for every action it dispatches, run the effect
        ``transform`` builds from it against the same output.
        """

        def run(output: ActionHandler[U]) -> None:
            def chain(action: T, source: ActionSource) -> None:
                transform(
                    DispatchedAction(action=action, source=source)
                ).run(output)

            self._run(ActionHandler(chain))

        return IO(run)

    def __add__(self, other: IO[T]) -> IO[T]:
        def run(output: ActionHandler[T]) -> None:
            self._run(output)
            other.run(output)

        return IO(run)
