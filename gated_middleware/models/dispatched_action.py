from typing import Generic, TypeVar

import msgspec

from .action_source import ActionSource


T = TypeVar("T")


class DispatchedAction(msgspec.Struct, Generic[T], kw_only=True):
    action: T
    source: ActionSource
