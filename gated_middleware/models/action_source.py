from __future__ import annotations

import sys

import msgspec


class ActionSource(msgspec.Struct, frozen=True, kw_only=True):
    """
    Describes the entity that dispatched an action. Gated middlewares pass
    it through to the inner middleware and the host sink untouched.
    """

    filename: str
    function_name: str
    line_number: int
    info: str | None = None

    @classmethod
    def here(cls, info: str | None = None, depth: int = 1) -> ActionSource:
        frame = sys._getframe(depth)
        code = frame.f_code

        return cls(
            filename=code.co_filename,
            function_name=code.co_name,
            line_number=frame.f_lineno,
            info=info,
        )
