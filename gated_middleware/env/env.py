from __future__ import annotations
from pydantic import BaseModel, StrictStr
from typing import Callable, Dict, List, Literal, Union

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    GATED_MIDDLEWARE_LOG_LEVEL: Literal[
        "trace", "debug", "info", "warn", "error", "critical", "fatal"
    ] = "info"
    GATED_MIDDLEWARE_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    GATED_MIDDLEWARE_LOG_PATH: StrictStr | None = None
    GATED_MIDDLEWARE_DISABLED_LOGGERS: StrictStr = ""

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "GATED_MIDDLEWARE_LOG_LEVEL": str,
            "GATED_MIDDLEWARE_LOG_OUTPUT": str,
            "GATED_MIDDLEWARE_LOG_PATH": str,
            "GATED_MIDDLEWARE_DISABLED_LOGGERS": str,
        }

    def disabled_loggers(self) -> List[str]:
        return [
            name.strip()
            for name in self.GATED_MIDDLEWARE_DISABLED_LOGGERS.split(",")
            if name.strip()
        ]
