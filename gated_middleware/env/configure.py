from gated_middleware.logging import LoggingConfig

from .env import Env
from .load_env import load_env


def configure(env: Env | None = None) -> Env:
    """
    Apply logging settings from ``env`` (or from the process environment
    and ``.env`` when omitted) to the process-wide ``LoggingConfig``.
    """
    if env is None:
        env = load_env(Env)

    LoggingConfig().update(
        log_level=env.GATED_MIDDLEWARE_LOG_LEVEL,
        log_output=env.GATED_MIDDLEWARE_LOG_OUTPUT,
        log_path=env.GATED_MIDDLEWARE_LOG_PATH or "",
        disabled_loggers=env.disabled_loggers(),
    )

    return env
