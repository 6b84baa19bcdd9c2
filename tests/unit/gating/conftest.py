import pytest

from gated_middleware.logging import LoggingConfig

from tests.unit.gating.mocks import (
    SampleEffectMiddleware,
    SampleMiddleware,
    Store,
)


@pytest.fixture(autouse=True)
def reset_logging_config():
    yield
    LoggingConfig().update(
        log_level="info",
        log_output="stderr",
        log_path="",
        disabled_loggers=[],
    )


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def sample_middleware() -> SampleMiddleware:
    return SampleMiddleware()


@pytest.fixture
def sample_effect_middleware() -> SampleEffectMiddleware:
    return SampleEffectMiddleware()
