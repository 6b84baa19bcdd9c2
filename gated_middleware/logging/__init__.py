from .config import LoggingConfig as LoggingConfig
from .gated_middleware_logging_models import (
    GateDebug as GateDebug,
    GateSuppressed as GateSuppressed,
    GateTrace as GateTrace,
)
from .models import (
    Entry as Entry,
    Log as Log,
    LogLevel as LogLevel,
)
from .streams import (
    Logger as Logger,
    get_logger as get_logger,
)
