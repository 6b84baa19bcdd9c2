from .models import Entry, LogLevel


class GateTrace(Entry, kw_only=True):
    middleware: str
    action: str
    decision: str
    level: LogLevel = LogLevel.TRACE

class GateDebug(Entry, kw_only=True):
    gate: str
    control_action: str
    previous: str
    current: str
    level: LogLevel = LogLevel.DEBUG

class GateSuppressed(Entry, kw_only=True):
    middleware: str
    action: str
    reason: str
    level: LogLevel = LogLevel.DEBUG
