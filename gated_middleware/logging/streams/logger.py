from __future__ import annotations

import datetime
import os
import pathlib
import sys
import threading
from typing import Callable, Dict, TypeVar

import msgspec

from gated_middleware.logging.config import LoggingConfig, StreamType
from gated_middleware.logging.models import Entry, Log, LogLevel

T = TypeVar('T', bound=Entry)


DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"
ERROR_TEMPLATE = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"


class Logger:
    """
    Synchronous structured logger. Gating runs inside the host's dispatch
    call, so entries are written in place instead of being scheduled on an
    event loop.

    Entries render through ``template`` to stdout/stderr (per
    ``LoggingConfig.output``) or, when a path is configured, are appended
    to that file as msgspec-encoded JSON lines. The file is opened per
    entry and closed before ``log`` returns.
    """

    def __init__(
        self,
        name: str = 'gated_middleware',
        template: str | None = None,
        path: str | None = None,
    ) -> None:
        self._name = name
        self._template = template or DEFAULT_TEMPLATE
        self._path = path
        self._config = LoggingConfig()

    @property
    def name(self):
        return self._name

    def enabled(self, level: LogLevel) -> bool:
        return self._config.enabled(self._name, level)

    def log(
        self,
        entry: T,
        template: str | None = None,
        path: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        filename, line_number, function_name = self._find_caller()

        if path is None:
            path = self._path or self._config.path

        if path:
            self._log_to_file(
                entry,
                path,
                filename=filename,
                function_name=function_name,
                line_number=line_number,
            )

        else:
            self._log(
                entry,
                template=template or self._template,
                filename=filename,
                function_name=function_name,
                line_number=line_number,
            )

    def _log(
        self,
        entry: T,
        template: str,
        filename: str,
        function_name: str,
        line_number: int,
    ):
        stream = sys.stdout if self._config.output == StreamType.STDOUT else sys.stderr

        context = {
            "filename": filename,
            "function_name": function_name,
            "line_number": line_number,
            "thread_id": threading.get_native_id(),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        }

        try:
            stream.write(entry.to_template(template, context=context) + "\n")
            stream.flush()

        except Exception as err:
            self._log_error(entry, context, err)

    def _log_to_file(
        self,
        entry: T,
        path: str,
        filename: str,
        function_name: str,
        line_number: int,
    ):
        log = Log(
            entry=entry,
            logger=self._name,
            filename=filename,
            function_name=function_name,
            line_number=line_number,
        )

        try:
            logfile_path = pathlib.Path(path).absolute()
            os.makedirs(logfile_path.parent, exist_ok=True)

            with open(logfile_path, "ab") as logfile:
                logfile.write(msgspec.json.encode(log) + b"\n")

        except Exception as err:
            self._log_error(
                entry,
                {
                    "filename": filename,
                    "function_name": function_name,
                    "line_number": line_number,
                    "thread_id": log.thread_id,
                    "timestamp": log.timestamp,
                },
                err,
            )

    def _log_error(self, entry: T, context: dict, err: Exception):
        if sys.stderr.closed is False:
            sys.stderr.write(
                entry.to_template(
                    ERROR_TEMPLATE,
                    context={
                        **context,
                        "error": str(err),
                    },
                ) + "\n"
            )

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(2)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )


_loggers: Dict[str, Logger] = {}
_loggers_lock = threading.Lock()


def get_logger(name: str = 'gated_middleware') -> Logger:
    """
    Return the shared logger for ``name``, creating it on first use. Gates
    and gated middlewares built without an explicit logger use this one.
    """
    with _loggers_lock:
        logger = _loggers.get(name)
        if logger is None:
            logger = Logger(name=name)
            _loggers[name] = logger

        return logger
