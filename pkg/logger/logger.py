import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Protocol, runtime_checkable

from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Trace ID context variable (thread-safe, async-safe)
_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)


def _write_stdout(message: str) -> None:
    """Console sink; looks up sys.stdout per write so redirection is honored."""
    sys.stdout.write(message)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def trace_context(self, trace_id: Optional[str] = None) -> Iterator[None]: ...

    def get_trace_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """Console logger on top of loguru with per-task trace IDs.

    Replaces loguru's default sink, so modules that log through
    ``from loguru import logger`` (pkg.redis included) pick up the same
    format and level once this is constructed.

    Usage:
        logger = Logger(LoggerConfig(level="DEBUG"))
        with logger.trace_context(trace_id="smoke-1"):
            logger.info("Pinging Redis")
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger

        self._loguru.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        service_name = self.config.service_name

        def inject_context(record) -> bool:
            record["extra"].setdefault(SERVICE_KEY, service_name)
            record["extra"][TRACE_ID_KEY] = _trace_id_var.get() or ""
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_SERVICE} | "
            f"{LOG_FORMAT_TRACE} | {LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"
        )

        self._loguru.add(
            _write_stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=inject_context,
        )

    @contextmanager
    def trace_context(self, trace_id: Optional[str] = None):
        """Attach trace_id to every line logged inside the block.

        The previous value is restored on exit, so contexts nest.
        """
        token = _trace_id_var.set(trace_id) if trace_id else None
        try:
            yield
        finally:
            if token is not None:
                _trace_id_var.reset(token)

    def get_trace_id(self) -> Optional[str]:
        return _trace_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).error(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).exception(message, **kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
