"""Collaborator adapter for libraries logging through Python's logging module."""

import logging
from typing import Any, Optional
from ..interfaces import DebugCallback, Severity, RIG_OK

# Severity -> logger level; NONE sits above CRITICAL so nothing passes
_LOGGING_LEVELS = {
    Severity.NONE: logging.CRITICAL + 10,
    Severity.BUG: logging.CRITICAL,
    Severity.ERR: logging.ERROR,
    Severity.WARN: logging.WARNING,
    Severity.VERBOSE: logging.INFO,
    Severity.TRACE: logging.DEBUG,
}


def severity_from_logging(levelno: int) -> Severity:
    """Map a logging level number onto the debug severity scale."""
    if levelno >= logging.CRITICAL:
        return Severity.BUG
    if levelno >= logging.ERROR:
        return Severity.ERR
    if levelno >= logging.WARNING:
        return Severity.WARN
    if levelno >= logging.INFO:
        return Severity.VERBOSE
    return Severity.TRACE


class _ForwardingHandler(logging.Handler):
    """Hands every record to a debug callback, unformatted."""

    def __init__(self, callback: DebugCallback, user_data: Any):
        super().__init__()
        self.callback = callback
        self.user_data = user_data

    def emit(self, record: logging.LogRecord) -> None:
        level = severity_from_logging(record.levelno)

        # Tracebacks need the formatter, ship them as one pre-built message
        if record.exc_info or record.stack_info:
            text = self.format(record)
            status = self.callback(level, self.user_data, "%s", (text,))
        elif not record.args:
            # without args logging never applies %, the text is final
            status = self.callback(
                level, self.user_data, "%s", (record.getMessage(),)
            )
        else:
            args = record.args
            if not isinstance(args, tuple):
                args = (args,)
            status = self.callback(
                level, self.user_data, str(record.msg), args
            )

        if status != RIG_OK:
            self.handleError(record)


class PyLoggingAdapter:
    """Adapter for a rig library that reports through a named logger."""

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._handler: Optional[_ForwardingHandler] = None
        self._propagate = self.logger.propagate

    def set_callback(
        self, callback: Optional[DebugCallback], user_data: Any = None
    ) -> None:
        """Install callback, None restores default logging behaviour."""
        if self._handler is not None:
            self.logger.removeHandler(self._handler)
            self._handler = None
            self.logger.propagate = self._propagate

        if callback is None:
            return

        self._propagate = self.logger.propagate
        self._handler = _ForwardingHandler(callback, user_data)
        self.logger.addHandler(self._handler)
        # records go to the sink only, not to root handlers as well
        self.logger.propagate = False

    def set_level(self, level: int) -> None:
        """Set logger threshold from a debug severity."""
        self.logger.setLevel(_LOGGING_LEVELS[Severity(level)])
