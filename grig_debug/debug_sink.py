"""Debug message handler.

Receives debug messages generated by the rig library and by the application
itself, filters them against the configured threshold and prints them line
by line on stderr. If the handler has been initialised with a file name the
records are appended to that file as well.

Record format::

    2024/01/31 12:00:00|HAMLIB|4|rig_open called
"""

import sys
import threading
from collections.abc import Mapping
from datetime import datetime
from typing import Callable, Optional, Sequence
from .adapters import StderrAdapter, LogFileAdapter
from .config import SEPARATOR, SOURCE_NAMES, TIME_FORMAT
from .interfaces import (
    IRigDebugCollaborator,
    ILineWriter,
    Severity,
    Source,
    RIG_OK,
)

# g_strchomp strips the g_ascii_isspace set
_TRAILING_SPACE = " \t\n\r\f\v"


class DebugSink:
    """Debug handler bound to one rig library collaborator."""

    def __init__(
        self,
        collaborator: IRigDebugCollaborator,
        console: Optional[ILineWriter] = None,
        separator: str = SEPARATOR,
        source_names: Sequence[str] = SOURCE_NAMES,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.collaborator = collaborator
        self.console = console if console is not None else StderrAdapter()
        self.separator = separator
        self.source_names = tuple(source_names)
        self.clock = clock

        self._level = Severity.NONE
        self._logfile: Optional[LogFileAdapter] = None
        self._initialised = False
        # The library may call back from its own I/O thread
        self._lock = threading.RLock()

    @property
    def initialised(self) -> bool:
        return self._initialised

    def init(self, logfile_path: Optional[str] = None) -> None:
        """Take over the library's debug output.

        A log file that cannot be opened is reported on stderr, whatever the
        threshold, and the handler carries on without file logging.
        """
        with self._lock:
            self._close_log_file()

            open_error = None
            if logfile_path:
                try:
                    self._logfile = LogFileAdapter(logfile_path)
                except OSError as e:
                    open_error = e

            self.collaborator.set_callback(self.receive_from_library, None)
            self._initialised = True

            self.log(Severity.VERBOSE, "%s: Debug handler initialised.",
                     "init")
            if open_error is not None:
                print(
                    f"ERROR: cannot open log file {logfile_path}: {open_error}",
                    file=sys.stderr
                )
                self.log(Severity.ERR, "%s: Cannot open log file %s: %s",
                         "init", logfile_path, open_error)

    def close(self) -> None:
        """Hand debug output back to the library (idempotent)."""
        with self._lock:
            if not self._initialised:
                return

            self.log(Severity.VERBOSE, "%s: Shutting down debug handler.",
                     "close")
            try:
                self.collaborator.set_callback(None)
            finally:
                self._initialised = False
                self._close_log_file()

    def receive_from_library(
        self, level: int, user_data, template: str, args: tuple = ()
    ) -> int:
        """Debug callback installed in the rig library."""
        self._handle(Source.EXTERNAL_LIBRARY, level, template, args)
        return RIG_OK

    def log(self, level: int, template: str, *args) -> int:
        """Application debug message, printf-style."""
        self._handle(Source.APPLICATION, level, template, args)
        return RIG_OK

    def set_level(self, level: int) -> None:
        """Set threshold; values outside NONE..TRACE are ignored."""
        if isinstance(level, bool) or not isinstance(level, int):
            return
        if not Severity.NONE <= level <= Severity.TRACE:
            return

        with self._lock:
            self._level = Severity(level)
            self.collaborator.set_level(int(level))

    def get_level(self) -> Severity:
        return self._level

    def get_log_file_path(self) -> Optional[str]:
        """Path of the log file being written, None if there is none."""
        logfile = self._logfile
        return logfile.path if logfile is not None else None

    def _handle(self, source: Source, level: int, template, args) -> None:
        """Filter, format, split and emit. Never raises."""
        try:
            with self._lock:
                if not self._enabled(level):
                    return

                for line in self._split(self._format(template, args)):
                    self._emit(source, level, line)

        except Exception as e:
            print(f"ERROR: debug message dropped: {e}", file=sys.stderr)

    def _enabled(self, level) -> bool:
        if isinstance(level, bool) or not isinstance(level, int):
            return False
        return level <= self._level

    def _format(self, template, args) -> str:
        """Printf-style substitution, raw template on mismatch."""
        if len(args) == 1 and isinstance(args[0], Mapping):
            args = args[0]

        try:
            return template % args
        except (TypeError, ValueError, KeyError) as e:
            self.log(Severity.WARN,
                     "Malformed debug message template: %r (%s)",
                     template, e)
            return str(template)

    @staticmethod
    def _split(message: str) -> list:
        """Drop trailing whitespace, then one entry per line."""
        message = message.rstrip(_TRAILING_SPACE)
        if not message:
            return []
        return message.split("\n")

    def _source_name(self, source: Source) -> str:
        if 0 <= source < len(self.source_names):
            return self.source_names[source]
        return str(int(source))

    def _emit(self, source: Source, level: int, message: str) -> None:
        """Write one record to stderr and the log file."""
        record = self.separator.join([
            self.clock().strftime(TIME_FORMAT),
            self._source_name(source),
            str(int(level)),
            message,
        ]) + "\n"

        try:
            self.console.write(record)
        except (OSError, ValueError):
            # stderr is gone, nowhere left to report
            pass

        if self._logfile is None:
            return

        try:
            self._logfile.write(record)
        except (OSError, ValueError) as e:
            print(
                f"ERROR: log file write failed, file logging disabled: {e}",
                file=sys.stderr
            )
            self._close_log_file()

    def _close_log_file(self) -> None:
        logfile, self._logfile = self._logfile, None
        if logfile is None:
            return

        try:
            logfile.close()
        except OSError as e:
            print(f"ERROR: log file close failed: {e}", file=sys.stderr)
