"""Log file record adapter."""

from typing import Optional, TextIO


class LogFileAdapter:
    """Adapter for appending records to a log file.

    The file is opened on construction, so an unusable path surfaces as
    OSError right away. Every record is flushed as soon as it is written.
    """

    def __init__(self, path: str):
        self.path = path
        self._file: Optional[TextIO] = open(path, "a", encoding="utf-8")

    def write(self, record: str) -> None:
        """Append record and flush."""
        if self._file is None:
            return

        self._file.write(record)
        self._file.flush()

    def close(self) -> None:
        """Close file (idempotent)."""
        if self._file is None:
            return

        self._file.close()
        self._file = None
