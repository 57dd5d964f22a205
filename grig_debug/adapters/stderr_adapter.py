"""Stderr record adapter."""

import sys
from typing import Optional, TextIO


class StderrAdapter:
    """Adapter for record output on a text stream (stderr by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write(self, record: str) -> None:
        """Write record to the stream."""
        # Resolved per call so a redirected sys.stderr is honoured
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(record)
