"""Debug message handler for the rig control GUI."""

from .debug_sink import DebugSink
from .interfaces import Severity, Source, RIG_OK

__all__ = [
    'DebugSink',
    'Severity',
    'Source',
    'RIG_OK',
]
