"""Adapter implementations for the debug handler."""

from .stderr_adapter import StderrAdapter
from .log_file_adapter import LogFileAdapter
from .py_logging_adapter import PyLoggingAdapter, severity_from_logging

__all__ = [
    'StderrAdapter',
    'LogFileAdapter',
    'PyLoggingAdapter',
    'severity_from_logging',
]
