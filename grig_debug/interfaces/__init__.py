"""Interface definitions for the debug handler."""

from .i_rig_debug_collaborator import (
    IRigDebugCollaborator,
    DebugCallback,
    Severity,
    Source,
    RIG_OK,
)
from .i_line_writer import ILineWriter

__all__ = [
    'IRigDebugCollaborator',
    'DebugCallback',
    'Severity',
    'Source',
    'RIG_OK',
    'ILineWriter',
]
