"""Hardware-control collaborator interface (adapter pattern)."""

from enum import IntEnum
from typing import Any, Callable, Optional, Protocol

# Status code the collaborator expects back from its debug callback
RIG_OK = 0


class Severity(IntEnum):
    """Debug levels, numerically identical to hamlib's rig_debug_level_e."""
    NONE = 0
    BUG = 1
    ERR = 2
    WARN = 3
    VERBOSE = 4
    TRACE = 5


class Source(IntEnum):
    """Who produced a debug message. Display only."""
    NONE = 0
    EXTERNAL_LIBRARY = 1
    APPLICATION = 2


# (level, user_data, template, args) -> status
DebugCallback = Callable[[int, Any, str, tuple], int]


class IRigDebugCollaborator(Protocol):
    """Interface for the library whose debug output we receive."""

    def set_callback(
        self, callback: Optional[DebugCallback], user_data: Any = None
    ) -> None:
        """Install debug callback, None restores the library default."""
        ...

    def set_level(self, level: int) -> None:
        """Set the library's own debug threshold."""
        ...
