"""Record output interface (adapter pattern)."""

from typing import Protocol


class ILineWriter(Protocol):
    """Interface for formatted record output."""

    def write(self, record: str) -> None:
        """Write one newline-terminated record."""
        ...
