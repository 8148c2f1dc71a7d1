"""Editor launcher interface."""

from pathlib import Path
from typing import Protocol


class EditorLauncher(Protocol):
    """Interface for opening a standup file for manual editing."""

    def open(self, path: Path) -> None:
        """Open path and wait for the editor to exit."""
        ...
