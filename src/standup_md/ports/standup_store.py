"""Standup storage interface."""

from datetime import date
from pathlib import Path
from typing import Protocol

from ..core.entry import Document, Entry


class StandupStore(Protocol):
    """Interface for loading and saving standup documents."""

    def file_for(self, target_date: date) -> Path:
        """Path of the file backing the bucket that holds target_date."""
        ...

    def load(self, target_date: date) -> Document:
        """Load the document for target_date's bucket. Empty if missing."""
        ...

    def load_previous_entry(self, target_date: date, document: Document | None = None) -> Entry | None:
        """Latest entry before target_date, looking into older buckets if needed."""
        ...

    def write(self, document: Document, target_date: date) -> Path:
        """Replace the bucket file for target_date with document."""
        ...
