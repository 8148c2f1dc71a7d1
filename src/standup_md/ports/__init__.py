"""Ports - interfaces/protocols for external dependencies."""

from .standup_store import StandupStore
from .editor import EditorLauncher

__all__ = [
    "StandupStore",
    "EditorLauncher",
]
