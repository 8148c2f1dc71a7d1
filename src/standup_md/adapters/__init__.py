"""Adapters - I/O implementations of ports."""

from .file_standup import FileStandupStore, resolve_file_path
from .editor import SubprocessEditor, resolve_editor

__all__ = [
    "FileStandupStore",
    "resolve_file_path",
    "SubprocessEditor",
    "resolve_editor",
]
