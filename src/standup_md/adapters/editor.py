"""Editor adapter - subprocess wrapper for the user's text editor."""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Mapping

from ..config import Config

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vim"


def resolve_editor(config: Config, environ: Mapping[str, str] = os.environ) -> str:
    """Editor from preferences, then $VISUAL, then $EDITOR, then vim."""
    return config.editor or environ.get("VISUAL") or environ.get("EDITOR") or DEFAULT_EDITOR


class SubprocessEditor:
    """
    Editor subprocess adapter.

    Implements EditorLauncher protocol. The command may carry arguments,
    e.g. "code --wait".
    """

    def __init__(self, command: str = DEFAULT_EDITOR):
        self.command = command

    def open(self, path: Path) -> None:
        """Open path in the editor and wait for it to exit."""
        argv = [*shlex.split(self.command), str(path)]
        logger.info(f"Opening {path} in {self.command}")
        try:
            proc = subprocess.run(argv)
        except FileNotFoundError:
            raise RuntimeError(f"Editor not found: {self.command}")
        if proc.returncode != 0:
            logger.error(f"Editor exited with status {proc.returncode}")
            raise RuntimeError(f"Editor '{self.command}' exited with status {proc.returncode}")
