"""File-based standup storage adapter."""

import logging
import os
import tempfile
from datetime import date, timedelta
from pathlib import Path
from typing import Sequence

from ..config import Config
from ..core.entry import Document, Entry
from ..core.markdown import MarkdownCodec
from ..errors import FormatError, NotFoundError

logger = logging.getLogger(__name__)

# How far back to look for an older bucket file when carrying tasks forward.
PREVIOUS_LOOKBACK_DAYS = 366


def resolve_file_path(
    target_date: date,
    directory_candidates: Sequence[Path | str],
    file_name_format: str,
) -> Path:
    """
    Path of the file for target_date.

    Returns the first candidate directory that already holds the file, or the
    first candidate when none does (the file is yet to be created).
    """
    if not directory_candidates:
        raise NotFoundError("No standup directory configured")

    file_name = target_date.strftime(file_name_format)
    candidates = [Path(d).expanduser() for d in directory_candidates]
    for directory in candidates:
        path = directory / file_name
        if path.is_file():
            return path
    return candidates[0] / file_name


class FileStandupStore:
    """
    File-based standup storage.

    Implements StandupStore protocol. Each bucket (e.g. a month) gets a
    markdown file named by Config.file_name_format.
    """

    def __init__(self, config: Config, codec: MarkdownCodec | None = None):
        self.config = config
        self.codec = codec or MarkdownCodec.from_config(config)

    def file_for(self, target_date: date) -> Path:
        return resolve_file_path(target_date, self.config.directories, self.config.file_name_format)

    def _read(self, path: Path) -> Document:
        text = path.read_text(encoding="utf-8")
        try:
            return self.codec.parse(text, source=path)
        except FormatError as e:
            logger.error(f"Could not parse {path}: {e.message}")
            raise

    def load(self, target_date: date) -> Document:
        """Load the document for target_date's bucket. Empty if missing."""
        path = self.file_for(target_date)
        if not path.exists():
            logger.info(f"No standup file at {path}, starting a new one")
            return Document()
        logger.info(f"Loading {path}")
        return self._read(path)

    def load_previous_entry(self, target_date: date, document: Document | None = None) -> Entry | None:
        """
        Latest entry before target_date.

        Checks document first (the bucket already loaded for target_date),
        then walks back day by day to the first older bucket file that exists.
        """
        if document is not None:
            entry = document.previous_entry(target_date)
            if entry is not None:
                return entry

        current_path = self.file_for(target_date)
        seen = {current_path}
        for days_back in range(1, PREVIOUS_LOOKBACK_DAYS + 1):
            day = target_date - timedelta(days=days_back)
            path = self.file_for(day)
            if path in seen:
                continue
            seen.add(path)
            if not path.is_file():
                continue
            entry = self._read(path).previous_entry(target_date)
            if entry is not None:
                logger.debug(f"Previous entry {entry.date.isoformat()} found in {path}")
                return entry
        return None

    def write(self, document: Document, target_date: date) -> Path:
        """
        Replace the bucket file for target_date with document.

        Writes to a temporary file in the same directory and renames it into
        place, so a failed write leaves the original untouched.
        """
        path = self.file_for(target_date)
        path.parent.mkdir(parents=True, exist_ok=True)
        content = self.codec.render(document)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            if path.exists():
                os.chmod(tmp_name, path.stat().st_mode & 0o777)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info(f"Wrote {len(document)} entries to {path}")
        return path
