"""Shared workflow layer between the CLI and the entry store.

A session loads today's bucket, merges runtime tasks into the current entry,
and then prints, writes or opens the file for editing.
"""

import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from .adapters.file_standup import FileStandupStore
from .config import Config
from .core.entry import Document, Entry, Section, apply_previous_tasks
from .core.markdown import MarkdownCodec
from .core.views import all_entries_view, entry_view
from .ports import EditorLauncher, StandupStore

logger = logging.getLogger(__name__)


@dataclass
class RuntimeTasks:
    """Task lists supplied at runtime. None means "not supplied"."""

    current: list[str] | None = None
    previous: list[str] | None = None
    impediments: list[str] | None = None
    notes: list[str] | None = None


@dataclass
class StandupSession:
    """One invocation's loaded document and the date it works on."""

    config: Config
    store: StandupStore
    codec: MarkdownCodec
    document: Document
    date: date

    @property
    def file(self) -> Path:
        return self.store.file_for(self.date)

    @property
    def entry(self) -> Entry:
        """The current entry, created on first access."""
        return self.document.current_entry(self.date)


def open_standup(
    config: Config,
    target_date: date | None = None,
    store: StandupStore | None = None,
) -> StandupSession:
    """Load the bucket holding target_date (default today)."""
    target_date = target_date or date.today()
    codec = MarkdownCodec.from_config(config)
    store = store or FileStandupStore(config, codec)
    document = store.load(target_date)
    return StandupSession(config=config, store=store, codec=codec, document=document, date=target_date)


def apply_runtime_tasks(
    session: StandupSession,
    tasks: RuntimeTasks,
    append_previous: bool = True,
) -> Entry:
    """
    Merge runtime tasks into the current entry.

    Previous tasks follow the carry-forward policy (see apply_previous_tasks);
    the other sections are replaced when supplied.
    """
    entry = session.entry

    previous = None
    if append_previous and entry.pending_carry_forward:
        previous = session.store.load_previous_entry(session.date, session.document)
        if previous is None:
            logger.debug("No previous entry to carry forward")
    apply_previous_tasks(session.document, entry, tasks.previous, append_previous, previous)

    for section, values in (
        (Section.CURRENT, tasks.current),
        (Section.IMPEDIMENTS, tasks.impediments),
        (Section.NOTES, tasks.notes),
    ):
        if values is not None:
            logger.debug(f"Setting {section.value} to {values}")
            session.document.replace_tasks(entry, section, values)

    return entry


def format_current_entry(session: StandupSession, as_json: bool = False) -> str:
    """Current entry as markdown or JSON."""
    if as_json:
        return json.dumps(entry_view(session.entry, session.codec), indent=2)
    return session.codec.render_entry(session.entry)


def format_all_entries(session: StandupSession, as_json: bool = False) -> str:
    """Every entry in the loaded bucket as markdown or JSON."""
    if as_json:
        return json.dumps(all_entries_view(session.document, session.codec), indent=2)
    return session.codec.render(session.document)


def write_standup(session: StandupSession) -> Path:
    """Persist the session's document."""
    return session.store.write(session.document, session.date)


def edit_standup(session: StandupSession, editor: EditorLauncher) -> None:
    """Open the session's file in an editor."""
    editor.open(session.file)
