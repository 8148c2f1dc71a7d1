"""Standup document model - pure entry logic with no I/O."""

import bisect
import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable

logger = logging.getLogger(__name__)


class Section(Enum):
    """The four sections of a standup entry."""

    CURRENT = "current"
    PREVIOUS = "previous"
    IMPEDIMENTS = "impediments"
    NOTES = "notes"


DEFAULT_SECTION_ORDER = (
    Section.PREVIOUS,
    Section.CURRENT,
    Section.IMPEDIMENTS,
    Section.NOTES,
)


def resolve_section_order(order: Iterable[Section | str] | None = None) -> tuple[Section, ...]:
    """
    Full section order from a possibly partial list.

    Listed sections come first; the rest follow in DEFAULT_SECTION_ORDER.
    """
    resolved: list[Section] = []
    for item in order or ():
        section = item if isinstance(item, Section) else Section(item)
        if section in resolved:
            raise ValueError(f"Section listed twice: {section.value}")
        resolved.append(section)
    resolved.extend(s for s in DEFAULT_SECTION_ORDER if s not in resolved)
    return tuple(resolved)


def clean_tasks(tasks: Iterable[str]) -> list[str]:
    """Strip task strings, fold line breaks and drop blank ones."""
    return [" ".join(t.strip().splitlines()) for t in tasks if t and t.strip()]


@dataclass
class Entry:
    """One day's standup update."""

    date: date
    sections: dict[Section, list[str]] = field(default_factory=dict)
    # Set on entries created by Document.current_entry, cleared by carry_forward.
    pending_carry_forward: bool = field(default=False, compare=False, repr=False)

    def __post_init__(self):
        self.sections = {s: clean_tasks(self.sections.get(s, [])) for s in Section}

    def tasks(self, section: Section) -> list[str]:
        return self.sections[section]

    @property
    def current(self) -> list[str]:
        return self.sections[Section.CURRENT]

    @property
    def previous(self) -> list[str]:
        return self.sections[Section.PREVIOUS]

    @property
    def impediments(self) -> list[str]:
        return self.sections[Section.IMPEDIMENTS]

    @property
    def notes(self) -> list[str]:
        return self.sections[Section.NOTES]

    def is_empty(self) -> bool:
        return not any(self.sections.values())


class Document:
    """
    All standup entries backed by one file.

    Entries are kept sorted by date and each date appears at most once.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: list[Entry] = []
        for entry in entries:
            self.add_entry(entry)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._entries == other._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Document({self._entries!r})"

    def _index(self, target_date: date) -> int:
        return bisect.bisect_left([e.date for e in self._entries], target_date)

    def get(self, target_date: date) -> Entry | None:
        """Entry for a date, or None."""
        i = self._index(target_date)
        if i < len(self._entries) and self._entries[i].date == target_date:
            return self._entries[i]
        return None

    def add_entry(self, entry: Entry) -> Entry:
        """Insert an entry in date order. Raises ValueError on a duplicate date."""
        i = self._index(entry.date)
        if i < len(self._entries) and self._entries[i].date == entry.date:
            raise ValueError(f"Duplicate entry for {entry.date.isoformat()}")
        self._entries.insert(i, entry)
        return entry

    def current_entry(self, target_date: date) -> Entry:
        """Entry for target_date, created empty if missing."""
        entry = self.get(target_date)
        if entry is None:
            logger.debug(f"Creating entry for {target_date.isoformat()}")
            entry = self.add_entry(Entry(date=target_date, pending_carry_forward=True))
        return entry

    def previous_entry(self, before_date: date) -> Entry | None:
        """Latest entry strictly before before_date, or None."""
        i = self._index(before_date)
        return self._entries[i - 1] if i > 0 else None

    def append_tasks(self, entry: Entry, section: Section, tasks: Iterable[str]) -> None:
        entry.sections[section].extend(clean_tasks(tasks))

    def replace_tasks(self, entry: Entry, section: Section, tasks: Iterable[str]) -> None:
        entry.sections[section] = clean_tasks(tasks)

    def all_entries(self) -> tuple[Entry, ...]:
        """Snapshot of entries, oldest first."""
        return tuple(self._entries)


def carry_forward(current: Entry, previous: Entry | None) -> bool:
    """
    Seed current's previous tasks with previous's current tasks.

    Runs at most once per entry: only for an entry freshly created by
    Document.current_entry, and never again after the first call. Entries
    loaded from a file were seeded by the run that created them. The seed goes
    after any previous tasks already added. Returns True if tasks were added.
    """
    if not current.pending_carry_forward:
        return False
    current.pending_carry_forward = False
    if previous is None:
        return False
    seed = list(previous.current)
    if not seed:
        return False
    logger.debug(
        f"Carrying {len(seed)} task(s) from {previous.date.isoformat()} "
        f"to {current.date.isoformat()}"
    )
    current.previous.extend(seed)
    return True


def apply_previous_tasks(
    document: Document,
    entry: Entry,
    tasks: Iterable[str] | None,
    append_previous: bool = True,
    previous: Entry | None = None,
) -> None:
    """
    Merge supplied previous tasks into entry.

    With append_previous, the prior entry's current tasks are carried forward
    first and the supplied tasks appended after them. Otherwise supplied tasks
    replace the section and nothing is carried.

    previous defaults to the document's own previous entry.
    """
    if append_previous:
        if previous is None:
            previous = document.previous_entry(entry.date)
        carry_forward(entry, previous)
        if tasks:
            document.append_tasks(entry, Section.PREVIOUS, tasks)
    elif tasks is not None:
        document.replace_tasks(entry, Section.PREVIOUS, tasks)
