"""Structured-markdown codec for standup documents."""

import re
from datetime import date, datetime
from pathlib import Path
from typing import Iterable

from ..errors import FormatError
from .entry import Document, Entry, Section, resolve_section_order

DEFAULT_SECTION_NAMES = {
    Section.CURRENT: "Current",
    Section.PREVIOUS: "Previous",
    Section.IMPEDIMENTS: "Impediments",
    Section.NOTES: "Notes",
}

HEADING_RE = re.compile(r"^(#+)\s+(.*?)\s*$")


class MarkdownCodec:
    """
    Converts between a Document and its markdown text.

    A file looks like:

        # 2024-01-10
        ## Previous
        - review pr

        ## Current
        - write spec

    Heading depths, the bullet glyph, the date format and the section
    names/order all come from configuration.
    """

    def __init__(
        self,
        header_depth: int = 1,
        sub_header_depth: int = 2,
        bullet_character: str = "-",
        header_date_format: str = "%Y-%m-%d",
        section_names: dict[Section, str] | None = None,
        section_order: Iterable[Section | str] | None = None,
        omit_empty_sections: bool = False,
    ):
        self.header_depth = header_depth
        self.sub_header_depth = sub_header_depth
        self.bullet_character = bullet_character
        self.header_date_format = header_date_format
        self.section_names = {**DEFAULT_SECTION_NAMES, **(section_names or {})}
        self.section_order = resolve_section_order(section_order)
        self.omit_empty_sections = omit_empty_sections
        self._sections_by_name = {name: s for s, name in self.section_names.items()}
        self._bullet_re = re.compile(rf"^\s*{re.escape(bullet_character)}(?:\s+(.*))?$")

    @classmethod
    def from_config(cls, config) -> "MarkdownCodec":
        return cls(
            header_depth=config.header_depth,
            sub_header_depth=config.sub_header_depth,
            bullet_character=config.bullet_character,
            header_date_format=config.header_date_format,
            section_names=config.section_names,
            section_order=config.section_order,
            omit_empty_sections=config.omit_empty_sections,
        )

    def format_date(self, value: date) -> str:
        return value.strftime(self.header_date_format)

    def parse_date(self, text: str) -> date:
        """Parse heading text as a date. Raises ValueError."""
        return datetime.strptime(text, self.header_date_format).date()

    # ============== Parsing ==============

    def parse(self, text: str, source: Path | str | None = None) -> Document:
        """
        Parse standup markdown into a Document.

        Raises FormatError for unparseable dates, unknown section headings,
        duplicate dates and stray lines.
        """
        document = Document()
        entry: Entry | None = None
        section: Section | None = None

        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.rstrip()
            if not line.strip():
                continue

            bullet = self._bullet_re.match(line)
            if bullet:
                if entry is None or section is None:
                    raise FormatError("Task outside of a section", source, number, line)
                task = (bullet.group(1) or "").strip()
                if task:
                    entry.sections[section].append(task)
                continue

            heading = HEADING_RE.match(line)
            if not heading:
                raise FormatError("Unrecognized line", source, number, line)

            depth, title = len(heading.group(1)), heading.group(2)
            if depth == self.header_depth:
                try:
                    entry_date = self.parse_date(title)
                except ValueError:
                    raise FormatError("Heading is not a date", source, number, line)
                if document.get(entry_date) is not None:
                    raise FormatError(
                        f"Duplicate entry for {entry_date.isoformat()}", source, number, line
                    )
                entry = document.add_entry(Entry(date=entry_date))
                section = None
            elif depth == self.sub_header_depth:
                if entry is None:
                    raise FormatError("Section heading before any date heading", source, number, line)
                section = self._sections_by_name.get(title)
                if section is None:
                    raise FormatError("Unknown section heading", source, number, line)
            else:
                raise FormatError(f"Unexpected heading level {depth}", source, number, line)

        return document

    # ============== Rendering ==============

    def _entry_lines(self, entry: Entry) -> list[str]:
        lines = [f"{'#' * self.header_depth} {self.format_date(entry.date)}"]
        for section in self.section_order:
            tasks = entry.sections[section]
            if self.omit_empty_sections and not tasks:
                continue
            lines.append(f"{'#' * self.sub_header_depth} {self.section_names[section]}")
            lines.extend(f"{self.bullet_character} {task}" for task in tasks)
            lines.append("")
        return lines

    def render_entry(self, entry: Entry) -> str:
        """Markdown for a single entry."""
        return "\n".join(self._entry_lines(entry)).rstrip("\n") + "\n"

    def render(self, document: Document) -> str:
        """Markdown for a whole document, oldest entry first."""
        lines: list[str] = []
        for entry in document.all_entries():
            lines.extend(self._entry_lines(entry))
        if not lines:
            return ""
        return "\n".join(lines).rstrip("\n") + "\n"
