"""Nested, ordered views of standup entries for reporting."""

from .entry import Document, Entry
from .markdown import MarkdownCodec


def _sections(entry: Entry, codec: MarkdownCodec) -> dict[str, list[str]]:
    return {
        codec.section_names[section]: list(entry.sections[section])
        for section in codec.section_order
    }


def entry_view(entry: Entry, codec: MarkdownCodec) -> dict[str, dict[str, list[str]]]:
    """{date: {section name: tasks}} for one entry."""
    return {codec.format_date(entry.date): _sections(entry, codec)}


def all_entries_view(document: Document, codec: MarkdownCodec) -> dict[str, dict[str, list[str]]]:
    """{date: {section name: tasks}} for every entry, oldest first."""
    view = {}
    for entry in document.all_entries():
        view[codec.format_date(entry.date)] = _sections(entry, codec)
    return view
