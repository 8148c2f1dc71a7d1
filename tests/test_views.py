"""Tests for reporting views."""

import json
from datetime import date

from standup_md.core.entry import Document, Entry, Section
from standup_md.core.markdown import MarkdownCodec
from standup_md.core.views import all_entries_view, entry_view


def _document():
    return Document(
        [
            Entry(date=date(2024, 1, 10), sections={Section.CURRENT: ["b"]}),
            Entry(date=date(2024, 1, 9), sections={Section.CURRENT: ["a"], Section.NOTES: ["n"]}),
        ]
    )


class TestEntryView:
    def test_shape_and_order(self):
        codec = MarkdownCodec()
        view = entry_view(_document().get(date(2024, 1, 9)), codec)
        assert list(view) == ["2024-01-09"]
        assert list(view["2024-01-09"].items()) == [
            ("Previous", []),
            ("Current", ["a"]),
            ("Impediments", []),
            ("Notes", ["n"]),
        ]

    def test_uses_configured_names_and_order(self):
        codec = MarkdownCodec(section_names={Section.NOTES: "Misc"}, section_order=["notes"])
        view = entry_view(Entry(date=date(2024, 1, 9)), codec)
        assert list(view["2024-01-09"]) == ["Misc", "Previous", "Current", "Impediments"]

    def test_view_is_a_copy(self):
        document = _document()
        view = entry_view(document.get(date(2024, 1, 10)), MarkdownCodec())
        view["2024-01-10"]["Current"].append("x")
        assert document.get(date(2024, 1, 10)).current == ["b"]


class TestAllEntriesView:
    def test_dates_ascending(self):
        view = all_entries_view(_document(), MarkdownCodec())
        assert list(view) == ["2024-01-09", "2024-01-10"]

    def test_json_serializable(self):
        view = all_entries_view(_document(), MarkdownCodec())
        assert json.loads(json.dumps(view)) == view

    def test_empty_document(self):
        assert all_entries_view(Document(), MarkdownCodec()) == {}
