"""Functional core - pure business logic with no I/O."""

from .entry import (
    DEFAULT_SECTION_ORDER,
    Document,
    Entry,
    Section,
    apply_previous_tasks,
    carry_forward,
    resolve_section_order,
)
from .markdown import DEFAULT_SECTION_NAMES, MarkdownCodec
from .views import all_entries_view, entry_view

__all__ = [
    # Model
    "Section",
    "Entry",
    "Document",
    "DEFAULT_SECTION_ORDER",
    "resolve_section_order",
    "carry_forward",
    "apply_previous_tasks",
    # Codec
    "MarkdownCodec",
    "DEFAULT_SECTION_NAMES",
    # Views
    "entry_view",
    "all_entries_view",
]
