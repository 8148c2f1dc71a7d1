"""standup-md - daily standup notes kept in markdown files."""

__version__ = "0.1.0"
