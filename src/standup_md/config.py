"""Configuration management for standup-md."""

import logging
import os
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from pathlib import Path

import yaml

from .core.entry import Section, resolve_section_order
from .errors import ConfigError

logger = logging.getLogger(__name__)

PREFERENCE_FILE = Path(
    os.environ.get("STANDUP_MD_CONFIG", Path.home() / ".standup_md.yml")
).expanduser()
DEFAULT_DIRECTORY = Path.home() / ".cache" / "standup_md"

BULLET_CHARACTERS = ("-", "*", "+")

# Any date with distinct day/month/year components works here.
_SAMPLE_DATE = date(2024, 11, 23)


@dataclass
class Config:
    """standup-md configuration."""

    header_depth: int = 1
    sub_header_depth: int = 2
    bullet_character: str = "-"
    header_date_format: str = "%Y-%m-%d"
    current_header: str = "Current"
    previous_header: str = "Previous"
    impediments_header: str = "Impediments"
    notes_header: str = "Notes"
    sub_header_order: list[str] = field(
        default_factory=lambda: ["previous", "current", "impediments", "notes"]
    )
    directory: list[str] = field(default_factory=lambda: [str(DEFAULT_DIRECTORY)])
    file_name_format: str = "%Y_%m.md"
    omit_empty_sections: bool = False
    editor: str | None = None

    def __post_init__(self):
        if isinstance(self.directory, (str, Path)):
            self.directory = [str(self.directory)]
        if isinstance(self.sub_header_order, str):
            self.sub_header_order = [s.strip() for s in self.sub_header_order.split(",") if s.strip()]
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError for any invalid value."""
        for name in ("header_depth", "sub_header_depth"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if not 1 <= self.header_depth <= 5:
            raise ConfigError(f"header_depth must be between 1 and 5, got {self.header_depth}")
        if not 2 <= self.sub_header_depth <= 6:
            raise ConfigError(f"sub_header_depth must be between 2 and 6, got {self.sub_header_depth}")
        if self.sub_header_depth <= self.header_depth:
            raise ConfigError("sub_header_depth must be greater than header_depth")

        if self.bullet_character not in BULLET_CHARACTERS:
            raise ConfigError(
                f"bullet_character must be one of {', '.join(BULLET_CHARACTERS)}, "
                f"got {self.bullet_character!r}"
            )

        names = list(self.section_names.values())
        for name in names:
            if not isinstance(name, str) or not name.strip():
                raise ConfigError("Section headers must be non-empty strings")
            if name != name.strip() or len(name.splitlines()) > 1:
                raise ConfigError(
                    f"Section header {name!r} must be a single line without surrounding whitespace"
                )
        if len(set(names)) != len(names):
            raise ConfigError("Section headers must be distinct")

        try:
            resolve_section_order(self.sub_header_order)
        except ValueError as e:
            raise ConfigError(f"Invalid sub_header_order {self.sub_header_order!r}: {e}")

        if not self.file_name_format:
            raise ConfigError("file_name_format must not be empty")
        self._check_date_format()

        if not isinstance(self.omit_empty_sections, bool):
            raise ConfigError("omit_empty_sections must be true or false")

    def _check_date_format(self) -> None:
        if not self.header_date_format:
            raise ConfigError("header_date_format must not be empty")
        text = _SAMPLE_DATE.strftime(self.header_date_format)
        try:
            parsed = datetime.strptime(text, self.header_date_format).date()
        except ValueError:
            parsed = None
        if parsed != _SAMPLE_DATE:
            raise ConfigError(
                f"header_date_format {self.header_date_format!r} does not identify a unique date"
            )

    @property
    def section_names(self) -> dict[Section, str]:
        return {
            Section.CURRENT: self.current_header,
            Section.PREVIOUS: self.previous_header,
            Section.IMPEDIMENTS: self.impediments_header,
            Section.NOTES: self.notes_header,
        }

    @property
    def section_order(self) -> tuple[Section, ...]:
        return resolve_section_order(self.sub_header_order)

    @property
    def directories(self) -> list[Path]:
        return [Path(d).expanduser() for d in self.directory]


def load_config(path: Path | str | None = None, overrides: dict | None = None) -> Config:
    """
    Load configuration from the YAML preference file.

    Values in overrides (typically from the command line) win over the file;
    None values are skipped. Unknown keys are logged and ignored.
    """
    path = Path(path).expanduser() if path else PREFERENCE_FILE
    data = {}

    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping of preferences")
        logger.debug(f"Loaded preferences from {path}")

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    known = {f.name for f in fields(Config)}
    values = {}
    for key, value in data.items():
        if key in known:
            logger.debug(f"  {key} = {value}")
            values[key] = value
        else:
            logger.warning(f"Unknown preference '{key}' ignored")

    return Config(**values)
