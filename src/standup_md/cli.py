"""standup-md CLI - The Standup Doctor."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .adapters.editor import SubprocessEditor, resolve_editor
from .config import load_config
from .errors import StandupError
from .workflows import (
    RuntimeTasks,
    apply_runtime_tasks,
    edit_standup,
    format_all_entries,
    format_current_entry,
    open_standup,
    write_standup,
)

logger = logging.getLogger(__name__)


def _split_list(ctx, param, value: str | None) -> list[str] | None:
    """Click callback: "a, b,c" -> ["a", "b", "c"]."""
    if value is None:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


@click.command()
@click.version_option(version=__version__)
@click.option("--current-entry-tasks", callback=_split_list, help="Comma-separated list of current entry's tasks")
@click.option("--previous-entry-tasks", callback=_split_list, help="Comma-separated list of yesterday's tasks")
@click.option("--impediments", callback=_split_list, help="Comma-separated list of impediments for current entry")
@click.option("--notes", callback=_split_list, help="Comma-separated list of notes for current entry")
@click.option("--sub-header-order", callback=_split_list, help="The order of the sub-headers when writing the file")
@click.option("--append-previous/--no-append-previous", default=True, help="Append previous tasks? Default is true")
@click.option("-f", "--file-name-format", default=None, help="Date-formattable string to use for standup file name")
@click.option("-e", "--editor", default=None, help="Editor to use for opening standup files")
@click.option("-d", "--directory", multiple=True, help="Directory where standup files are located (repeatable)")
@click.option("--date", "target_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Date of the entry (YYYY-MM-DD), defaults to today")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Preference file (default ~/.standup_md.yml)")
@click.option("--write/--no-write", default=True, help="Write current entry if it doesn't exist. Default is true")
@click.option("--edit/--no-edit", default=True, help="Open the file in the editor. Default is true")
@click.option("-j", "--json/--no-json", "as_json", default=False, help="Print output as formatted json. Default is false")
@click.option("-v", "--verbose/--no-verbose", default=False, help="Verbose output. Default is false")
@click.option("-c", "--current", "print_current", is_flag=True, help="Print current entry. Disables editing")
@click.option("-a", "--all", "print_all", is_flag=True, help="Print all entries in the file. Disables editing")
def main(
    current_entry_tasks: list[str] | None,
    previous_entry_tasks: list[str] | None,
    impediments: list[str] | None,
    notes: list[str] | None,
    sub_header_order: list[str] | None,
    append_previous: bool,
    file_name_format: str | None,
    editor: str | None,
    directory: tuple[str, ...],
    target_date,
    config_path: Path | None,
    write: bool,
    edit: bool,
    as_json: bool,
    verbose: bool,
    print_current: bool,
    print_all: bool,
):
    """The Standup Doctor - keep daily standup notes in markdown."""
    if verbose:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    if print_current or print_all:
        edit = False

    overrides = {
        "sub_header_order": sub_header_order,
        "file_name_format": file_name_format,
        "editor": editor,
        "directory": list(directory) or None,
    }
    tasks = RuntimeTasks(
        current=current_entry_tasks,
        previous=previous_entry_tasks,
        impediments=impediments,
        notes=notes,
    )

    try:
        config = load_config(config_path, overrides)
        session = open_standup(config, target_date.date() if target_date else None)
        apply_runtime_tasks(session, tasks, append_previous=append_previous)

        if print_current:
            logger.info("Printing current entry" + (" as json" if as_json else ""))
            click.echo(format_current_entry(session, as_json), nl=as_json)
        if print_all:
            logger.info("Printing all entries" + (" as json" if as_json else ""))
            click.echo(format_all_entries(session, as_json), nl=as_json)
        if write:
            write_standup(session)
        if edit:
            edit_standup(session, SubprocessEditor(resolve_editor(config)))
    except (StandupError, OSError, RuntimeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
