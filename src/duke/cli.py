"""Duke CLI - line-oriented task tracker."""

import json
import logging
import sys

import click

from . import __version__
from .adapters.console import ConsoleUI
from .adapters.file_storage import StorageError
from .config import load_config
from .core.tasks import format_storage
from .session import get_store, greet, load_task_list, run_line, run_session

file_option = click.option(
    "--file", "-f", "data_file", default=None, type=click.Path(dir_okay=False),
    help="Task data file (defaults to DATA_FILE in duke.conf)",
)


@click.group(invoke_without_command=True)
@click.version_option(__version__)
@click.pass_context
def main(ctx):
    """Duke - track todos, deadlines and events."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@file_option
@click.option("--debug", is_flag=True, help="Enable debug logging")
def chat(data_file: str | None = None, debug: bool = False):
    """Start an interactive session."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    ui = ConsoleUI(indent=config.indent)
    store = get_store(config, data_file)

    try:
        tasks = load_task_list(store, ui)
        greet(ui, show_logo=config.show_logo)
        run_session(ui.read_lines(), tasks, store, ui)
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo()


@main.command("list")
@file_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_tasks(data_file: str | None, as_json: bool):
    """Show stored tasks."""
    config = load_config()
    ui = ConsoleUI(indent=config.indent)
    store = get_store(config, data_file)

    try:
        tasks = load_task_list(store, ui)
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "kind": t.kind.name.lower(),
                        "description": t.description,
                        "done": t.done,
                        "preposition": t.preposition or None,
                        "start": format_storage(t.start) if t.start else None,
                        "end": format_storage(t.end) if t.end else None,
                    }
                    for t in tasks
                ],
                indent=2,
            )
        )
        return

    ui.show(tasks.render())


@main.command("do")
@file_option
@click.argument("words", nargs=-1, required=True)
def do_command(data_file: str | None, words: tuple[str, ...]):
    """Run a single command, e.g. duke do todo read book."""
    config = load_config()
    ui = ConsoleUI(indent=config.indent)
    store = get_store(config, data_file)

    try:
        tasks = load_task_list(store, ui)
        run_line(" ".join(words), tasks, store, ui)
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
