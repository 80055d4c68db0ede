"""arc CLI - personal task and note tracker."""

import logging
import sys

import click

from .adapters.file_storage import FileStorage
from .config import Config, load_config
from .core.errors import ArcError
from .parser import Parser
from .ui import greeting


def build_parser(config: Config) -> Parser:
    """Load stored tasks and notes and wire them to a Parser."""
    storage = FileStorage(config.data_dir)
    return Parser(storage, storage.load_tasks(), storage.load_notes())


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level, logging.WARNING),
    )


@click.group(invoke_without_command=True)
@click.version_option(package_name="arc-tracker")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """arc - track tasks and notes from the command line."""
    config = load_config()
    if debug:
        _setup_logging("DEBUG")
    elif config.log_level:
        _setup_logging(config.log_level)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_obj
def chat(config: Config):
    """Start an interactive session (the default)."""
    try:
        parser = build_parser(config)
    except OSError as e:
        click.echo(f"Error: cannot open data directory: {e}", err=True)
        sys.exit(1)

    click.echo(greeting())

    while True:
        try:
            line = click.prompt(config.prompt, default="", show_default=False, prompt_suffix=" ")
        except click.Abort:
            click.echo()
            return

        try:
            click.echo(parser.parse(line))
        except ArcError as e:
            click.echo(f"Error: {e.message}", err=True)
            continue
        except OSError as e:
            click.echo(f"Error: failed to save: {e}", err=True)
            sys.exit(1)

        if parser.is_exit(line):
            return


@main.command("do")
@click.argument("line")
@click.pass_obj
def do(config: Config, line: str):
    """Run a single command, e.g. arc do "todo buy milk"."""
    try:
        parser = build_parser(config)
        click.echo(parser.parse(line))
    except ArcError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
