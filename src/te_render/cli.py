"""Command line interface for te."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from jinja2 import Template, TemplateSyntaxError
from rich.console import Console
from rich.table import Table

from te_render.config import load_settings
from te_render.engine import Renderer
from te_render.functions import describe_functions
from te_render.functions.files import UNDECODABLE
from te_render.logging_setup import configure_logging
from te_render.output import write_if_changed

logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    logger.error(message)
    sys.exit(1)


def _read_source(input_path: str | None, encoding: str) -> str:
    """Read template text from a file, or stdin when no path (or "-") is given."""
    if input_path and input_path != "-":
        try:
            return Path(input_path).read_bytes().decode(encoding, errors=UNDECODABLE)
        except (OSError, UnicodeDecodeError) as e:
            _fail(f"read {input_path}: {e}")

    try:
        data = click.get_binary_stream("stdin").read()
        return data.decode(encoding, errors=UNDECODABLE)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"read stdin: {e}")


def _parse(renderer: Renderer, source: str) -> Template:
    try:
        return renderer.parse(source)
    except TemplateSyntaxError as e:
        _fail(f"parse: line {e.lineno}: {e.message}")


def _render(renderer: Renderer, template: Template) -> str:
    try:
        return renderer.render(template)
    except Exception as e:
        _fail(f"execute: {e}")


def _show_functions() -> None:
    table = Table(title="Template functions")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Description")
    for name, summary in describe_functions():
        table.add_row(name, summary)
    Console().print(table)


@click.command(name="te")
@click.argument("input_path", required=False, metavar="[INPUT]")
@click.argument("output_path", required=False, metavar="[OUTPUT]")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: .te.yaml in the working directory, if present)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug diagnostics")
@click.option(
    "--list-functions",
    is_flag=True,
    help="List the functions available to templates and exit",
)
@click.version_option(package_name="te-render")
def cli(
    input_path: str | None,
    output_path: str | None,
    config_path: Path | None,
    verbose: bool,
    list_functions: bool,
) -> None:
    """Render a Jinja2 template with filesystem helper functions.

    Reads the template from INPUT (or stdin) and writes the result to OUTPUT
    (or stdout). OUTPUT is only rewritten when its content would change.
    """
    configure_logging(verbose)

    if list_functions:
        _show_functions()
        return

    try:
        settings = load_settings(config_path)
    except click.ClickException as e:
        _fail(f"config: {e.format_message()}")
    renderer = Renderer(settings)

    source = _read_source(input_path, settings.encoding)
    template = _parse(renderer, source)
    rendered = _render(renderer, template)

    if not output_path:
        try:
            stdout = click.get_binary_stream("stdout")
            stdout.write(rendered.encode(settings.encoding, errors=UNDECODABLE))
            stdout.flush()
        except (OSError, UnicodeEncodeError) as e:
            _fail(f"write stdout: {e}")
        return

    try:
        data = rendered.encode(settings.encoding, errors=UNDECODABLE)
        write_if_changed(output_path, data, mode=settings.file_mode)
    except (OSError, UnicodeEncodeError) as e:
        _fail(f"write {output_path}: {e}")
