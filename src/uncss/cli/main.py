"""uncss CLI entry point."""

from __future__ import annotations

import logging
import sys

import click

from uncss import __version__
from uncss.config import UncssOptions
from uncss.detect import detect_unused_css
from uncss.errors import UncssError
from uncss.render import RENDERERS


def _split_ignore(values: tuple[str, ...]) -> list[str]:
    """Flatten repeated, comma-separated --ignore values."""
    selectors: list[str] = []
    for value in values:
        selectors.extend(part.strip() for part in value.split(",") if part.strip())
    return selectors


@click.command()
@click.version_option(version=__version__, prog_name="uncss")
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option("-c", "--compress", is_flag=True, help="Compress CSS output")
@click.option(
    "-i",
    "--ignore",
    multiple=True,
    help="Do not remove given selectors (comma-separated, repeatable)",
)
@click.option(
    "-t",
    "--timeout",
    type=click.IntRange(min=0),
    default=1000,
    show_default=True,
    help="How long to wait for JavaScript evaluation, in milliseconds",
)
@click.option(
    "-s",
    "--stylesheet",
    "stylesheets",
    multiple=True,
    help="Use this stylesheet instead of the linked ones (repeatable)",
)
@click.option(
    "--renderer",
    type=click.Choice(RENDERERS),
    default="browser",
    show_default=True,
    help="browser runs page scripts in headless chromium; static reads files as-is",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
def cli(
    files: tuple[str, ...],
    compress: bool,
    ignore: tuple[str, ...],
    timeout: int,
    stylesheets: tuple[str, ...],
    renderer: str,
    verbose: bool,
) -> None:
    """Remove unused CSS from the stylesheets of HTML FILES.

    With no FILES, HTML is read from standard input.  The used CSS is
    written to standard output.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = UncssOptions(
        compress=compress,
        ignore=frozenset(_split_ignore(ignore)),
        stylesheets=stylesheets or None,
        timeout_ms=timeout,
        renderer=renderer,
    )

    if files:
        inputs: str | list[str] = list(files)
    else:
        inputs = click.get_text_stream("stdin").read()

    try:
        css = detect_unused_css(inputs, options)
    except UncssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(css)
