from __future__ import annotations

import sys
from typing import BinaryIO

import click

from bbsmarkup.errors import InputTooLargeError
from bbsmarkup.logging import configure_logging, get_logger
from bbsmarkup.renderer import MarkupRenderer
from bbsmarkup.settings import Settings

logger = get_logger(__name__)

_file_argument = click.argument("source", type=click.File("rb"), default="-", required=False)
_encoding_option = click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Text encoding of the input; undecodable bytes are replaced.",
)


def _read(source: BinaryIO, encoding: str) -> str:
    try:
        return source.read().decode(encoding, errors="replace")
    except LookupError as e:
        raise click.BadParameter(f"Unknown encoding: {encoding}", param_hint="--encoding") from e


def _renderer() -> MarkupRenderer:
    settings = Settings()
    configure_logging(settings)
    return MarkupRenderer.from_settings(settings)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """bbsmarkup command line interface."""


@cli.command("render")
@_file_argument
@_encoding_option
@click.option("--block/--inline", default=False, show_default=True, help="Wrap output in a pre-wrap <div>.")
@click.option("--css-class", default=None, help="Class attribute for the --block wrapper.")
def render(source: BinaryIO, encoding: str, block: bool, css_class: str | None) -> None:
    """Render a text file with ANSI sequences as HTML (stdin when omitted)."""
    text = _read(source, encoding)
    try:
        html = _renderer().render(text, block=block, css_class=css_class)
    except InputTooLargeError as e:
        raise click.ClickException(str(e)) from e
    click.echo(html, nl=False)


@cli.command("strip")
@_file_argument
@_encoding_option
def strip(source: BinaryIO, encoding: str) -> None:
    """Print a text file with all escape sequences removed."""
    text = _read(source, encoding)
    try:
        plain = _renderer().strip(text)
    except InputTooLargeError as e:
        raise click.ClickException(str(e)) from e
    click.echo(plain, nl=False)


@cli.command("check")
@_file_argument
@_encoding_option
def check(source: BinaryIO, encoding: str) -> None:
    """Exit 0 if the input holds escape markup, 1 otherwise."""
    found = _renderer().has_markup(_read(source, encoding))
    click.echo("yes" if found else "no")
    sys.exit(0 if found else 1)


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from BBSMARKUP_SERVER__HOST).")
@click.option("--port", type=int, default=None, help="Bind port (default from BBSMARKUP_SERVER__PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP render service."""
    import uvicorn

    from bbsmarkup.app import create_app

    settings = Settings()
    if host is None:
        host = settings.server.host
    if port is None:
        port = settings.server.port
    app = create_app(settings)
    logger.info("serving", host=host, port=port)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
