"""CLI interface for urlshort.

Command-line tool for serving path redirects from YAML, JSON or TOML config.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from urlshort.config import Config
from urlshort.core.decoders import DecodeError, decode_json, decode_yaml
from urlshort.core.mapping import build_map

_DECODERS = {
    "yaml": decode_yaml,
    "json": decode_json,
}

_SUFFIX_FORMATS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}


@click.group()
def cli() -> None:
    """urlshort - Redirect short paths to full URLs."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover urlshort.toml)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--yaml",
    "yaml_file",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="YAML redirect file (overrides config)",
)
@click.option(
    "--json",
    "json_file",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="JSON redirect file (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every redirect decision)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    yaml_file: Path | None,
    json_file: Path | None,
    verbose: bool,
) -> None:
    """Start the redirect server."""
    from urlshort.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            yaml_file=yaml_file,
            json_file=json_file,
        )
    except (OSError, ValueError) as e:
        _fail(e)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Inline redirects: {len(config.redirects.paths)}")
    if config.redirects.yaml_file:
        click.echo(f"YAML file: {config.redirects.yaml_file}")
    if config.redirects.json_file:
        click.echo(f"JSON file: {config.redirects.json_file}")

    try:
        run_server(config)
    except (OSError, DecodeError) as e:
        _fail(e)


@cli.command()
@click.argument(
    "redirect_file",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(sorted(_DECODERS)),
    default=None,
    help="Document format (default: inferred from file extension)",
)
def check(redirect_file: Path, fmt: str | None) -> None:
    """Validate a redirect file and print the resulting map."""
    if fmt is None:
        fmt = _SUFFIX_FORMATS.get(redirect_file.suffix.lower())
        if fmt is None:
            _fail(f"cannot infer format from {redirect_file.name!r}, use --format")

    try:
        records = _DECODERS[fmt](redirect_file.read_bytes())
    except (OSError, DecodeError) as e:
        _fail(e)

    redirects = build_map(records)
    for path, url in redirects.items():
        click.echo(f"{path} -> {url}")

    click.echo(
        click.style(
            f"\n{len(records)} record(s), {len(redirects)} redirect(s)",
            fg="green",
        ),
    )


def _fail(error: object) -> NoReturn:
    """Print an error and exit with status 1."""
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
