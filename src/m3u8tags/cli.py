import logging
from pathlib import Path
from typing import Optional

import click

import m3u8tags
from m3u8tags.parser import ParseError
from m3u8tags.playlist import Playlist
from m3u8tags.serializer import format_tag

_logger = logging.getLogger("m3u8tags")

_playlist_path = click.Path(exists=True, dir_okay=False, path_type=Path)


def _load(path: Path) -> Playlist:
    try:
        return Playlist.load(path)
    except ParseError as error:
        raise click.ClickException(f"Parse failed: {error}") from error
    except (OSError, UnicodeDecodeError) as error:
        raise click.ClickException(f"Read failed: {error}") from error


@click.group("m3u8tags")
@click.version_option(m3u8tags.__version__, prog_name="m3u8tags")
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages")
def main(verbose: bool) -> None:
    """Inspect, validate and rewrite HLS playlists."""
    if verbose:
        _logger.setLevel(logging.DEBUG)


@main.command("validate")
@click.argument("path", type=_playlist_path)
def validate(path: Path) -> None:
    """Check a playlist against rfc8216."""
    if errors := _load(path).validate():
        for error in errors:
            click.echo(str(error))
        raise click.ClickException(f"{len(errors)} validation error(s)")
    click.echo("OK")


@main.command("format")
@click.argument("path", type=_playlist_path)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write to a file instead of stdout",
)
@click.option(
    "--validate/--no-validate",
    "check",
    default=True,
    show_default=True,
    help="Refuse to write an invalid playlist",
)
def format_(path: Path, output: Optional[Path], check: bool) -> None:
    """Rewrite a playlist in canonical form."""
    playlist = _load(path)
    if check and (errors := playlist.validate()):
        raise click.ClickException("; ".join(map(str, errors)))
    if output is None:
        click.echo(playlist.dumps(), nl=False)
        return
    try:
        playlist.write(output)
    except OSError as error:
        raise click.ClickException(f"Write failed: {error}") from error


@main.command("tags")
@click.argument("path", type=_playlist_path)
def tags(path: Path) -> None:
    """List the tags of a playlist."""
    for tag in _load(path):
        click.echo(f"{type(tag).__name__:<26} {format_tag(tag)}")
