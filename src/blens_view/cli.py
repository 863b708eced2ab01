"""bytelens - multi-format byte stream viewer."""
from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path
from typing import BinaryIO, ContextManager

import click

from blens_core.codecs import CODECS
from blens_core.protocol import DEFAULT_WIDTH, WIDTH_MULTIPLE
from blens_view.config import ConfigError, RunConfig, build_config
from blens_view.render import render_stream


def codec_flags(func):
    """One boolean --<name> option per built-in codec."""
    for codec in reversed(CODECS):
        func = click.option(f"--{codec.name}", is_flag=True, help=codec.desc)(func)
    return func


def open_source(config: RunConfig) -> ContextManager[BinaryIO]:
    if config.source is None:
        return nullcontext(click.get_binary_stream("stdin"))
    return open(config.source, "rb")


def list_codecs() -> None:
    for codec in CODECS:
        unit = "var" if codec.variable else str(codec.unit_size)
        click.echo(f"{codec.name:<8} {unit:>3}  {codec.desc}")


@click.command()
@codec_flags
@click.option(
    "--file",
    "source",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default=None,
    help="The file to read input from (stdin by default)",
)
@click.option(
    "--width",
    type=int,
    default=DEFAULT_WIDTH,
    show_default=True,
    help=f"How many bytes to print per line (must be a multiple of {WIDTH_MULTIPLE})",
)
@click.option("-n", "rows", type=int, default=0, help="How many lines to print (0 prints all)")
@click.option("--list", "show_list", is_flag=True, help="List the available codecs and exit")
def main(source: Path | None, width: int, rows: int, show_list: bool, **flags: bool) -> None:
    """Print a byte stream as aligned columns, one codec per column.

    Without codec flags, --hex --ascii --int8 are shown.
    """
    if show_list:
        list_codecs()
        return

    enabled = [c.name for c in CODECS if flags.get(c.name)]
    try:
        config = build_config(enabled, width=width, max_rows=rows, source=source)
    except ConfigError as e:
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)

    # Fail closed on I/O errors with a single-line reason; rows already
    # printed stay printed.
    try:
        with open_source(config) as stream:
            for line in render_stream(stream, config):
                click.echo(line)
    except OSError as e:
        click.echo(f"FATAL: error reading input: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
