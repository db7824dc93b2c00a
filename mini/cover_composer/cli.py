from __future__ import annotations

import logging
from pathlib import Path

import click

from .composer import HEIGHT, OUTPUT_NAME, WIDTH, render_cover


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def generate(out_path: Path, seed=None) -> None:
    """Render the cover and print the three status lines."""
    try:
        render_cover(out_path, seed=seed)
    except (OSError, MemoryError) as e:
        raise click.ClickException(f"Failed to generate cover: {e}")
    click.echo("Cover generated successfully")
    click.echo(f"   path: {Path(out_path).resolve()}")
    click.echo(f"   size: {WIDTH}x{HEIGHT}px")


@click.command()
@click.option("--out", "out_path", type=click.Path(dir_okay=False, path_type=Path), default=OUTPUT_NAME, show_default=True, help="Output JPEG path")
@click.option("--seed", type=int, default=None, help="Seed for the connector draws (reproducible output)")
@click.option("-v", "--verbose", is_flag=True, help="Log every drawing pass")
def cli(out_path: Path, seed, verbose: bool):
    """Render the 1200x630 cover image to a JPEG file."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)
    generate(out_path, seed=seed)


if __name__ == "__main__":
    cli()
