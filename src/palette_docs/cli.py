import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .errors import ColorFormatError, PaletteError
from .palettes import Palette, parse_palettes, read_input
from .roles import present_roles
from .swatches import OUTPUT_DIR, render_swatches, swatch_path
from .table import render_table

SWATCHES_TOOL = "palette-to-color-swatches"
TABLE_TOOL = "palette-to-html-table"

SWATCHES_HELP = f"""Usage: {SWATCHES_TOOL} [options]

Options:
  -h, --help         Show this help message and exit
  -file <filename>   JSON file containing palettes (optional).
                     If omitted, the program reads JSON input from stdin by default.

Description:
  Reads a JSON palette definition and outputs 23x23 circle color swatches
  for each color in the palettes and saves them as PNGs in ./{OUTPUT_DIR}/

Example:
  cat palettes.json | {SWATCHES_TOOL}
  {SWATCHES_TOOL} -file palettes.json
"""

TABLE_HELP = f"""Usage: {TABLE_TOOL} [options]

Options:
  -h, --help         Show this help message and exit
  -file <filename>   JSON file containing palettes (optional).
                     If omitted, the program reads JSON input from stdin by default.

Description:
  Reads a JSON palette definition and outputs an HTML table showing
  the colors with their hex, RGB, and HSL values.

Example:
  cat palettes.json | {TABLE_TOOL}
  {TABLE_TOOL} -file palettes.json
"""


# ------------------------------------------------------------
# Shared plumbing
# ------------------------------------------------------------


def configure_logging():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def fail(tool: str, message: str):
    click.echo(f"[{tool}] {message}", err=True)
    sys.exit(1)


def palette_options(help_text: str):
    """
    -h/--help (usage on stderr) and -file, shared by both tools.
    """

    def show_help(ctx, param, value):
        if not value or ctx.resilient_parsing:
            return
        click.echo(help_text, err=True, nl=False)
        ctx.exit()

    def decorator(f):
        f = click.option(
            "-file",
            "--file",
            "file_path",
            type=click.Path(dir_okay=False, path_type=Path),
            default=None,
            help="JSON file containing palettes (default: stdin)",
        )(f)
        f = click.option(
            "-h",
            "--help",
            "-help",
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_help,
            help="Show this help message and exit",
        )(f)
        return f

    return decorator


def load_palettes(tool: str, file_path: Path | None, help_text: str) -> list[Palette]:
    try:
        text = read_input(file_path)
    except PaletteError as e:
        fail(tool, str(e))

    if not text.strip():
        click.echo(help_text, err=True, nl=False)
        return []

    try:
        return parse_palettes(text)
    except PaletteError as e:
        fail(tool, str(e))


# ------------------------------------------------------------
# Rich display
# ------------------------------------------------------------


def print_swatch_summary(results: list[tuple[Palette, list[Path]]], out_dir: Path):
    console = Console(stderr=True)
    table = Table(show_header=True, header_style="bold")

    table.add_column("Palette", style="cyan", no_wrap=True)
    table.add_column("Role")
    table.add_column("Hex")
    table.add_column("Swatch")

    for palette, written in results:
        written = set(written)
        for role, hex_color in present_roles(palette.colors):
            if swatch_path(palette.name, role, out_dir) not in written:
                continue
            color = "#" + hex_color.removeprefix("#")
            table.add_row(
                palette.name,
                role.label,
                hex_color,
                Text("    ", style=Style(bgcolor=color)),
            )

    console.print(table)


# ------------------------------------------------------------
# CLI
# ------------------------------------------------------------


@click.command(add_help_option=False)
@palette_options(SWATCHES_HELP)
def swatches_main(file_path: Path | None):
    """
    Write 23x23 circle swatch PNGs for every palette role.
    """
    configure_logging()
    palettes = load_palettes(SWATCHES_TOOL, file_path, SWATCHES_HELP)
    if not palettes:
        return

    results = []
    for palette in palettes:
        try:
            written = render_swatches(palette.name, palette.colors, OUTPUT_DIR)
        except PaletteError as e:
            fail(SWATCHES_TOOL, str(e))
        results.append((palette, written))

    print_swatch_summary(results, OUTPUT_DIR)
    total = sum(len(w) for _, w in results)
    click.echo(f"✓ Wrote {total} swatches to {OUTPUT_DIR}", err=True)


@click.command(add_help_option=False)
@palette_options(TABLE_HELP)
def table_main(file_path: Path | None):
    """
    Print one HTML color table per palette.
    """
    configure_logging()
    palettes = load_palettes(TABLE_TOOL, file_path, TABLE_HELP)

    failed = False
    for palette in palettes:
        try:
            html = render_table(palette.name, palette.colors)
        except ColorFormatError as e:
            click.echo(f"[{TABLE_TOOL}] error generating HTML for {palette.name}: {e}", err=True)
            failed = True
            continue
        click.echo(html)

    if failed:
        sys.exit(1)
