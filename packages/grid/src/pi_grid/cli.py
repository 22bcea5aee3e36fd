"""
pi-grid command line — render or inspect a YAML layout document.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import APP_NAME, VERSION
from .drivers import Canvas, TerminalDriver
from .errors import LayoutError
from .layout import Layout, build_layout, load_layout
from .settings import LayoutSettings, load_settings
from .terminal import ProcessTerminal
from .viewport import Side

app = typer.Typer(
    name="pi-grid",
    help="Lay out text zones in a fixed terminal grid",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Lay out text zones in a fixed terminal grid."""


def _configure_logging(settings: LayoutSettings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.get_log_level(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load(path: str, settings_path: Optional[str], verbose: bool) -> Layout:
    try:
        settings = load_settings(os.getcwd(), settings_path)
        _configure_logging(settings, verbose)
        return build_layout(load_layout(path), settings)
    except LayoutError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _report_overflow(layout: Layout) -> None:
    for name, errors in layout.overflow.items():
        for err in errors:
            err_console.print(f"[yellow]{escape(name)}:[/yellow] {err.side.value} overflow: {escape(repr(err.payload))}")


@app.command("render")
def render_cmd(
    path: str = typer.Argument(..., help="Layout YAML file"),
    terminal: bool = typer.Option(False, "--terminal", "-t", help="Draw at absolute positions on the terminal"),
    settings_path: Optional[str] = typer.Option(None, "--settings", help="User settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Render every zone of a layout."""
    layout = _load(path, settings_path, verbose)
    if terminal:
        term = ProcessTerminal()
        term.hide_cursor()
        try:
            term.clear_screen()
            layout.print(TerminalDriver(term))
            term.move_to(0, layout.height)
        finally:
            term.show_cursor()
    else:
        canvas = Canvas(layout.width, layout.height)
        try:
            layout.print(canvas)
        except IndexError as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        typer.echo(canvas.render())
    _report_overflow(layout)


@app.command("inspect")
def inspect_cmd(
    path: str = typer.Argument(..., help="Layout YAML file"),
    settings_path: Optional[str] = typer.Option(None, "--settings", help="User settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Show bounds, divider and section usage of every zone."""
    layout = _load(path, settings_path, verbose)
    table = Table(title=f"Layout {layout.width}x{layout.height}")
    table.add_column("Zone", style="cyan")
    table.add_column("Bounds")
    table.add_column("Divider", justify="right")
    table.add_column("Minus", justify="right")
    table.add_column("Plus", justify="right")
    table.add_column("Overflow", justify="right")
    for name, p in layout.zones.items():
        minus_used = len(p.minus_lines)
        plus_used = len(p.plus_lines)
        table.add_row(
            name,
            f"({p.start_x()},{p.start_y()})-({p.end_x()},{p.end_y()})",
            str(p.divider),
            f"{minus_used}/{minus_used + p.free_space(Side.MINUS)}",
            f"{plus_used}/{plus_used + p.free_space(Side.PLUS)}",
            str(len(layout.overflow.get(name, []))),
        )
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
