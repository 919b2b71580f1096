"""Command Line Interface for Room Dimensions.

This module provides a simple CLI for computing the length/width
dimension options of a room and inspecting its derived walls.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import DEFAULT_ROOM_TYPE
from .core.model import RoomData
from .engine.dimensions import room_dimensions
from .engine.validators import InvalidRoom, validate_all
from .geom.polygon import room_area, room_perimeter
from .geom.walls import derive_walls, get_unique_walls
from .io.parser import load_room, save_dimensions
from .io.rooms import get_all_room_types, get_room_data

app = typer.Typer(
    name="roomdims",
    help="A CLI tool for computing room length/width dimension options",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_room(room: Optional[Path], room_type: Optional[str]) -> RoomData:
    """Load a room from a file, or a bundled sample room by type."""
    if room is not None:
        room_obj = load_room(str(room))
        console.print(f"[green]✓[/green] Loaded room from {room}")
        return room_obj

    room_type = room_type or DEFAULT_ROOM_TYPE
    room_obj = get_room_data(room_type)
    console.print(f"[green]✓[/green] Loaded sample room '{room_type}'")
    return room_obj


def _fmt_point(p) -> str:
    return f"({p.x:.1f}, {p.y:.1f})"


@app.command()
def dimensions(
    room: Path = typer.Option(None, "--room", "-r", help="Path to room JSON file"),
    room_type: str = typer.Option(None, "--type", "-t", help="Bundled sample room type"),
    output: Path = typer.Option(None, "--out", help="Path to output dimensions JSON file"),
    strict: bool = typer.Option(False, "--strict", help="Reject rooms that are not a closed simple polygon"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Compute one length/width dimension option per unique wall."""
    _setup_logging(verbose)
    try:
        room_obj = _resolve_room(room, room_type)

        if strict:
            validate_all(room_obj)
            console.print("[green]✓[/green] Room passed validation")

        options = room_dimensions(room_obj)

        table = Table(title=f"Dimension options ({len(options)})")
        table.add_column("Option", style="cyan")
        table.add_column("Length", justify="right", style="green")
        table.add_column("Width", justify="right", style="green")
        if verbose:
            table.add_column("Length axis", style="yellow")
            table.add_column("Width axis", style="yellow")

        for option in options:
            row = [option.id, f"{option.length_distance:.1f}", f"{option.width_distance:.1f}"]
            if verbose:
                row.append(f"{_fmt_point(option.length.start)} → {_fmt_point(option.length.end)}")
                row.append(f"{_fmt_point(option.width.start)} → {_fmt_point(option.width.end)}")
            table.add_row(*row)

        console.print(table)

        if output is not None:
            save_dimensions(options, str(output))
            console.print(f"[green]✓[/green] Dimensions saved to {output}")

    except InvalidRoom as e:
        console.print(f"[red]Invalid room: {e}[/red]")
        raise typer.Exit(1)
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except KeyError as e:
        console.print(f"[red]Error: {e.args[0]}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def info(
    room: Path = typer.Option(None, "--room", "-r", help="Path to room JSON file"),
    room_type: str = typer.Option(None, "--type", "-t", help="Bundled sample room type"),
):
    """Show corners, walls and footprint of a room."""
    try:
        room_obj = _resolve_room(room, room_type)
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except KeyError as e:
        console.print(f"[red]Error: {e.args[0]}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[cyan]Corners: {len(room_obj.corners)}[/cyan]")
    table = Table()
    table.add_column("Corner ID", style="cyan")
    table.add_column("Position", style="green")
    table.add_column("Starts", style="yellow")
    table.add_column("Ends", style="yellow")
    for corner in room_obj.corners:
        table.add_row(
            corner.id,
            _fmt_point(corner),
            ", ".join(r.id for r in corner.wall_starts),
            ", ".join(r.id for r in corner.wall_ends),
        )
    console.print(table)

    walls = derive_walls(room_obj.corners)
    unique_ids = {w.id for w in get_unique_walls(room_obj.corners)}
    console.print(f"\n[cyan]Walls: {len(walls)} ({len(unique_ids)} unique orientations)[/cyan]")
    wall_table = Table()
    wall_table.add_column("Wall ID", style="cyan")
    wall_table.add_column("Start", style="green")
    wall_table.add_column("End", style="green")
    wall_table.add_column("Unique", justify="center")
    for wall in walls:
        wall_table.add_row(
            wall.id,
            _fmt_point(wall.start),
            _fmt_point(wall.end),
            "✓" if wall.id in unique_ids else "",
        )
    console.print(wall_table)

    console.print(f"\nArea: {room_area(room_obj):.2f}")
    console.print(f"Perimeter: {room_perimeter(room_obj):.2f}")


@app.command()
def types():
    """List the bundled sample rooms."""
    for room_type in get_all_room_types():
        console.print(room_type)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
