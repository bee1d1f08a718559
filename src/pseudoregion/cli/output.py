"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pseudoregion.core import BoundarySide, DeformablePolygon
from pseudoregion.utils import TopologyStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Pseudoregion[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(path: str, pseudo_region_count: int, polygon_count: int, vertex_count: int) -> None:
    """Print tessellation document information.

    Args:
        path: Path to the document
        pseudo_region_count: Number of pseudo-region polygons
        polygon_count: Number of fine-tessellation polygons
        vertex_count: Total vertices over all polygon sets
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(
        f"  {pseudo_region_count} pseudo regions {SYM_DOT} {polygon_count} cells "
        f"{SYM_DOT} {vertex_count:,} vertices"
    )


def print_corner_summary(stats: TopologyStats) -> None:
    """Print corner classification counts.

    Args:
        stats: Build statistics of the holder
    """
    console.print(f"  [green]{stats.corner_count}[/green] corners")
    console.print(
        f"  {stats.fixed_count} fixed {SYM_DOT} {stats.free_count} free "
        f"{SYM_DOT} {stats.line_constrained_count} line-constrained"
    )


def print_sides(sides: tuple[BoundarySide, ...], merged: int = 0) -> None:
    """Print a table of boundary sides.

    Args:
        sides: Boundary sides of the holder
        merged: Number of sides removed by collinear merging
    """
    suffix = f" {SYM_DOT} {merged} merged" if merged else ""
    console.print(f"  [green]{len(sides)}[/green] boundary sides{suffix}")
    if not sides:
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Points", justify="right")
    table.add_column("Regions", justify="right")
    for side in sides:
        table.add_row(
            f"({side.x1:g}, {side.y1:g})",
            f"({side.x2:g}, {side.y2:g})",
            str(len(side.points)),
            str(side.associated_polygon_count),
        )
    console.print(table)


def print_polygons(polygons: list[DeformablePolygon], limit: int = 20) -> None:
    """Print corner counts and areas of deformable polygons.

    Args:
        polygons: Deformable polygons of the holder
        limit: Maximum number of rows to show
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Corners", justify="right")
    table.add_column("Movable", justify="right")
    table.add_column("Target area", justify="right")
    for idx, polygon in enumerate(polygons[:limit]):
        movable = sum(1 for corner in polygon.corners if not corner.is_fixed)
        table.add_row(
            str(idx),
            str(len(polygon)),
            str(movable),
            f"{polygon.target_area:.4g}",
        )
    console.print(table)
    if len(polygons) > limit:
        console.print(f"  ... +{len(polygons) - limit} more")


def print_success(duration_s: float) -> None:
    """Print completion line.

    Args:
        duration_s: Build time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(duration_s)}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"
