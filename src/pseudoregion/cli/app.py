"""CLI application entry point for pseudoregion.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from pseudoregion import __version__
from pseudoregion.cli.output import (
    console,
    print_corner_summary,
    print_document_info,
    print_error,
    print_header,
    print_polygons,
    print_sides,
    print_step,
    print_success,
)
from pseudoregion.config import (
    ClassificationConfig,
    FineVertexPolicy,
    LoggingConfig,
    PseudoRegionSettings,
)
from pseudoregion.core import TessellationHolder
from pseudoregion.exceptions import PseudoRegionError, TessellationLoadError
from pseudoregion.io import TessellationReader
from pseudoregion.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="pseudoregion",
    help="Classify the corners of a nested tessellation for later deformation.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pseudoregion[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Classify the corners of a nested tessellation for later deformation."""


@app.command()
def inspect(
    document: Annotated[
        Path,
        typer.Argument(
            help="Path to a tessellation JSON document",
            show_default=False,
        ),
    ],
    fine_policy: Annotated[
        str,
        typer.Option(
            "--fine-policy",
            "-f",
            help="Classification of fine-tessellation vertices (fixed|retest)",
        ),
    ] = "fixed",
    decimals: Annotated[
        int | None,
        typer.Option(
            "--decimals",
            "-d",
            help="Round coordinates to this many decimals when matching corners",
            min=0,
            max=15,
        ),
    ] = None,
    merge_collinear: Annotated[
        bool,
        typer.Option(
            "--merge-collinear",
            help="Fuse boundary sides that continue each other on one line",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show per-polygon corner counts",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Build the corner graph of a tessellation and summarize it.

    Reads the base polygon, pseudo regions and fine tessellation from a JSON
    document, classifies every vertex and reports the boundary sides between
    pseudo regions.

    Example:
        pseudoregion inspect treemap.json --fine-policy retest
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not document.exists():
        print_error(
            f"Input file not found: {document}",
            details=f"The file '{document}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    try:
        policy = FineVertexPolicy(fine_policy.lower())
    except ValueError:
        print_error(
            f"Invalid fine policy: {fine_policy}",
            details="Valid values: fixed, retest",
        )
        raise typer.Exit(code=1)

    settings = PseudoRegionSettings(
        classification=ClassificationConfig(
            fine_vertex_policy=policy,
            coordinate_decimals=decimals,
            merge_collinear_sides=merge_collinear,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading tessellation")

        data = TessellationReader(document).load()

        if not quiet:
            print_document_info(
                path=str(document),
                pseudo_region_count=len(data.pseudo_regions),
                polygon_count=len(data.tessellation),
                vertex_count=data.vertex_count,
            )
            print_step("Classifying corners")

        holder = TessellationHolder(
            data.base_polygon,
            data.pseudo_regions,
            data.tessellation,
            config=settings.classification,
            logger=logger,
        )
        polygons = holder.deformable_polygons()

        if not quiet:
            print_corner_summary(holder.stats)
            print_step("Boundary sides")
            print_sides(holder.sides, merged=holder.stats.merged_side_count)

            if verbose:
                print_step("Polygons")
                print_polygons(polygons)

            print_success(holder.stats.duration_seconds)

    except TessellationLoadError as e:
        print_error(f"Could not load tessellation: {e.reason}")
        raise typer.Exit(code=1)
    except PseudoRegionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
