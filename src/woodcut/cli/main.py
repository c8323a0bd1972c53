"""Typer CLI for cut layout planning."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from woodcut.application import compute_layout
from woodcut.application.config import (
    ConfigError,
    CutPlanConfiguration,
    config_to_board,
    config_to_pieces,
    config_to_policy,
    load_config,
)
from woodcut.domain import LayoutError, PieceTooLarge, RotationPolicy
from woodcut.infrastructure import (
    BillOfMaterialsFormatter,
    CutDiagramRenderer,
    JsonExporter,
    LayoutSummaryFormatter,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class OutputFormat(str, Enum):
    """Output formats for the layout command."""

    SUMMARY = "summary"
    BOM = "bom"
    JSON = "json"
    SVG = "svg"


app = typer.Typer(
    name="woodcut",
    help="Plan how to cut rectangular wood pieces from stock boards.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging from the layout engine"),
    ] = False,
) -> None:
    """Plan how to cut rectangular wood pieces from stock boards."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


def _load_or_exit(config_file: Path) -> CutPlanConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def layout(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON cut plan file"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.SUMMARY,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
    ] = None,
    rotation_policy: Annotated[
        RotationPolicy | None,
        typer.Option("--rotation-policy", help="Override the file's rotation policy"),
    ] = None,
    show_grain: Annotated[
        bool,
        typer.Option("--show-grain", help="Draw grain arrows in SVG output"),
    ] = False,
) -> None:
    """Compute and print the cutting plan for a cut plan file.

    Example:
        woodcut layout kitchen.json --format bom
    """
    config = _load_or_exit(config_file)

    try:
        pieces = config_to_pieces(config)
        policy = rotation_policy or config_to_policy(config)
        result = compute_layout(config_to_board(config), pieces, policy)
    except PieceTooLarge as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(
            "Reduce the piece size or trim margins, or use a larger board.",
            err=True,
        )
        raise typer.Exit(code=1)
    except LayoutError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == OutputFormat.BOM:
        content = BillOfMaterialsFormatter().format(result, pieces, config.project.name)
    elif output_format == OutputFormat.JSON:
        content = JsonExporter().export(result)
    elif output_format == OutputFormat.SVG:
        content = CutDiagramRenderer(show_grain=show_grain).render_combined_svg(
            result, pieces
        )
    else:
        content = LayoutSummaryFormatter().format(result)

    if output_file is not None:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding="utf-8")
        typer.echo(f"Wrote {output_format.value} output to {output_file}")
    else:
        typer.echo(content)


@app.command()
def validate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON cut plan file to validate"),
    ],
) -> None:
    """Validate a cut plan file without printing the layout.

    Checks JSON syntax, the schema, and that every piece fits on the board.

    Exit codes:
        0 - File is valid and can be laid out
        1 - File has errors
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo("Errors:", err=True)
        if e.error_type == "validation":
            for detail in e.details:
                typer.echo(f"  {detail['path']}: {detail['message']}", err=True)
        else:
            typer.echo(f"  {e}", err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    try:
        result = compute_layout(
            config_to_board(config), config_to_pieces(config), config_to_policy(config)
        )
    except LayoutError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  {e}", err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Validation passed: {result.total_pieces} pieces on "
        f"{result.boards_needed} board(s)."
    )


if __name__ == "__main__":
    app()
