"""Export workout routine command."""

from pathlib import Path

import click

from ..services.workout_export import WorkoutExportService, export_filename
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized


@click.command()
@click.option(
    "--clipboard",
    "-c",
    is_flag=True,
    help="Copy to clipboard instead of printing",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Write to a file (or a directory, using the default filename)",
)
@click.pass_context
@async_command
async def export(ctx, clipboard: bool, output: str | None):
    """Export the workout routine as CSV.

    Examples:
        # Print CSV
        liftlog export

        # Save to workouts-<today>.csv in the current directory
        liftlog export -o .

        # Save to a specific file
        liftlog export -o my_routine.csv
    """
    ensure_initialized(ctx)

    service = WorkoutExportService()
    try:
        content = await service.export_workouts()
    except Exception as e:
        echo_error(f"Failed to export workouts: {e}")
        ctx.exit(1)

    if clipboard:
        try:
            import pyperclip

            pyperclip.copy(content)
            echo_success("Copied to clipboard!")
        except ImportError:
            echo_error(
                "pyperclip not installed. Install with: pip install liftlog[clipboard]"
            )
            ctx.exit(1)

    elif output:
        path = Path(output)
        if path.is_dir():
            path = path / export_filename()
        path.write_text(content, encoding="utf-8")
        echo_success(f"Exported to {path}")
        echo_info(f"{max(len(content.splitlines()) - 1, 0)} rows written")

    else:
        click.echo(content)
