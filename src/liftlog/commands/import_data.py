"""Import workout routine command."""

from pathlib import Path

import click
import questionary

from ..services.workout_import import WorkoutImportService
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized


@click.command(name="import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", "-y", is_flag=True, help="Replace existing workouts without asking")
@click.pass_context
@async_command
async def import_data(ctx, path: str, yes: bool):
    """Import a workout routine from CSV.

    PATH is a CSV file produced by 'liftlog export' (a spreadsheet
    export with a byte order mark also works). All currently stored
    workouts are replaced. Workouts get new IDs; superset and
    alternative links between them are kept.

    Example:
        liftlog import workouts-2024-01-15.csv
    """
    ensure_initialized(ctx)

    try:
        csv_text = Path(path).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        echo_error(f"{path} is not a UTF-8 text file: {e}")
        ctx.exit(1)

    service = WorkoutImportService()

    if not yes and await service.has_existing_workouts():
        confirmed = await questionary.confirm(
            "This will replace all your current workouts. Continue?",
            default=False,
        ).ask_async()
        if not confirmed:
            echo_info("Import cancelled")
            return

    try:
        workouts = await service.import_workouts(csv_text)
    except Exception as e:
        echo_error(f"Failed to import workouts: {e}")
        ctx.exit(1)

    days = len({w.day for w in workouts})
    echo_success(f"Imported {len(workouts)} workouts across {days} days")
