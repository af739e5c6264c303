"""Initialize project command."""

import click

from ..config import get_data_dir
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the liftlog data directory and database."""
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing liftlog in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  liftlog import workouts.csv     # Load a workout routine")
    click.echo("  liftlog weight add 180.5        # Log a weigh-in")
    click.echo("  liftlog weight stats            # See your trend")
