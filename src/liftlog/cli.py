"""CLI entry point for liftlog."""

import click

from .commands import export, import_data, init, serve, weight, workouts
from .config import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="liftlog")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """liftlog: personal weight and workout routine tracker.

    Example usage:

        # Initialize the data directory
        liftlog init

        # Log weigh-ins and see the trend
        liftlog weight add 180.4
        liftlog weight stats

        # Move a routine between devices
        liftlog export -o .
        liftlog import workouts-2024-01-15.csv
    """
    configure_logging(verbose)


# Register commands
main.add_command(init)
main.add_command(import_data)
main.add_command(export)
main.add_command(workouts)
main.add_command(weight)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
