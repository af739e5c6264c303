"""Body weight commands."""

from datetime import datetime

import click

from ..db import WeightRepository
from ..services.weight_stats import WeightStatsService
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
def weight():
    """Log body weight and view trends."""
    pass


@weight.command("add")
@click.argument("value", type=float)
@click.option(
    "--at",
    type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M"]),
    help="When the measurement was taken (default: now)",
)
@click.pass_context
@async_command
async def add(ctx: click.Context, value: float, at: datetime | None):
    """Log a weight measurement."""
    ensure_initialized(ctx)

    service = WeightStatsService()
    sample = await service.log_weight(value, at)
    echo_success(f"Logged {value:g} at {sample.timestamp:%Y-%m-%d %H:%M}")


@weight.command("list")
@click.option("--limit", "-n", default=20, type=click.IntRange(min=1), help="Number of recent samples")
@click.pass_context
@async_command
async def list_weights(ctx: click.Context, limit: int):
    """List recent weight measurements, newest last."""
    ensure_initialized(ctx)

    samples = await WeightRepository().list_all()
    if not samples:
        echo_info("No weights logged yet.")
        return

    rows = [
        [s.id, f"{s.timestamp:%Y-%m-%d %H:%M}", f"{s.weight_value:g}"]
        for s in samples[-limit:]
    ]
    click.echo(format_table(["ID", "Taken", "Weight"], rows))


@weight.command("remove")
@click.argument("sample_id")
@click.pass_context
@async_command
async def remove(ctx: click.Context, sample_id: str):
    """Delete one weight measurement."""
    ensure_initialized(ctx)

    repo = WeightRepository()
    sample = await repo.get(sample_id)
    if not sample:
        echo_error(f"Weight {sample_id} not found")
        ctx.exit(1)

    await repo.remove(sample_id)
    echo_success(f"Removed {sample.weight_value:g} from {sample.timestamp:%Y-%m-%d %H:%M}")


@weight.command("clear")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def clear(ctx: click.Context, force: bool):
    """Delete every weight measurement."""
    ensure_initialized(ctx)

    if not force and not click.confirm("Delete all logged weights?"):
        echo_info("Cancelled")
        return

    await WeightRepository().clear()
    echo_success("All weights deleted")


def _signed(value: float) -> str:
    return f"{value:+.1f}"


@weight.command("stats")
@click.option(
    "--days", "-n", default=14, type=click.IntRange(min=1),
    help="Number of recent days to list",
)
@click.pass_context
@async_command
async def stats(ctx: click.Context, days: int):
    """Show current weight, trends and recent daily ranges."""
    ensure_initialized(ctx)

    service = WeightStatsService()
    snapshot = await service.get_stats()

    if not snapshot.daily_stats:
        echo_info("No weights logged yet.")
        return

    trend = snapshot.stats
    click.echo()
    click.echo(click.style(f"Current weight: {trend.current_weight:.1f}", bold=True))
    click.echo(f"3-day change:   {_signed(trend.three_day_change)}")
    click.echo(f"7-day change:   {_signed(trend.seven_day_change)}")
    click.echo()

    rows = [
        [p.display_label, f"{p.min:.1f}", f"{p.max:.1f}", f"{p.avg:.1f}"]
        for p in snapshot.daily_stats[-days:]
    ]
    click.echo(format_table(["Day", "Min", "Max", "Avg"], rows))
