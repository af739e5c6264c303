"""Workout routine commands."""

import click

from ..db import WorkoutRepository
from ..models.workout import (
    WorkoutRecord,
    alt_parent_exists,
    is_alternative_parent,
    is_superset_parent,
    superset_parent_exists,
)
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
def workouts():
    """View, edit and move through the workout routine."""
    pass


def _link_label(workout: WorkoutRecord, routine: list[WorkoutRecord]) -> str:
    """Describe a workout's superset/alternative relationships."""
    names = {w.id: w.name for w in routine}
    if workout.superset_parent_id:
        if superset_parent_exists(workout, routine):
            return f"superset: {names[workout.superset_parent_id]}"
        return f"superset: missing {workout.superset_parent_id}"
    if workout.alt_parent_id:
        if alt_parent_exists(workout, routine):
            return f"alt: {names[workout.alt_parent_id]}"
        return f"alt: missing {workout.alt_parent_id}"

    tags = []
    if is_superset_parent(workout, routine):
        tags.append("has superset")
    if is_alternative_parent(workout, routine):
        tags.append("has alternatives")
    return ", ".join(tags)


@workouts.command("list")
@click.option("--day", "-d", type=int, help="Only show one routine day")
@click.pass_context
@async_command
async def list_workouts(ctx: click.Context, day: int | None):
    """List workouts in the routine."""
    ensure_initialized(ctx)

    repo = WorkoutRepository()
    routine = await repo.list_all()
    items = [w for w in routine if day is None or w.day == day]
    if not items:
        echo_info("No workouts found.")
        return

    rows = [
        [
            w.id,
            str(w.day),
            w.name,
            f"{w.weight:g}",
            f"{w.sets}x{w.reps}",
            _link_label(w, routine),
        ]
        for w in sorted(items, key=lambda w: (w.day, w.day_order))
    ]
    click.echo(format_table(["ID", "Day", "Exercise", "Weight", "Sets", "Link"], rows))


@workouts.command("edit")
@click.argument("workout_id")
@click.option("--name", help="Exercise name")
@click.option("--weight", "-w", type=float, help="Working weight")
@click.option("--sets", "-s", type=click.IntRange(min=0), help="Number of sets")
@click.option("--reps", "-r", type=click.IntRange(min=0), help="Reps per set")
@click.option("--notes", "-n", help="Free-text notes")
@click.option("--day", "-d", type=click.IntRange(min=1), help="Move to another day")
@click.pass_context
@async_command
async def edit(
    ctx: click.Context,
    workout_id: str,
    name: str | None,
    weight: float | None,
    sets: int | None,
    reps: int | None,
    notes: str | None,
    day: int | None,
):
    """Change fields of one workout."""
    ensure_initialized(ctx)

    repo = WorkoutRepository()
    workout = await repo.get(workout_id)
    if not workout:
        echo_error(f"Workout {workout_id} not found")
        ctx.exit(1)

    changes = {
        "name": name,
        "weight": weight,
        "sets": sets,
        "reps": reps,
        "notes": notes,
        "day": day,
    }
    changes = {k: v for k, v in changes.items() if v is not None}
    if not changes:
        echo_info("Nothing to change")
        return

    for field_name, value in changes.items():
        setattr(workout, field_name, value)
    await repo.update(workout)
    echo_success(f"Updated {workout.name}")


@workouts.command("remove")
@click.argument("workout_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def remove(ctx: click.Context, workout_id: str, force: bool):
    """Delete a workout from the routine."""
    ensure_initialized(ctx)

    repo = WorkoutRepository()
    workout = await repo.get(workout_id)
    if not workout:
        echo_error(f"Workout {workout_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Workout: {workout.name} (day {workout.day})")
        if not click.confirm("Are you sure you want to delete this workout?"):
            echo_info("Cancelled")
            return

    await repo.remove(workout_id)
    echo_success(f"Removed {workout.name}")


@workouts.command("reorder")
@click.argument("day", type=click.IntRange(min=1))
@click.argument("workout_ids", nargs=-1, required=True)
@click.pass_context
@async_command
async def reorder(ctx: click.Context, day: int, workout_ids: tuple[str, ...]):
    """Set the order of workouts within DAY.

    WORKOUT_IDS are listed in their new order.

    Example:
        liftlog workouts reorder 1 <squat-id> <bench-id>
    """
    ensure_initialized(ctx)

    repo = WorkoutRepository()
    day_ids = {w.id for w in await repo.list_all(day=day)}
    unknown = [workout_id for workout_id in workout_ids if workout_id not in day_ids]
    if unknown:
        echo_error(f"Not on day {day}: {', '.join(unknown)}")
        ctx.exit(1)

    await repo.reorder(day, list(workout_ids))
    echo_success(f"Reordered {len(workout_ids)} workouts on day {day}")


@workouts.command("current")
@click.pass_context
@async_command
async def current(ctx: click.Context):
    """Show the current routine day."""
    ensure_initialized(ctx)

    repo = WorkoutRepository()
    day = await repo.get_current_day()
    click.echo(f"Day {day} of {await repo.unique_days()}")


@workouts.command("next-day")
@click.pass_context
@async_command
async def next_day(ctx: click.Context):
    """Advance to the next routine day, wrapping after the last one."""
    ensure_initialized(ctx)

    repo = WorkoutRepository()
    day = await repo.next_day(await repo.get_current_day())
    await repo.set_current_day(day)
    echo_success(f"Now on day {day}")


@workouts.command("compact")
@click.pass_context
@async_command
async def compact(ctx: click.Context):
    """Renumber routine days to 1..N."""
    ensure_initialized(ctx)

    repo = WorkoutRepository()
    await repo.compact_days()
    echo_success(f"Routine has {await repo.unique_days()} days")
