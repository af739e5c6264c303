"""Workout routine routes."""

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from ...db.repositories import WorkoutRepository
from ...services.workout_export import (
    CSV_MEDIA_TYPE,
    WorkoutExportService,
    export_filename,
)
from ...services.workout_import import WorkoutImportService

router = APIRouter(prefix="/workouts", tags=["workouts"])


def get_repository(request: Request) -> WorkoutRepository:
    """Build a workout repository on the app's store."""
    return WorkoutRepository(request.app.state.store)


@router.get("")
async def list_workouts(request: Request, day: int | None = None):
    """List workouts, optionally for one routine day."""
    repo = get_repository(request)
    return [w.to_dict() for w in await repo.list_all(day=day)]


@router.get("/exists")
async def workouts_exist(request: Request):
    """Whether an import would overwrite existing workouts."""
    service = WorkoutImportService(get_repository(request))
    return {"exists": await service.has_existing_workouts()}


@router.get("/export")
async def export_workouts(request: Request):
    """Download the routine as a CSV file."""
    service = WorkoutExportService(get_repository(request))
    content = await service.export_workouts()
    return Response(
        content=content,
        media_type=CSV_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename()}"'
        },
    )


@router.post("/import")
async def import_workouts(request: Request, file: UploadFile = File(...)):
    """Replace the routine with the workouts in an uploaded CSV file."""
    raw = await file.read()
    try:
        csv_text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return JSONResponse({"error": "File is not UTF-8 text"}, status_code=400)

    service = WorkoutImportService(get_repository(request))
    try:
        imported = await service.import_workouts(csv_text)
    except Exception as e:
        return JSONResponse({"error": f"Import failed: {e}"}, status_code=500)

    return {"status": "imported", "count": len(imported)}


class ReorderRequest(BaseModel):
    """New order of workout IDs within one day."""

    day: int
    ids: list[str]


@router.post("/reorder")
async def reorder_workouts(request: Request, body: ReorderRequest):
    """Set workout order within a day from the position of each ID."""
    await get_repository(request).reorder(body.day, body.ids)
    return {"status": "reordered"}


@router.delete("/{workout_id}")
async def delete_workout(request: Request, workout_id: str):
    """Delete a workout."""
    repo = get_repository(request)
    if not await repo.get(workout_id):
        return JSONResponse({"error": "Workout not found"}, status_code=404)
    await repo.remove(workout_id)
    return {"status": "deleted"}
