"""Body weight routes."""

from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...db.repositories import WeightRepository
from ...services.weight_stats import WeightStatsService

router = APIRouter(prefix="/weights", tags=["weights"])


class WeightEntry(BaseModel):
    """Request body for logging a weight."""

    weight: float
    timestamp: datetime | None = None


def get_service(request: Request) -> WeightStatsService:
    """Build a stats service on the app's store and shared calculator."""
    return WeightStatsService(
        WeightRepository(request.app.state.store),
        request.app.state.stats_calculator,
    )


@router.post("")
async def log_weight(request: Request, entry: WeightEntry):
    """Record a weight measurement."""
    sample = await get_service(request).log_weight(entry.weight, entry.timestamp)
    return sample.to_dict()


@router.get("/stats")
async def weight_stats(request: Request):
    """Daily ranges, rolling averages, chart bounds and trend numbers."""
    snapshot = await get_service(request).get_stats()
    return snapshot.to_dict()


@router.get("")
async def list_weights(request: Request):
    """All samples, oldest first."""
    samples = await WeightRepository(request.app.state.store).list_all()
    return [s.to_dict() for s in samples]


@router.delete("/{sample_id}")
async def delete_weight(request: Request, sample_id: str):
    """Delete a weight sample."""
    repo = WeightRepository(request.app.state.store)
    if not await repo.get(sample_id):
        return JSONResponse({"error": "Weight not found"}, status_code=404)
    await repo.remove(sample_id)
    return {"status": "deleted"}
