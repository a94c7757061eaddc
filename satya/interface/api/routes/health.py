"""Health check routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from satya.config import Settings
from satya.domain.repository import ReportRepository
from satya.domain.value import ReportStatus

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    ok: bool
    db: bool
    git_sha: str
    error: str | None = None


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check(
    settings: FromDishka[Settings],
    report_repository: FromDishka[ReportRepository],
) -> HealthResponse:
    """Liveness plus a row store probe.

    Always answers 200; ``db`` tells whether the probe succeeded.
    """
    try:
        await report_repository.find_by_status(ReportStatus.PUBLISHED.value, 1)
    except SQLAlchemyError as e:
        logfire.warn("Health probe failed", error=str(e))
        return HealthResponse(ok=True, db=False, git_sha=settings.git_sha, error=str(e))
    return HealthResponse(ok=True, db=True, git_sha=settings.git_sha)
