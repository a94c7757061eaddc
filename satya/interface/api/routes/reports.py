"""Report routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from satya.application.usecase.report import (
    CreateReportRequest,
    CreateReportResponse,
    CreateReportUseCase,
    DeleteReportRequest,
    DeleteReportResponse,
    DeleteReportUseCase,
    ListTrendingRequest,
    ListTrendingResponse,
    ListTrendingUseCase,
)
from satya.domain.service import bearer_token

router = APIRouter(tags=["reports"], route_class=DishkaRoute)


@router.post("/reports", response_model=CreateReportResponse)
async def create_report(
    request: CreateReportRequest,
    create_report_use_case: FromDishka[CreateReportUseCase],
) -> CreateReportResponse:
    """Publish a report.

    Args:
        request: Report fields
        create_report_use_case: Create report use case from DI

    Returns:
        The stored report with its id and created_at
    """
    return await create_report_use_case.execute(request)


@router.get("/trending", response_model=ListTrendingResponse)
async def list_trending(
    list_trending_use_case: FromDishka[ListTrendingUseCase],
    limit: str | None = Query(default=None),
) -> ListTrendingResponse:
    """Latest published reports with like/dislike counts.

    Args:
        list_trending_use_case: List trending use case from DI
        limit: Page size, clamped to [1, 100]; default 20, also when not an integer

    Returns:
        Reports, most recent first
    """
    return await list_trending_use_case.execute(ListTrendingRequest(limit=limit))


@router.delete("/reports/{report_id}", response_model=DeleteReportResponse)
async def delete_report(
    report_id: str,
    delete_report_use_case: FromDishka[DeleteReportUseCase],
    authorization: str | None = Header(default=None),
) -> DeleteReportResponse:
    """Delete a report, its votes and its image.

    Requires an admin bearer token.

    Args:
        report_id: Report UUID
        delete_report_use_case: Delete report use case from DI
        authorization: Authorization header

    Returns:
        ``{"ok": true}``
    """
    return await delete_report_use_case.execute(
        DeleteReportRequest(report_id=report_id, credential=bearer_token(authorization))
    )
