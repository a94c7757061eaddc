"""Delete report use case."""

import logfire
from pydantic import BaseModel

from satya.application.usecase.base import BaseUseCase
from satya.domain.error import NotAuthorizedError
from satya.domain.service import AuthService, ReportService
from satya.domain.value import parse_report_id


class DeleteReportRequest(BaseModel):
    """Delete report request."""

    report_id: str
    credential: str | None = None  # Bearer token from the Authorization header


class DeleteReportResponse(BaseModel):
    """Delete report response."""

    ok: bool = True


class DeleteReportUseCase(BaseUseCase[DeleteReportRequest, DeleteReportResponse]):
    """Use case for an admin removing a report."""

    def __init__(self, auth_service: AuthService, report_service: ReportService) -> None:
        """Initialize delete report use case.

        Args:
            auth_service: Authorization domain service
            report_service: Report domain service
        """
        self.auth_service = auth_service
        self.report_service = report_service

    async def execute(self, request: DeleteReportRequest) -> DeleteReportResponse:
        """Execute delete report flow.

        Steps:
        1. Resolve and authorize the credential
        2. Delete votes, image and report (via ReportService)

        Args:
            request: Delete report request

        Returns:
            Acknowledgement

        Raises:
            NotAuthenticatedError: If the credential is missing or invalid
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the report does not exist
            DependencyError: If the row store fails
        """
        authorization = await self.auth_service.authorize(request.credential)
        if not authorization.authorized:
            logfire.warn(
                "Delete refused",
                report_id=request.report_id,
                identity=authorization.audit_name,
            )
            raise NotAuthorizedError("delete report", authorization.audit_name)

        report_id = parse_report_id(request.report_id)
        await self.report_service.delete_report(report_id, authorization.audit_name)
        return DeleteReportResponse()
