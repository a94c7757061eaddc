"""HTTP client for the SatyaMatrix API."""

from abc import ABC, abstractmethod
from typing import Any

import httpx
import logfire

from satya.application.usecase.report import ReportItem, TrendingReportItem
from satya.domain.model.vote import VoteTally


class ApiError(Exception):
    """Raised when the API answers with an error or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class VoteSubmitter(ABC):
    """Anything that can submit a vote and return the server tally."""

    @abstractmethod
    async def submit_vote(self, report_id: str, voter_id: str, choice: int) -> VoteTally:
        pass


class SatyaApiClient(VoteSubmitter):
    """Thin async client over the ``/api`` routes.

    A fresh ``httpx.AsyncClient`` is opened per call.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5050",
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: Server origin (``/api`` is appended)
            timeout: Request timeout in seconds
            transport: Optional transport (e.g. ``httpx.MockTransport`` in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _request(
        self, method: str, path: str, **kwargs: Any
    ) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=f"{self.base_url}/api",
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logfire.error("API request failed", method=method, path=path, error=str(e))
            raise ApiError(f"request failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code >= 400:
            message = body.get("error") if isinstance(body, dict) else None
            raise ApiError(
                message or f"{method} {path} failed: {response.status_code}",
                status_code=response.status_code,
            )
        return body

    async def health(self) -> dict[str, Any]:
        return await self._request("GET", "/health")

    async def trending(self, limit: int | None = None) -> list[TrendingReportItem]:
        """Fetch the trending feed."""
        params = {"limit": limit} if limit is not None else None
        body = await self._request("GET", "/trending", params=params)
        return [TrendingReportItem(**item) for item in body.get("reports", [])]

    async def create_report(self, payload: dict[str, Any]) -> ReportItem:
        """Publish a report."""
        body = await self._request("POST", "/reports", json=payload)
        return ReportItem(**body["report"])

    async def upload_image(
        self, filename: str, data: bytes, content_type: str | None = None
    ) -> str:
        """Upload an image and return its public URL."""
        files = {"file": (filename, data, content_type or "application/octet-stream")}
        body = await self._request("POST", "/upload-image", files=files)
        return body["url"]

    async def get_tally(self, report_id: str) -> VoteTally:
        body = await self._request("GET", f"/reports/{report_id}/votes")
        return VoteTally(likes=body["likes"], dislikes=body["dislikes"])

    async def submit_vote(self, report_id: str, voter_id: str, choice: int) -> VoteTally:
        """Cast or change a vote; returns the server's tally."""
        body = await self._request(
            "POST",
            f"/reports/{report_id}/vote",
            json={"voter_id": voter_id, "vote": choice},
        )
        return VoteTally(likes=body["likes"], dislikes=body["dislikes"])

    async def delete_report(self, report_id: str, access_token: str) -> None:
        """Delete a report (admin token required)."""
        await self._request(
            "DELETE",
            f"/reports/{report_id}",
            headers={"Authorization": f"Bearer {access_token}"},
        )
