"""Upload image use case."""

from pydantic import BaseModel

from satya.application.usecase.base import BaseUseCase
from satya.domain.service import StorageService


class UploadImageRequest(BaseModel):
    """Upload image request."""

    data: bytes
    filename: str | None = None
    content_type: str | None = None


class UploadImageResponse(BaseModel):
    """Upload image response."""

    url: str
    path: str


class UploadImageUseCase(BaseUseCase[UploadImageRequest, UploadImageResponse]):
    """Use case for storing an image to attach to a report."""

    def __init__(self, storage_service: StorageService) -> None:
        """Initialize upload image use case.

        Args:
            storage_service: Storage domain service
        """
        self.storage_service = storage_service

    async def execute(self, request: UploadImageRequest) -> UploadImageResponse:
        """Execute upload image flow.

        Raises:
            ValidationError: If the file is empty or too large
            DependencyError: If the upload fails
        """
        stored = await self.storage_service.upload_image(
            request.data, request.filename, request.content_type
        )
        return UploadImageResponse(url=stored.url, path=stored.path)
