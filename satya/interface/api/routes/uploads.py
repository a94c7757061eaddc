"""Upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, UploadFile

from satya.application.usecase.upload import (
    UploadImageRequest,
    UploadImageResponse,
    UploadImageUseCase,
)
from satya.domain.error import ValidationError

router = APIRouter(tags=["uploads"], route_class=DishkaRoute)


@router.post("/upload-image", response_model=UploadImageResponse)
async def upload_image(
    upload_image_use_case: FromDishka[UploadImageUseCase],
    file: UploadFile | None = File(default=None),
) -> UploadImageResponse:
    """Store an image to attach to a report.

    Args:
        upload_image_use_case: Upload image use case from DI
        file: Multipart ``file`` field

    Returns:
        Public URL and object path
    """
    if file is None:
        raise ValidationError("No file uploaded")

    data = await file.read()
    return await upload_image_use_case.execute(
        UploadImageRequest(
            data=data, filename=file.filename, content_type=file.content_type
        )
    )
