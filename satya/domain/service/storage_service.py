"""Blob storage domain service.

Report images live in one public bucket under ``uploads/``. A report only
keeps the image's public URL, so deletion maps the URL back to the object
path.
"""

import re
import secrets
import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import PurePosixPath
from urllib.parse import unquote, urlsplit

import logfire

from satya.config import PlatformSettings
from satya.domain.error import DependencyError, ValidationError
from satya.domain.value.common import ValueObject

from .base import Service

UPLOAD_PREFIX = "uploads"


class BlobStorage(ABC):
    """Object storage interface.

    Implementations live in the adapter layer and raise DependencyError on
    any storage failure.
    """

    @abstractmethod
    async def ensure_bucket(
        self, bucket: str, *, public: bool, file_size_limit: int
    ) -> bool:
        """Create the bucket if it does not exist.

        Returns:
            True if the bucket was created, False if it already existed
        """
        pass

    @abstractmethod
    async def upload(
        self, bucket: str, path: str, data: bytes, content_type: str | None
    ) -> None:
        """Upload an object without overwriting an existing one."""
        pass

    @abstractmethod
    async def remove(self, bucket: str, paths: Sequence[str]) -> None:
        """Remove objects from the bucket."""
        pass

    @abstractmethod
    def public_url(self, bucket: str, path: str) -> str:
        """Public URL of an object in a public bucket."""
        pass


class StoredImage(ValueObject):
    """An uploaded image."""

    url: str
    path: str


def safe_object_name(
    filename: str, *, timestamp_ms: int | None = None, token: str | None = None
) -> str:
    """Build a collision-resistant object name from an uploaded filename.

    ``My Photo!.PNG`` becomes ``My_Photo__<millis>_<12 hex>.png``.

    Args:
        filename: Original client filename
        timestamp_ms: Override for the millisecond timestamp
        token: Override for the random hex token

    Returns:
        Object name (no directory)
    """
    name = PurePosixPath(filename.replace("\\", "/")).name
    suffix = PurePosixPath(name).suffix
    stem = name[: -len(suffix)] if suffix else name
    ext = suffix.lower() if re.fullmatch(r"\.[A-Za-z0-9]+", suffix) else ""

    base = re.sub(r"[^a-z0-9\-_]", "_", stem, flags=re.IGNORECASE)[:50]
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    if token is None:
        token = secrets.token_hex(6)
    return f"{base}_{timestamp_ms}_{token}{ext}"


class StorageService(Service):
    """Domain service for report images."""

    def __init__(
        self, blob_storage: BlobStorage, platform_settings: PlatformSettings
    ) -> None:
        """Initialize storage service.

        Args:
            blob_storage: Object storage adapter
            platform_settings: Platform settings (bucket name and limits)
        """
        self.blob_storage = blob_storage
        self.platform_settings = platform_settings

    @property
    def bucket(self) -> str:
        return self.platform_settings.storage_bucket

    async def ensure_bucket(self) -> None:
        """Make sure the public image bucket exists.

        Failures are logged and swallowed so the API can start without
        storage.
        """
        with logfire.span("storage_service.ensure_bucket", bucket=self.bucket):
            try:
                created = await self.blob_storage.ensure_bucket(
                    self.bucket,
                    public=True,
                    file_size_limit=self.platform_settings.bucket_file_size_limit,
                )
            except DependencyError as e:
                logfire.warn("Storage ensure failed", bucket=self.bucket, error=str(e))
                return

            if created:
                logfire.info("Storage bucket created", bucket=self.bucket)

    async def upload_image(
        self, data: bytes, filename: str | None, content_type: str | None
    ) -> StoredImage:
        """Upload a report image.

        Args:
            data: File contents
            filename: Original filename
            content_type: MIME type reported by the client

        Returns:
            Public URL and object path

        Raises:
            ValidationError: If the file is empty or over the bucket limit
            DependencyError: If the upload fails
        """
        if not data:
            raise ValidationError("No file uploaded")

        limit = self.platform_settings.bucket_file_size_limit
        if len(data) > limit:
            raise ValidationError(f"File exceeds the {limit} byte upload limit")

        path = f"{UPLOAD_PREFIX}/{safe_object_name(filename or 'upload')}"
        with logfire.span(
            "storage_service.upload_image", path=path, size=len(data)
        ):
            await self.blob_storage.upload(self.bucket, path, data, content_type)
            url = self.blob_storage.public_url(self.bucket, path)
            logfire.info("Image uploaded", path=path, content_type=content_type)
            return StoredImage(url=url, path=path)

    def path_from_public_url(self, url: str) -> str | None:
        """Map a public object URL back to its path in our bucket.

        Returns:
            URL-decoded object path, or None if the URL is not one of ours
        """
        try:
            path = urlsplit(url).path
        except ValueError:
            return None

        marker = f"/object/public/{self.bucket}/"
        index = path.find(marker)
        if index == -1:
            return None
        return unquote(path[index + len(marker) :]) or None

    async def remove_object(self, path: str) -> None:
        """Remove one object.

        Raises:
            DependencyError: If the storage call fails
        """
        with logfire.span("storage_service.remove_object", path=path):
            await self.blob_storage.remove(self.bucket, [path])
