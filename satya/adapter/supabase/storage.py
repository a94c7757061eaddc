"""Supabase object storage adapter."""

from collections.abc import Sequence
from urllib.parse import quote

import httpx
import logfire

from satya.config import PlatformSettings
from satya.domain.error import DependencyError
from satya.domain.service.storage_service import BlobStorage


class SupabaseBlobStorage(BlobStorage):
    """Blob storage backed by the Supabase storage REST API.

    Every call authenticates with the service role key.
    """

    def __init__(
        self,
        settings: PlatformSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize storage adapter.

        Args:
            settings: Platform settings (URL, service role key, timeout)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.settings = settings
        self.transport = transport

    @property
    def _storage_url(self) -> str:
        if not self.settings.is_configured:
            raise DependencyError("blob storage", "platform not configured")
        return f"{self.settings.url.rstrip('/')}/storage/v1"

    def _headers(self) -> dict[str, str]:
        key = self.settings.service_role_key or ""
        return {"Authorization": f"Bearer {key}", "apikey": key}

    def _check(self, response: httpx.Response, operation: str) -> None:
        if response.status_code >= 400:
            logfire.error(
                "Storage request failed",
                operation=operation,
                status_code=response.status_code,
                error=response.text,
            )
            raise DependencyError(
                "blob storage", f"{operation} failed: {response.status_code}"
            )

    async def ensure_bucket(
        self, bucket: str, *, public: bool, file_size_limit: int
    ) -> bool:
        """Create the bucket if it is not listed yet."""
        base = self._storage_url
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(
                    f"{base}/bucket",
                    headers=self._headers(),
                    timeout=self.settings.request_timeout,
                )
                self._check(response, "list_buckets")

                existing = {b.get("name") for b in response.json() or []}
                if bucket in existing:
                    return False

                response = await client.post(
                    f"{base}/bucket",
                    headers=self._headers(),
                    json={
                        "id": bucket,
                        "name": bucket,
                        "public": public,
                        "file_size_limit": file_size_limit,
                    },
                    timeout=self.settings.request_timeout,
                )
                self._check(response, "create_bucket")
                return True
        except httpx.HTTPError as e:
            logfire.error("Storage HTTP error", operation="ensure_bucket", error=str(e))
            raise DependencyError("blob storage", str(e)) from e

    async def upload(
        self, bucket: str, path: str, data: bytes, content_type: str | None
    ) -> None:
        """Upload an object; an existing object at the path is an error."""
        url = f"{self._storage_url}/object/{bucket}/{quote(path)}"
        headers = {
            **self._headers(),
            "Content-Type": content_type or "application/octet-stream",
            "x-upsert": "false",
        }
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    url,
                    content=data,
                    headers=headers,
                    timeout=self.settings.request_timeout,
                )
                self._check(response, "upload")
        except httpx.HTTPError as e:
            logfire.error("Storage HTTP error", operation="upload", error=str(e))
            raise DependencyError("blob storage", str(e)) from e

    async def remove(self, bucket: str, paths: Sequence[str]) -> None:
        """Remove objects by path."""
        url = f"{self._storage_url}/object/{bucket}"
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.request(
                    "DELETE",
                    url,
                    json={"prefixes": list(paths)},
                    headers=self._headers(),
                    timeout=self.settings.request_timeout,
                )
                self._check(response, "remove")
        except httpx.HTTPError as e:
            logfire.error("Storage HTTP error", operation="remove", error=str(e))
            raise DependencyError("blob storage", str(e)) from e

    def public_url(self, bucket: str, path: str) -> str:
        """Public URL of an object."""
        base = (self.settings.url or "").rstrip("/")
        return f"{base}/storage/v1/object/public/{bucket}/{quote(path)}"


class MockBlobStorage(BlobStorage):
    """In-memory blob storage for testing."""

    BASE_URL = "https://storage.test"

    def __init__(self) -> None:
        self.buckets: set[str] = set()
        self.objects: dict[tuple[str, str], bytes] = {}
        self.removed: list[str] = []

    async def ensure_bucket(
        self, bucket: str, *, public: bool, file_size_limit: int
    ) -> bool:
        if bucket in self.buckets:
            return False
        self.buckets.add(bucket)
        return True

    async def upload(
        self, bucket: str, path: str, data: bytes, content_type: str | None
    ) -> None:
        if (bucket, path) in self.objects:
            raise DependencyError("blob storage", f"object exists: {path}")
        self.objects[(bucket, path)] = data

    async def remove(self, bucket: str, paths: Sequence[str]) -> None:
        for path in paths:
            self.objects.pop((bucket, path), None)
            self.removed.append(path)

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.BASE_URL}/storage/v1/object/public/{bucket}/{quote(path)}"
