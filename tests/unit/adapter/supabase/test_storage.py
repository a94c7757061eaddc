"""Unit tests for the Supabase storage adapter."""

import json

import httpx
import pytest

from satya.adapter.supabase import SupabaseBlobStorage
from satya.config import PlatformSettings
from satya.domain.error import DependencyError

SETTINGS = PlatformSettings(url="https://project.supabase.test", service_role_key="srk")


class RecordingHandler:
    """MockTransport handler answering from a list of canned responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)


def _storage(handler: RecordingHandler) -> SupabaseBlobStorage:
    return SupabaseBlobStorage(SETTINGS, transport=httpx.MockTransport(handler))


class TestEnsureBucket:
    @pytest.mark.asyncio
    async def test_creates_missing_bucket(self):
        handler = RecordingHandler(
            httpx.Response(200, json=[{"name": "other"}]),
            httpx.Response(200, json={"name": "reports-media"}),
        )

        created = await _storage(handler).ensure_bucket(
            "reports-media", public=True, file_size_limit=1024
        )

        assert created is True
        create = handler.requests[1]
        assert create.method == "POST"
        assert json.loads(create.content) == {
            "id": "reports-media",
            "name": "reports-media",
            "public": True,
            "file_size_limit": 1024,
        }

    @pytest.mark.asyncio
    async def test_existing_bucket(self):
        handler = RecordingHandler(httpx.Response(200, json=[{"name": "reports-media"}]))

        created = await _storage(handler).ensure_bucket(
            "reports-media", public=True, file_size_limit=1024
        )

        assert created is False
        assert len(handler.requests) == 1


class TestObjects:
    @pytest.mark.asyncio
    async def test_upload_does_not_overwrite(self):
        handler = RecordingHandler(httpx.Response(200, json={"Key": "k"}))

        await _storage(handler).upload(
            "reports-media", "uploads/a b.png", b"data", "image/png"
        )

        request = handler.requests[0]
        assert request.url.raw_path == b"/storage/v1/object/reports-media/uploads/a%20b.png"
        assert request.headers["x-upsert"] == "false"
        assert request.headers["Content-Type"] == "image/png"
        assert request.content == b"data"

    @pytest.mark.asyncio
    async def test_upload_conflict_is_dependency_error(self):
        handler = RecordingHandler(httpx.Response(409, text="exists"))

        with pytest.raises(DependencyError):
            await _storage(handler).upload("reports-media", "uploads/a.png", b"x", None)

    @pytest.mark.asyncio
    async def test_remove(self):
        handler = RecordingHandler(httpx.Response(200, json=[]))

        await _storage(handler).remove("reports-media", ["uploads/a.png"])

        request = handler.requests[0]
        assert request.method == "DELETE"
        assert json.loads(request.content) == {"prefixes": ["uploads/a.png"]}

    def test_public_url(self):
        storage = SupabaseBlobStorage(SETTINGS)

        assert storage.public_url("reports-media", "uploads/a b.png") == (
            "https://project.supabase.test/storage/v1/object/public/"
            "reports-media/uploads/a%20b.png"
        )
