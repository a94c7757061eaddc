"""Unit tests for the Supabase identity provider."""

import httpx
import pytest

from satya.adapter.supabase import SupabaseIdentityProvider
from satya.config import PlatformSettings
from satya.domain.error import DependencyError

SETTINGS = PlatformSettings(url="https://project.supabase.test/", service_role_key="srk")


def _provider(handler) -> SupabaseIdentityProvider:
    return SupabaseIdentityProvider(SETTINGS, transport=httpx.MockTransport(handler))


class TestSupabaseIdentityProvider:
    @pytest.mark.asyncio
    async def test_resolves_user(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "id": "u-1",
                    "email": "Alice@Example.com",
                    "app_metadata": {"role": "admin"},
                },
            )

        user = await _provider(handler).get_user("token-1")

        assert user is not None
        assert user.id == "u-1"
        assert user.app_metadata == {"role": "admin"}
        assert str(seen[0].url) == "https://project.supabase.test/auth/v1/user"
        assert seen[0].headers["Authorization"] == "Bearer token-1"
        assert seen[0].headers["apikey"] == "srk"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_rejected_token(self, status):
        user = await _provider(lambda request: httpx.Response(status)).get_user("bad")

        assert user is None

    @pytest.mark.asyncio
    async def test_server_error_is_dependency_error(self):
        provider = _provider(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(DependencyError):
            await provider.get_user("token")

    @pytest.mark.asyncio
    async def test_network_error_is_dependency_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(DependencyError):
            await _provider(handler).get_user("token")

    @pytest.mark.asyncio
    async def test_unconfigured_platform(self):
        provider = SupabaseIdentityProvider(PlatformSettings())

        with pytest.raises(DependencyError):
            await provider.get_user("token")
