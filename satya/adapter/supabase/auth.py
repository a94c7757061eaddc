"""Supabase identity provider.

Resolves bearer tokens through the platform's auth REST API; tokens are
never verified locally.
"""

import httpx
import logfire

from satya.config import PlatformSettings
from satya.domain.error import DependencyError
from satya.domain.service.auth_service import IdentityProvider
from satya.domain.value import IdentityUser


class SupabaseIdentityProvider(IdentityProvider):
    """Identity provider backed by ``GET /auth/v1/user``."""

    def __init__(
        self,
        settings: PlatformSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize identity provider.

        Args:
            settings: Platform settings (URL, service role key, timeout)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.settings = settings
        self.transport = transport

    async def get_user(self, token: str) -> IdentityUser | None:
        """Resolve a bearer token to a user.

        Args:
            token: User access token

        Returns:
            The user, or None if the platform rejects the token

        Raises:
            DependencyError: If the platform is unconfigured or unreachable
        """
        if not self.settings.is_configured:
            raise DependencyError("identity provider", "platform not configured")

        url = f"{self.settings.url.rstrip('/')}/auth/v1/user"
        headers = {
            "Authorization": f"Bearer {token}",
            "apikey": self.settings.service_role_key,
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(
                    url, headers=headers, timeout=self.settings.request_timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Identity provider HTTP error", error=str(e))
            raise DependencyError("identity provider", str(e)) from e

        if response.status_code in (401, 403):
            logfire.info("Token rejected", status_code=response.status_code)
            return None

        if response.status_code != 200:
            logfire.error(
                "Identity lookup failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise DependencyError(
                "identity provider", f"user lookup failed: {response.status_code}"
            )

        data = response.json()
        if not data or not data.get("id"):
            return None

        return IdentityUser(
            id=str(data["id"]),
            email=data.get("email"),
            app_metadata=data.get("app_metadata") or {},
        )


class MockIdentityProvider(IdentityProvider):
    """Mock identity provider for testing.

    Recognizes two fixed tokens and rejects everything else.
    """

    ADMIN_TOKEN = "mock-admin-token"
    USER_TOKEN = "mock-user-token"

    def __init__(self) -> None:
        self.users: dict[str, IdentityUser] = {
            self.ADMIN_TOKEN: IdentityUser(
                id="mock-admin",
                email="admin@example.com",
                app_metadata={"role": "admin"},
            ),
            self.USER_TOKEN: IdentityUser(id="mock-user", email="user@example.com"),
        }

    async def get_user(self, token: str) -> IdentityUser | None:
        """Return the fixed user for a known token."""
        return self.users.get(token)
