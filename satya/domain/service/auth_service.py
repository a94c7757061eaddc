"""Authorization domain service.

Identity resolution is delegated to the platform's identity provider; this
service only decides whether a resolved identity may perform admin actions.
"""

from abc import ABC, abstractmethod

import logfire

from satya.config import AuthSettings
from satya.domain.error import DependencyError, NotAuthenticatedError
from satya.domain.value import Authorization, IdentityUser

from .base import Service

ADMIN_ROLE = "admin"


class IdentityProvider(ABC):
    """Identity provider interface.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def get_user(self, token: str) -> IdentityUser | None:
        """Resolve a bearer token to a user.

        Args:
            token: Access token issued by the provider

        Returns:
            The user, or None if the token is invalid or expired

        Raises:
            DependencyError: If the provider cannot be reached
        """
        pass


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer ") :].strip()
    return token or None


class AuthService(Service):
    """Domain service for admin authorization."""

    def __init__(
        self, identity_provider: IdentityProvider, auth_settings: AuthSettings
    ) -> None:
        """Initialize auth service.

        Args:
            identity_provider: Identity provider adapter
            auth_settings: Authorization settings (admin allow-list)
        """
        self.identity_provider = identity_provider
        self.auth_settings = auth_settings

    def is_admin(self, user: IdentityUser) -> bool:
        """Admin if the role claim says so or the email is allow-listed."""
        if ADMIN_ROLE in user.roles:
            return True
        allowlist = self.auth_settings.admin_allowlist
        return bool(user.email) and user.email.lower() in allowlist

    async def authorize(self, credential: str | None) -> Authorization:
        """Resolve a credential and decide whether it carries admin rights.

        Args:
            credential: Bearer token (None if the header was absent)

        Returns:
            Authorization with the decision and the resolved identity

        Raises:
            NotAuthenticatedError: If the credential is missing or cannot
                be resolved to a user
        """
        with logfire.span("auth_service.authorize"):
            if not credential:
                raise NotAuthenticatedError("missing bearer token")

            try:
                user = await self.identity_provider.get_user(credential)
            except DependencyError as e:
                logfire.warn("Identity resolution failed", error=str(e))
                raise NotAuthenticatedError("invalid token") from e

            if user is None:
                logfire.info("Bearer token rejected by identity provider")
                raise NotAuthenticatedError("invalid token")

            authorized = self.is_admin(user)
            logfire.info(
                "Identity resolved",
                user_id=user.id,
                email=user.email,
                authorized=authorized,
            )
            return Authorization(authorized=authorized, identity=user)
