"""Domain value objects for SatyaMatrix."""

from enum import Enum
from typing import Any

from pydantic import Field

from satya.domain.value.common import ValueObject


class VoteChoice(int, Enum):
    """A voter's choice on a report."""

    LIKE = 1
    DISLIKE = -1


class SourceType(str, Enum):
    """Kind of content a report was raised about."""

    IMAGE = "image"
    HEADLINE = "headline"
    LINK = "link"


class ReportStatus(str, Enum):
    """Well-known report statuses.

    Status is stored as free text; only published reports are listed.
    """

    PUBLISHED = "published"


class IdentityUser(ValueObject):
    """User resolved by the identity provider from a bearer token."""

    id: str
    email: str | None = None
    app_metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def roles(self) -> list[str]:
        """Role claims from app metadata (``role`` or ``roles``)."""
        claim = self.app_metadata.get("role") or self.app_metadata.get("roles")
        if isinstance(claim, str):
            return [claim]
        if isinstance(claim, list):
            return [role for role in claim if isinstance(role, str)]
        return []


class Authorization(ValueObject):
    """Outcome of an authorization check."""

    authorized: bool
    identity: IdentityUser

    @property
    def audit_name(self) -> str:
        """Identity label for audit logs."""
        return self.identity.email or self.identity.id
