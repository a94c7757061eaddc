"""Domain services."""

from .auth_service import AuthService, IdentityProvider, bearer_token
from .base import Service
from .report_service import ReportService
from .storage_service import BlobStorage, StorageService, StoredImage
from .tally_service import TallyService
from .vote_service import VoteService

__all__ = [
    "AuthService",
    "BlobStorage",
    "IdentityProvider",
    "ReportService",
    "Service",
    "StorageService",
    "StoredImage",
    "TallyService",
    "VoteService",
    "bearer_token",
]
