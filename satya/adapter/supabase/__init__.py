"""Supabase platform adapters (identity and object storage)."""

from .auth import MockIdentityProvider, SupabaseIdentityProvider
from .storage import MockBlobStorage, SupabaseBlobStorage

__all__ = [
    "MockBlobStorage",
    "MockIdentityProvider",
    "SupabaseBlobStorage",
    "SupabaseIdentityProvider",
]
