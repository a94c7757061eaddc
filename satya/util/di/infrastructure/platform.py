"""Managed platform providers (identity and object storage)."""

from dishka import Scope, provide

from satya.adapter.supabase import SupabaseBlobStorage, SupabaseIdentityProvider
from satya.config import PlatformSettings
from satya.domain.service import BlobStorage, IdentityProvider
from satya.util.di.base import ProviderBase


class PlatformProvider(ProviderBase):
    """Platform component: who is calling, and where images live."""

    __mock_component__ = "platform"


class ProdPlatformProvider(PlatformProvider):
    """Supabase REST adapters."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def identity_provider(self, settings: PlatformSettings) -> IdentityProvider:
        return SupabaseIdentityProvider(settings)

    @provide
    def blob_storage(self, settings: PlatformSettings) -> BlobStorage:
        return SupabaseBlobStorage(settings)
