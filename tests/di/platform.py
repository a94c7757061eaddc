"""Fake platform for tests: fixed-token identities, in-memory storage."""

from dishka import Scope, provide

from satya.adapter.supabase import MockBlobStorage, MockIdentityProvider
from satya.domain.service import BlobStorage, IdentityProvider
from satya.util.di.infrastructure.platform import PlatformProvider


class MockPlatformProvider(PlatformProvider):
    """Tokens resolve through MockIdentityProvider; blobs stay in memory."""

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def identity_provider(self) -> IdentityProvider:
        return MockIdentityProvider()

    @provide
    def blob_storage(self) -> BlobStorage:
        return MockBlobStorage()
