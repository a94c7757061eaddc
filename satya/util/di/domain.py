"""Domain layer DI providers."""

from dishka import Scope, provide

from satya.config import AuthSettings, PlatformSettings, TrendingSettings
from satya.domain.repository import ReportRepository, VoteRepository
from satya.domain.service import (
    AuthService,
    BlobStorage,
    IdentityProvider,
    ReportService,
    StorageService,
    TallyService,
    VoteService,
)
from satya.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services touching repositories are REQUEST-scoped to align with the
    session lifecycle. Services built only on platform adapters are
    APP-scoped so they are usable at startup.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_auth_service(
        self, identity_provider: IdentityProvider, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide authorization domain service."""
        return AuthService(
            identity_provider=identity_provider, auth_settings=auth_settings
        )

    @provide(scope=Scope.APP)
    def get_storage_service(
        self, blob_storage: BlobStorage, platform_settings: PlatformSettings
    ) -> StorageService:
        """Provide storage domain service."""
        return StorageService(
            blob_storage=blob_storage, platform_settings=platform_settings
        )

    @provide
    def get_tally_service(self, vote_repository: VoteRepository) -> TallyService:
        """Provide tally domain service."""
        return TallyService(vote_repository=vote_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        report_repository: ReportRepository,
        tally_service: TallyService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            report_repository=report_repository,
            tally_service=tally_service,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        vote_repository: VoteRepository,
        tally_service: TallyService,
        storage_service: StorageService,
        trending_settings: TrendingSettings,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            vote_repository=vote_repository,
            tally_service=tally_service,
            storage_service=storage_service,
            trending_settings=trending_settings,
        )
