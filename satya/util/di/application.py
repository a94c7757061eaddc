"""Application layer DI providers."""

from dishka import Scope, provide

from satya.application.usecase.report import (
    CreateReportUseCase,
    DeleteReportUseCase,
    ListTrendingUseCase,
)
from satya.application.usecase.upload import UploadImageUseCase
from satya.application.usecase.vote import GetVoteTallyUseCase, SubmitVoteUseCase
from satya.domain.service import (
    AuthService,
    ReportService,
    StorageService,
    TallyService,
    VoteService,
)
from satya.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Report use cases
    @provide(scope=Scope.REQUEST)
    def get_create_report_use_case(
        self, report_service: ReportService
    ) -> CreateReportUseCase:
        """Provide create report use case."""
        return CreateReportUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_list_trending_use_case(
        self, report_service: ReportService
    ) -> ListTrendingUseCase:
        """Provide list trending use case."""
        return ListTrendingUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_report_use_case(
        self, auth_service: AuthService, report_service: ReportService
    ) -> DeleteReportUseCase:
        """Provide delete report use case."""
        return DeleteReportUseCase(
            auth_service=auth_service, report_service=report_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_vote_use_case(self, vote_service: VoteService) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_tally_use_case(
        self, tally_service: TallyService
    ) -> GetVoteTallyUseCase:
        """Provide get vote tally use case."""
        return GetVoteTallyUseCase(tally_service=tally_service)

    # Upload use cases
    @provide(scope=Scope.REQUEST)
    def get_upload_image_use_case(
        self, storage_service: StorageService
    ) -> UploadImageUseCase:
        """Provide upload image use case."""
        return UploadImageUseCase(storage_service=storage_service)
