"""Unit tests for ListTrendingUseCase."""

import pytest

from satya.application.usecase.report import (
    CreateReportRequest,
    CreateReportUseCase,
    ListTrendingRequest,
    ListTrendingUseCase,
)
from satya.application.usecase.vote import SubmitVoteRequest, SubmitVoteUseCase
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListTrendingUseCase:
    @pytest.mark.asyncio
    async def test_items_carry_tallies(self, unit_env):
        create = await unit_env.get(CreateReportUseCase)
        submit = await unit_env.get(SubmitVoteUseCase)
        list_trending = await unit_env.get(ListTrendingUseCase)

        first = (await create.execute(CreateReportRequest(title="first"))).report
        second = (await create.execute(CreateReportRequest(title="second"))).report
        await submit.execute(SubmitVoteRequest(report_id=first.id, voter_id="v_a", vote=1))
        await submit.execute(SubmitVoteRequest(report_id=first.id, voter_id="v_b", vote=-1))

        response = await list_trending.execute(ListTrendingRequest())

        assert [item.id for item in response.reports] == [second.id, first.id]
        assert (response.reports[1].likes, response.reports[1].dislikes) == (1, 1)
        assert (response.reports[0].likes, response.reports[0].dislikes) == (0, 0)
        assert response.reports[1].title == "first"

    @pytest.mark.asyncio
    async def test_limit(self, unit_env):
        create = await unit_env.get(CreateReportUseCase)
        list_trending = await unit_env.get(ListTrendingUseCase)
        for i in range(3):
            await create.execute(CreateReportRequest(title=f"r{i}"))

        response = await list_trending.execute(ListTrendingRequest(limit=2))

        assert [item.title for item in response.reports] == ["r2", "r1"]


class TestListTrendingRequest:
    @pytest.mark.parametrize(
        "raw, expected",
        [("5", 5), (" 7 ", 7), ("abc", None), ("", None), (None, None), (3, 3)],
    )
    def test_limit_parsing(self, raw, expected):
        assert ListTrendingRequest(limit=raw).limit == expected
