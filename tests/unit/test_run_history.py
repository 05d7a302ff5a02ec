"""
Workflow run history tests
"""

import pytest

from artifact_provenance.domain.results import TransportFailure
from artifact_provenance.services.run_history import fetch_run_history, newest_first
from tests.fakes import make_run


class TestNewestFirst:
    def test_sorted_descending(self):
        runs = [make_run(1, minutes=0), make_run(2, minutes=30), make_run(3, minutes=10)]

        assert [r.id for r in newest_first(runs)] == [2, 3, 1]

    def test_ties_keep_collection_order(self):
        runs = [make_run(5, minutes=10), make_run(6, minutes=10), make_run(7, minutes=20), make_run(8, minutes=10)]

        assert [r.id for r in newest_first(runs)] == [7, 5, 6, 8]


class TestFetchRunHistory:
    @pytest.mark.asyncio
    async def test_api_order_not_trusted(self, fake_api, progress):
        for run in (make_run(1, minutes=5), make_run(2, minutes=50), make_run(3, minutes=20)):
            fake_api.add_run("acme/app", run)

        runs = await fetch_run_history(fake_api, "acme/app", progress)

        assert [r.id for r in runs] == [2, 3, 1]
        assert progress.events[0] == ("Fetching workflow runs (all pages)...", None)

    @pytest.mark.asyncio
    async def test_all_pages_fetched(self, fake_api, progress):
        for i in range(1, 6):
            fake_api.add_run("acme/app", make_run(i, minutes=i))

        runs = await fetch_run_history(fake_api, "acme/app", progress, page_size=2)

        assert [r.id for r in runs] == [5, 4, 3, 2, 1]
        assert len(fake_api.calls_for("list_workflow_runs")) == 3

    @pytest.mark.asyncio
    async def test_total_failure_is_empty(self, fake_api, progress):
        fake_api.add_run("acme/app", make_run(1))
        fake_api.fail(TransportFailure(url="/runs", error="boom", status_code=403), "list_workflow_runs", "acme/app", 1)

        assert await fetch_run_history(fake_api, "acme/app", progress) == []

    @pytest.mark.asyncio
    async def test_partial_history_still_sorted(self, fake_api, progress):
        fake_api.add_run("acme/app", make_run(1, minutes=1))
        fake_api.add_run("acme/app", make_run(2, minutes=2))
        fake_api.add_run("acme/app", make_run(3, minutes=3))
        fake_api.fail(TransportFailure(url="/runs", error="boom"), "list_workflow_runs", "acme/app", 2)

        runs = await fetch_run_history(fake_api, "acme/app", progress, page_size=2)

        assert [r.id for r in runs] == [2, 1]
