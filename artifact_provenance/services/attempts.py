"""
Attempt Resolver

Run 하나의 retry attempt 목록과 각 attempt의 아티팩트 집합을 구한다.

Branches on the tagged result of the attempts listing:
- Ok: use inline artifact sets, fetch the missing ones per attempt
- NotFound: legacy run, one synthetic attempt 1 built from the run's own artifacts
- anything else: the run contributes nothing
"""

from artifact_provenance.common.observability import get_logger
from artifact_provenance.domain.models import Attempt, AttemptDescriptor, WorkflowRun
from artifact_provenance.domain.ports import GitHubApiPort, ProgressSink
from artifact_provenance.domain.results import NotFound, Ok
from artifact_provenance.services.pagination import fetch_all_pages
from artifact_provenance.services.progress import NullProgressSink

logger = get_logger(__name__)

LEGACY_ATTEMPT_NUMBER = 1


class AttemptResolver:
    """
    Resolves the attempts of a workflow run.

    All fetches are sequential; attempts come back in ascending number order.
    """

    def __init__(self, api: GitHubApiPort, page_size: int = 100):
        self.api = api
        self.page_size = page_size

    async def resolve(
        self,
        repository: str,
        run: WorkflowRun,
        progress: ProgressSink | None = None,
        percent: int | None = None,
    ) -> list[Attempt]:
        """
        Attempts of ``run`` in ascending number order.

        ``percent`` is the caller's run progress, repeated on the legacy-run messages.
        """
        progress = progress or NullProgressSink()
        result = await self.api.list_run_attempts(repository, run.id)

        match result:
            case Ok(value=descriptors):
                return await self._expand(repository, run, descriptors)
            case NotFound():
                progress(
                    f"Repo {repository}: Run {run.id} has no attempts endpoint; assuming attempt 1.",
                    percent,
                )
                return [await self._legacy_attempt(repository, run, progress, percent)]
            case _:
                logger.warning(
                    "attempts_fetch_failed",
                    repository=repository,
                    run_id=run.id,
                    reason=result.describe(),
                )
                return []

    async def _legacy_attempt(
        self,
        repository: str,
        run: WorkflowRun,
        progress: ProgressSink,
        percent: int | None,
    ) -> Attempt:
        collection = await fetch_all_pages(
            lambda page: self.api.list_run_artifacts(repository, run.id, page, self.page_size),
            self.page_size,
            label=f"{repository}/runs/{run.id}/artifacts",
        )
        if collection.failure is not None:
            progress(f"Repo {repository}: Fallback fetch failed for run {run.id}", percent)
        return Attempt(
            run_id=run.id,
            number=LEGACY_ATTEMPT_NUMBER,
            artifact_ids=tuple(a.id for a in collection.items),
            synthetic=True,
        )

    async def _expand(
        self,
        repository: str,
        run: WorkflowRun,
        descriptors: list[AttemptDescriptor],
    ) -> list[Attempt]:
        attempts: list[Attempt] = []
        seen: set[int] = set()

        for descriptor in sorted(descriptors, key=lambda d: d.run_attempt):
            number = descriptor.run_attempt
            if number in seen:
                logger.warning("duplicate_attempt_ignored", repository=repository, run_id=run.id, attempt=number)
                continue
            seen.add(number)

            if descriptor.artifact_ids is not None:
                artifact_ids = descriptor.artifact_ids
            else:
                artifact_ids = await self._fetch_attempt_artifact_ids(repository, run, number)

            attempts.append(Attempt(run_id=run.id, number=number, artifact_ids=artifact_ids))

        return attempts

    async def _fetch_attempt_artifact_ids(self, repository: str, run: WorkflowRun, number: int) -> tuple[int, ...]:
        collection = await fetch_all_pages(
            lambda page: self.api.list_attempt_artifacts(repository, run.id, number, page, self.page_size),
            self.page_size,
            label=f"{repository}/runs/{run.id}/attempts/{number}/artifacts",
        )
        return tuple(a.id for a in collection.items)
