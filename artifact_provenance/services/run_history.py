from artifact_provenance.common.observability import get_logger
from artifact_provenance.domain.models import WorkflowRun
from artifact_provenance.domain.ports import GitHubApiPort, ProgressSink
from artifact_provenance.services.pagination import fetch_all_pages

logger = get_logger(__name__)


def newest_first(runs: list[WorkflowRun]) -> list[WorkflowRun]:
    """Sort by created_at descending; equal timestamps keep collection order."""
    return sorted(runs, key=lambda run: run.created_at, reverse=True)


async def fetch_run_history(
    api: GitHubApiPort,
    repository: str,
    progress: ProgressSink,
    page_size: int = 100,
) -> list[WorkflowRun]:
    """
    All workflow runs of a repository, newest first.

    The API order is not trusted; runs are sorted after pagination.
    A failed first page yields an empty history rather than an error.
    """
    progress("Fetching workflow runs (all pages)...", None)

    collection = await fetch_all_pages(
        lambda page: api.list_workflow_runs(repository, page, page_size),
        page_size,
        label=f"{repository}/runs",
    )
    if not collection.complete:
        logger.warning("run_history_partial", repository=repository, runs=len(collection.items))

    return newest_first(collection.items)
