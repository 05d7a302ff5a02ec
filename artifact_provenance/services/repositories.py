from artifact_provenance.common.observability import get_logger
from artifact_provenance.domain.ports import GitHubApiPort, ProgressSink
from artifact_provenance.domain.results import TransportFailure
from artifact_provenance.infra.exceptions import GitHubApiError
from artifact_provenance.services.pagination import fetch_all_pages

logger = get_logger(__name__)


async def list_repositories(api: GitHubApiPort, progress: ProgressSink, page_size: int = 100) -> list[str]:
    """
    Full names of the authenticated user's repositories.

    A failure after the first page yields the partial listing. A failed
    first page means the token or the API is unusable and raises.

    Raises:
        GitHubApiError: the first page could not be fetched
    """
    progress("Fetching repositories...", 0)

    collection = await fetch_all_pages(
        lambda page: api.list_repositories(page, page_size),
        page_size,
        label="repositories",
    )
    if collection.failure is not None and not collection.items:
        failure = collection.failure
        match failure:
            case TransportFailure(status_code=status_code):
                pass
            case _:
                status_code = None
        raise GitHubApiError(
            f"Failed to fetch repositories: {failure.describe()}",
            url=failure.url,
            status_code=status_code,
        )
    if not collection.complete:
        logger.warning("repositories_partial", fetched=len(collection.items))
    return collection.items
