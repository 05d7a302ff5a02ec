"""
Artifact inventory builder.

저장소 하나의 만료되지 않은 아티팩트 목록을 크기 내림차순으로 만든다.
"""

from artifact_provenance.common.observability import get_logger
from artifact_provenance.domain.inventory import ArtifactInventory
from artifact_provenance.domain.ports import GitHubApiPort, ProgressSink
from artifact_provenance.services.pagination import fetch_all_pages

logger = get_logger(__name__)


async def build_artifact_inventory(
    api: GitHubApiPort,
    repository: str,
    progress: ProgressSink,
    page_size: int = 100,
) -> ArtifactInventory:
    """
    Fetch all artifacts of a repository.

    Args:
        api: GitHub API port
        repository: "owner/name"
        progress: Receives one message per page fetched
        page_size: Items per page

    Returns:
        ArtifactInventory, expired artifacts removed, largest first
    """

    async def fetch_page(page: int):
        progress(f"Repo {repository}: Fetching artifacts page {page}", None)
        return await api.list_artifacts(repository, page, page_size)

    collection = await fetch_all_pages(fetch_page, page_size, label=f"{repository}/artifacts")

    inventory = ArtifactInventory(repository, collection.items)
    inventory.sort_by_size()

    logger.debug(
        "inventory_built",
        repository=repository,
        artifacts=len(inventory),
        expired_dropped=len(collection.items) - len(inventory),
        complete=collection.complete,
    )
    return inventory
