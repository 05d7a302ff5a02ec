"""
Artifact Scan

전체 저장소를 훑어 아티팩트 목록을 만들고, 필요하면 provenance 링크까지 생성.
"""

from artifact_provenance.common.observability import get_logger
from artifact_provenance.domain.inventory import ArtifactInventory
from artifact_provenance.domain.models import ResolutionResult
from artifact_provenance.domain.ports import GitHubApiPort, ProgressSink
from artifact_provenance.infra.config.groups import GitHubConfig
from artifact_provenance.services.aggregation import rank_repositories
from artifact_provenance.services.inventory import build_artifact_inventory
from artifact_provenance.services.progress import NullProgressSink, percent_of
from artifact_provenance.services.provenance import ProvenanceResolver
from artifact_provenance.services.repositories import list_repositories

logger = get_logger(__name__)


class ArtifactScanner:
    """
    Repository-wide artifact scan.

    Repositories are processed one after another; each gets its own
    inventory, so resolution passes never share state.
    """

    def __init__(self, api: GitHubApiPort, config: GitHubConfig):
        self.api = api
        self.config = config
        self.resolver = ProvenanceResolver(api, config)

    async def scan(
        self,
        progress: ProgressSink | None = None,
        repositories: list[str] | None = None,
    ) -> list[ArtifactInventory]:
        """
        Build ranked inventories.

        Args:
            progress: Progress sink
            repositories: Explicit "owner/name" list; None lists the user's repositories

        Returns:
            Non-empty inventories, largest total size first
        """
        progress = progress or NullProgressSink()

        if repositories is None:
            repositories = await list_repositories(self.api, progress, self.config.page_size)

        total = len(repositories)
        progress(f"Found {total} repos. Fetching artifact lists...", 10)

        inventories: list[ArtifactInventory] = []
        for index, repository in enumerate(repositories, start=1):
            percent = percent_of(index, total)
            progress(f"Processing repo {index}/{total}: {repository}", percent)

            inventory = await build_artifact_inventory(self.api, repository, progress, self.config.page_size)
            progress(f"Repo {repository}: Found {len(inventory)} artifact(s)", percent)
            inventories.append(inventory)

        progress("Artifact lists fetched.", 100)

        ranked = rank_repositories(inventories)
        logger.info("scan_complete", repositories=total, with_artifacts=len(ranked))
        return ranked

    async def resolve_links(
        self,
        inventories: list[ArtifactInventory],
        progress: ProgressSink | None = None,
    ) -> list[ResolutionResult]:
        """Resolve provenance for each inventory still missing links, in order."""
        results = []
        for inventory in inventories:
            if not inventory.needs_links:
                continue
            results.append(await self.resolver.resolve(inventory, progress))
        return results
