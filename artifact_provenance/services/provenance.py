"""
Provenance Resolver

Matches a repository's artifacts to the workflow run attempts that produced
them.

Algorithm:
    1. Unresolved set <- every artifact of the inventory
    2. Run history, newest first
    3. For each run: resolve attempts; for each attempt (ascending) and each
       artifact id in its set, claim the id from the unresolved set and link
       it to ``{run.html_url}/attempts/{n}``
    4. Stop scanning as soon as the unresolved set is empty
    5. Whatever is still unlinked gets ``{web_url}/{repo}/actions``

First claim wins: an id seen again in a later attempt or older run is ignored.
Fetch failures only mean fewer matches; nothing is raised for them.
"""

from artifact_provenance.common.observability import LogPerformance, get_logger
from artifact_provenance.domain.inventory import ArtifactInventory, UnresolvedSet
from artifact_provenance.domain.models import Artifact, ResolutionResult
from artifact_provenance.domain.ports import GitHubApiPort, ProgressSink
from artifact_provenance.infra.config.groups import GitHubConfig
from artifact_provenance.infra.observability import bind_context, clear_context
from artifact_provenance.services.attempts import AttemptResolver
from artifact_provenance.services.progress import NullProgressSink, percent_of
from artifact_provenance.services.run_history import fetch_run_history

logger = get_logger(__name__)


class ProvenanceResolver:
    """
    Resolves provenance links for one repository inventory at a time.

    Usage:
        resolver = ProvenanceResolver(api, settings.github)
        result = await resolver.resolve(inventory, progress)
    """

    def __init__(
        self,
        api: GitHubApiPort,
        config: GitHubConfig,
        attempt_resolver: AttemptResolver | None = None,
    ):
        self.api = api
        self.config = config
        self.attempt_resolver = attempt_resolver or AttemptResolver(api, page_size=config.page_size)

    async def resolve(
        self,
        inventory: ArtifactInventory,
        progress: ProgressSink | None = None,
    ) -> ResolutionResult:
        """
        Run one resolution pass.

        Raises:
            InventoryBusyError: another pass over this inventory is active
        """
        progress = progress or NullProgressSink()
        repository = inventory.repository

        with inventory.exclusive() as artifacts:
            bind_context(repository=repository)
            try:
                with LogPerformance(logger, "resolve_provenance", artifacts=len(artifacts)):
                    result = await self._resolve_pass(repository, artifacts, progress)
            finally:
                clear_context("repository")

        progress(f"Finished generating links for {repository}.", 100)
        return result

    async def _resolve_pass(
        self,
        repository: str,
        artifacts: list[Artifact],
        progress: ProgressSink,
    ) -> ResolutionResult:
        result = ResolutionResult(repository=repository, artifacts=artifacts)
        unresolved = UnresolvedSet(artifacts)

        progress(f"Generating links for {repository}...", 0)

        try:
            if not unresolved:
                return result

            runs = await fetch_run_history(self.api, repository, progress, self.config.page_size)
            result.runs_total = len(runs)

            for index, run in enumerate(runs, start=1):
                percent = percent_of(index, result.runs_total)
                progress(f"Repo {repository}: Processing run {index}/{result.runs_total}", percent)

                attempts = await self.attempt_resolver.resolve(repository, run, progress, percent)
                result.runs_scanned += 1

                for attempt in attempts:
                    for artifact_id in attempt.artifact_ids:
                        artifact = unresolved.claim(artifact_id)
                        if artifact is None:
                            continue
                        artifact.workflow_link = attempt.provenance_link(run)
                        result.matched += 1

                if not unresolved:
                    logger.debug("unresolved_set_empty", runs_scanned=result.runs_scanned)
                    break
        finally:
            result.fallbacks = self._apply_fallback(repository, artifacts)

        return result

    def _apply_fallback(self, repository: str, artifacts: list[Artifact]) -> int:
        fallback = self.config.actions_url(repository)
        count = 0
        for artifact in artifacts:
            if artifact.workflow_link is None:
                artifact.workflow_link = fallback
                count += 1
        if count:
            logger.info("provenance_fallback", count=count, link=fallback)
        return count
