"""
Domain ports (interfaces).

The services depend on these protocols, not on the httpx adapter, so tests
can swap in fakes.
"""

from typing import Protocol

from artifact_provenance.domain.models import Artifact, AttemptDescriptor, WorkflowRun
from artifact_provenance.domain.results import FetchResult


class ProgressSink(Protocol):
    """
    Progress callback.

    Purely observational: percent is 0-100 or None when unknown.
    """

    def __call__(self, message: str, percent: int | None = None) -> None: ...


class GitHubApiPort(Protocol):
    """
    GitHub Actions REST port.

    Implementations:
    - artifact_provenance.infra.github.client.GitHubClient
    """

    async def list_repositories(self, page: int, per_page: int) -> FetchResult[list[str]]:
        """GET /user/repos (full names)"""
        ...

    async def list_artifacts(self, repository: str, page: int, per_page: int) -> FetchResult[list[Artifact]]:
        """GET /repos/{repo}/actions/artifacts"""
        ...

    async def list_workflow_runs(
        self, repository: str, page: int, per_page: int
    ) -> FetchResult[list[WorkflowRun]]:
        """GET /repos/{repo}/actions/runs"""
        ...

    async def list_run_attempts(self, repository: str, run_id: int) -> FetchResult[list[AttemptDescriptor]]:
        """GET /repos/{repo}/actions/runs/{run_id}/attempts"""
        ...

    async def list_run_artifacts(
        self, repository: str, run_id: int, page: int, per_page: int
    ) -> FetchResult[list[Artifact]]:
        """GET /repos/{repo}/actions/runs/{run_id}/artifacts"""
        ...

    async def list_attempt_artifacts(
        self, repository: str, run_id: int, attempt_number: int, page: int, per_page: int
    ) -> FetchResult[list[Artifact]]:
        """GET /repos/{repo}/actions/runs/{run_id}/attempts/{n}/artifacts"""
        ...
