"""
GitHub Actions REST Adapter

HTTP client for the GitHub REST API (v3).

Endpoints:
    GET /user/repos?per_page={P}&page={N}
    GET /repos/{repo}/actions/artifacts?per_page={P}&page={N}
    GET /repos/{repo}/actions/runs?per_page={P}&page={N}
    GET /repos/{repo}/actions/runs/{run_id}/attempts
    GET /repos/{repo}/actions/runs/{run_id}/artifacts?per_page={P}&page={N}
    GET /repos/{repo}/actions/runs/{run_id}/attempts/{n}/artifacts?per_page={P}&page={N}

Every call returns a tagged FetchResult; HTTP status codes never leak past
this module.
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from artifact_provenance.common.observability import get_logger
from artifact_provenance.domain.models import Artifact, AttemptDescriptor, WorkflowRun
from artifact_provenance.domain.results import (
    DecodeFailure,
    FetchResult,
    NotFound,
    Ok,
    TransportFailure,
)
from artifact_provenance.infra.config.groups import GitHubConfig
from artifact_provenance.infra.exceptions import MissingTokenError
from artifact_provenance.infra.github.payloads import (
    ArtifactPayload,
    AttemptPayload,
    RepositoryPayload,
    WorkflowRunPayload,
)

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class GitHubClient:
    """
    GitHub Actions HTTP API client.

    Attributes:
        config: GitHubConfig (token, base URLs, timeout)
        client: httpx.AsyncClient bound to config.api_url

    Usage:
        async with GitHubClient(settings.github) as api:
            result = await api.list_artifacts("acme/app", page=1, per_page=100)
    """

    def __init__(self, config: GitHubConfig, client: httpx.AsyncClient | None = None) -> None:
        if not config.token:
            raise MissingTokenError()

        self.config = config
        self.client = client or httpx.AsyncClient(
            base_url=config.api_url,
            headers={
                "Accept": config.accept,
                "Authorization": f"token {config.token}",
            },
            timeout=config.timeout,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close HTTP client"""
        await self.client.aclose()

    # ========================================================================
    # Endpoints
    # ========================================================================

    async def list_repositories(self, page: int, per_page: int) -> FetchResult[list[str]]:
        url = "/user/repos"
        result = await self._get(url, {"per_page": per_page, "page": page})
        decoded = self._decode_items(result, url, RepositoryPayload)
        match decoded:
            case Ok(value=repos):
                return Ok([r.full_name for r in repos])
            case _:
                return decoded

    async def list_artifacts(self, repository: str, page: int, per_page: int) -> FetchResult[list[Artifact]]:
        url = f"/repos/{repository}/actions/artifacts"
        return await self._list_artifacts(url, page, per_page)

    async def list_workflow_runs(
        self, repository: str, page: int, per_page: int
    ) -> FetchResult[list[WorkflowRun]]:
        url = f"/repos/{repository}/actions/runs"
        result = await self._get(url, {"per_page": per_page, "page": page})
        decoded = self._decode_items(result, url, WorkflowRunPayload, key="workflow_runs")
        match decoded:
            case Ok(value=runs):
                return Ok([r.to_domain() for r in runs])
            case _:
                return decoded

    async def list_run_attempts(self, repository: str, run_id: int) -> FetchResult[list[AttemptDescriptor]]:
        url = f"/repos/{repository}/actions/runs/{run_id}/attempts"
        result = await self._get(url)
        decoded = self._decode_items(result, url, AttemptPayload, key="attempts")
        match decoded:
            case Ok(value=attempts):
                return Ok([a.to_domain() for a in attempts])
            case _:
                return decoded

    async def list_run_artifacts(
        self, repository: str, run_id: int, page: int, per_page: int
    ) -> FetchResult[list[Artifact]]:
        url = f"/repos/{repository}/actions/runs/{run_id}/artifacts"
        return await self._list_artifacts(url, page, per_page)

    async def list_attempt_artifacts(
        self, repository: str, run_id: int, attempt_number: int, page: int, per_page: int
    ) -> FetchResult[list[Artifact]]:
        url = f"/repos/{repository}/actions/runs/{run_id}/attempts/{attempt_number}/artifacts"
        return await self._list_artifacts(url, page, per_page)

    # ========================================================================
    # Helpers
    # ========================================================================

    async def _list_artifacts(self, url: str, page: int, per_page: int) -> FetchResult[list[Artifact]]:
        result = await self._get(url, {"per_page": per_page, "page": page})
        decoded = self._decode_items(result, url, ArtifactPayload, key="artifacts")
        match decoded:
            case Ok(value=artifacts):
                return Ok([a.to_domain() for a in artifacts])
            case _:
                return decoded

    async def _get(self, url: str, params: dict[str, Any] | None = None) -> FetchResult[Any]:
        """GET + JSON decode, mapped onto the tagged result."""
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            if status_code == 404:
                logger.debug("github_not_found", url=url)
                return NotFound(url=url)
            logger.warning("github_request_failed", url=url, status_code=status_code)
            return TransportFailure(url=url, error=str(e), status_code=status_code)
        except httpx.HTTPError as e:
            logger.warning("github_request_failed", url=url, error=str(e))
            return TransportFailure(url=url, error=str(e))

        try:
            return Ok(response.json())
        except ValueError as e:
            logger.warning("github_payload_invalid", url=url, error=str(e))
            return DecodeFailure(url=url, error=str(e))

    def _decode_items(
        self,
        result: FetchResult[Any],
        url: str,
        model: type[M],
        key: str | None = None,
    ) -> FetchResult[list[M]]:
        """
        Validate a list payload.

        Args:
            result: Raw GET result
            url: Request path (for diagnostics)
            model: Payload model for each item
            key: Envelope key when the list is wrapped in an object
                 (missing or null key means an empty list)
        """
        match result:
            case Ok(value=data):
                pass
            case _:
                return result

        if key is not None and isinstance(data, dict):
            data = data.get(key) or []

        if not isinstance(data, list):
            logger.warning("github_payload_invalid", url=url, error="expected a list")
            return DecodeFailure(url=url, error=f"expected a list, got {type(data).__name__}")

        try:
            return Ok([model.model_validate(item) for item in data])
        except ValidationError as e:
            logger.warning("github_payload_invalid", url=url, error=str(e))
            return DecodeFailure(url=url, error=str(e))
