from artifact_provenance.infra.github.client import GitHubClient

__all__ = ["GitHubClient"]
