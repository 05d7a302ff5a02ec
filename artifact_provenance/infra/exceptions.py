"""
Infrastructure Layer Exceptions

Exception hierarchy for contract violations and the CLI boundary.

Fetch failures inside the resolver are NOT raised; they travel as tagged
results (see artifact_provenance.domain.results).
"""

from typing import Any

# ============================================================================
# Base Exception
# ============================================================================


class ArtifactProvenanceError(Exception):
    """
    Base exception for all artifact-provenance errors.

    Attributes:
        message: Human-readable error message
        details: Additional context (dict)
        component: Which component failed
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        component: str = "unknown",
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.component = component

    def __str__(self) -> str:
        base = f"[{self.component}] {self.message}"
        if self.details:
            base += f" | details={self.details}"
        return base


# ============================================================================
# GitHub API Exceptions
# ============================================================================


class GitHubApiError(ArtifactProvenanceError):
    """GitHub API call failed outside the tagged-result path."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(
            message,
            details={"url": url, "status_code": status_code},
            component="github",
        )
        self.url = url
        self.status_code = status_code


class MissingTokenError(ArtifactProvenanceError):
    """No GitHub token was configured or passed."""

    def __init__(self):
        super().__init__(
            "Please enter your GitHub token.",
            details={
                "suggestion": (
                    "Provide a token with one of:\n"
                    "  1. --token option\n"
                    "  2. GITHUB_TOKEN environment variable\n"
                    "  3. ARTIFACT_PROVENANCE_GITHUB_TOKEN in .env"
                ),
            },
            component="config",
        )


# ============================================================================
# Resolution Exceptions
# ============================================================================


class InventoryBusyError(ArtifactProvenanceError):
    """A resolution pass is already active over this inventory."""

    def __init__(self, repository: str):
        super().__init__(
            f"Resolution pass already active for {repository}",
            details={"repository": repository},
            component="resolver",
        )
        self.repository = repository
