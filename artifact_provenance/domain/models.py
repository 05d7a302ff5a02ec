"""
Artifact provenance 도메인 모델.

Artifact / WorkflowRun / Attempt / ResolutionResult.
"""

from dataclasses import dataclass, field
from datetime import datetime

BYTES_PER_MB = 1024 * 1024


@dataclass
class Artifact:
    """
    CI run이 생성한 빌드 아티팩트.

    workflow_link는 resolution pass가 채운다 (None = 아직 미해결).
    """

    id: int
    name: str
    size_in_bytes: int
    expired: bool = False
    workflow_link: str | None = None

    def __post_init__(self) -> None:
        if self.size_in_bytes < 0:
            raise ValueError(f"size_in_bytes must be non-negative, got {self.size_in_bytes}")

    @property
    def size_mb(self) -> float:
        return self.size_in_bytes / BYTES_PER_MB


@dataclass(frozen=True)
class WorkflowRun:
    """One execution of a workflow for a repository."""

    id: int
    created_at: datetime
    html_url: str


@dataclass(frozen=True)
class AttemptDescriptor:
    """
    Attempt entry as listed by the attempts endpoint.

    artifact_ids is None when the platform did not inline the artifact set.
    """

    run_attempt: int
    artifact_ids: tuple[int, ...] | None = None


@dataclass(frozen=True)
class Attempt:
    """Resolved retry attempt of a run, with its artifact set."""

    run_id: int
    number: int
    artifact_ids: tuple[int, ...] = ()
    synthetic: bool = False

    def provenance_link(self, run: WorkflowRun) -> str:
        return f"{run.html_url}/attempts/{self.number}"


@dataclass
class ResolutionResult:
    """Outcome of one resolution pass over a repository inventory."""

    repository: str
    artifacts: list[Artifact] = field(default_factory=list)
    runs_total: int = 0
    runs_scanned: int = 0
    matched: int = 0
    fallbacks: int = 0

    @property
    def complete(self) -> bool:
        """Every artifact carries a link."""
        return all(a.workflow_link for a in self.artifacts)
