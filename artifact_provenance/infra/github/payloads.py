"""
GitHub Actions payload models.

Only the fields the resolver reads are declared; everything else in the
response is ignored.
"""

from pydantic import AwareDatetime, BaseModel, Field

from artifact_provenance.domain.models import Artifact, AttemptDescriptor, WorkflowRun


class RepositoryPayload(BaseModel):
    """GET /user/repos item"""

    full_name: str


class ArtifactPayload(BaseModel):
    """Artifact item (repository, run and attempt artifact lists)"""

    id: int
    name: str = ""
    size_in_bytes: int = Field(default=0, ge=0)
    expired: bool = False

    def to_domain(self) -> Artifact:
        return Artifact(
            id=self.id,
            name=self.name,
            size_in_bytes=self.size_in_bytes,
            expired=self.expired,
        )


class WorkflowRunPayload(BaseModel):
    """GET /repos/{repo}/actions/runs item"""

    id: int
    created_at: AwareDatetime  # naive timestamps cannot be ordered against aware ones
    html_url: str

    def to_domain(self) -> WorkflowRun:
        return WorkflowRun(id=self.id, created_at=self.created_at, html_url=self.html_url)


class AttemptPayload(BaseModel):
    """Attempt descriptor; artifacts present only when the platform inlines them"""

    run_attempt: int = Field(ge=1)
    artifacts: list[ArtifactPayload] | None = None

    def to_domain(self) -> AttemptDescriptor:
        artifact_ids = None
        if self.artifacts is not None:
            artifact_ids = tuple(a.id for a in self.artifacts)
        return AttemptDescriptor(run_attempt=self.run_attempt, artifact_ids=artifact_ids)
