from artifact_provenance.domain.inventory import ArtifactInventory, UnresolvedSet
from artifact_provenance.domain.models import (
    Artifact,
    Attempt,
    AttemptDescriptor,
    ResolutionResult,
    WorkflowRun,
)
from artifact_provenance.domain.ports import GitHubApiPort, ProgressSink
from artifact_provenance.domain.results import (
    DecodeFailure,
    FetchFailure,
    FetchResult,
    NotFound,
    Ok,
    TransportFailure,
)

__all__ = [
    # Models
    "Artifact",
    "Attempt",
    "AttemptDescriptor",
    "ResolutionResult",
    "WorkflowRun",
    # Inventory
    "ArtifactInventory",
    "UnresolvedSet",
    # Ports
    "GitHubApiPort",
    "ProgressSink",
    # Results
    "Ok",
    "NotFound",
    "TransportFailure",
    "DecodeFailure",
    "FetchFailure",
    "FetchResult",
]
