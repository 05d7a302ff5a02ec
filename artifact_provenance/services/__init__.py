from artifact_provenance.services.aggregation import rank_repositories
from artifact_provenance.services.attempts import AttemptResolver
from artifact_provenance.services.inventory import build_artifact_inventory
from artifact_provenance.services.pagination import PageCollection, fetch_all_pages
from artifact_provenance.services.progress import LoggingProgressSink, NullProgressSink
from artifact_provenance.services.provenance import ProvenanceResolver
from artifact_provenance.services.repositories import list_repositories
from artifact_provenance.services.run_history import fetch_run_history, newest_first
from artifact_provenance.services.scan import ArtifactScanner

__all__ = [
    "fetch_all_pages",
    "PageCollection",
    "list_repositories",
    "build_artifact_inventory",
    "fetch_run_history",
    "newest_first",
    "AttemptResolver",
    "ProvenanceResolver",
    "rank_repositories",
    "ArtifactScanner",
    "NullProgressSink",
    "LoggingProgressSink",
]
