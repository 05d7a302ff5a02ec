"""
Artifact inventory handle and the unresolved set.

ArtifactInventory owns one repository's artifacts. A resolution pass borrows
them through ``exclusive()``; a second pass over the same inventory while the
first is active raises InventoryBusyError.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from artifact_provenance.domain.models import BYTES_PER_MB, Artifact
from artifact_provenance.infra.exceptions import InventoryBusyError


class ArtifactInventory:
    """Non-expired artifacts of one repository."""

    def __init__(self, repository: str, artifacts: Iterable[Artifact] = ()):
        self.repository = repository
        self._artifacts = [a for a in artifacts if not a.expired]
        self._active = False

    def __len__(self) -> int:
        return len(self._artifacts)

    def __iter__(self) -> Iterator[Artifact]:
        return iter(self._artifacts)

    def __repr__(self) -> str:
        return f"ArtifactInventory({self.repository!r}, artifacts={len(self._artifacts)})"

    @property
    def artifacts(self) -> list[Artifact]:
        """Snapshot copy; mutate links only through a resolution pass."""
        return list(self._artifacts)

    @property
    def busy(self) -> bool:
        return self._active

    @property
    def total_size_bytes(self) -> int:
        return sum(a.size_in_bytes for a in self._artifacts)

    @property
    def total_size_mb(self) -> float:
        return self.total_size_bytes / BYTES_PER_MB

    @property
    def has_links(self) -> bool:
        return any(a.workflow_link is not None for a in self._artifacts)

    @property
    def needs_links(self) -> bool:
        return any(a.workflow_link is None for a in self._artifacts)

    def sort_by_size(self) -> None:
        """Largest first (stable)."""
        if self._active:
            raise InventoryBusyError(self.repository)
        self._artifacts.sort(key=lambda a: a.size_in_bytes, reverse=True)

    @contextmanager
    def exclusive(self) -> Iterator[list[Artifact]]:
        """Pass-scoped exclusive access to the artifact entries."""
        if self._active:
            raise InventoryBusyError(self.repository)
        self._active = True
        try:
            yield self._artifacts
        finally:
            self._active = False


class UnresolvedSet:
    """
    Artifacts not yet matched during one resolution pass.

    Shrinks monotonically: entries can be claimed, never added back.
    """

    def __init__(self, artifacts: Iterable[Artifact]):
        self._pending: dict[int, Artifact] = {a.id: a for a in artifacts}

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def __contains__(self, artifact_id: object) -> bool:
        return artifact_id in self._pending

    def claim(self, artifact_id: int) -> Artifact | None:
        """Remove and return the artifact, or None if already resolved/unknown."""
        return self._pending.pop(artifact_id, None)
