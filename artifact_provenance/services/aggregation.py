from collections.abc import Iterable

from artifact_provenance.domain.inventory import ArtifactInventory


def rank_repositories(inventories: Iterable[ArtifactInventory]) -> list[ArtifactInventory]:
    """
    Rank repositories for presentation.

    Empty inventories are dropped, each inventory is sorted largest artifact
    first, and repositories are ordered by total artifact size, largest first.
    """
    ranked = [inv for inv in inventories if len(inv) > 0]
    for inventory in ranked:
        inventory.sort_by_size()
    ranked.sort(key=lambda inv: inv.total_size_bytes, reverse=True)
    return ranked
