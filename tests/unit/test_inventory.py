"""
Artifact inventory tests

- build_artifact_inventory (expired filtering, ordering, progress)
- ArtifactInventory handle (exclusive pass)
- UnresolvedSet (monotonic shrink)
"""

import pytest

from artifact_provenance.domain.inventory import ArtifactInventory, UnresolvedSet
from artifact_provenance.domain.models import Artifact
from artifact_provenance.domain.results import TransportFailure
from artifact_provenance.infra.exceptions import InventoryBusyError
from artifact_provenance.services.inventory import build_artifact_inventory
from tests.fakes import make_artifact

# ============================================================
# Builder
# ============================================================


class TestBuildArtifactInventory:
    @pytest.mark.asyncio
    async def test_expired_removed_and_sorted(self, fake_api, progress):
        fake_api.artifacts["acme/app"] = [
            make_artifact(1, size=10),
            make_artifact(2, size=300, expired=True),
            make_artifact(3, size=200),
            make_artifact(4, size=50),
        ]

        inventory = await build_artifact_inventory(fake_api, "acme/app", progress)

        assert inventory.repository == "acme/app"
        assert [a.id for a in inventory] == [3, 4, 1]
        assert all(a.workflow_link is None for a in inventory)

    @pytest.mark.asyncio
    async def test_progress_per_page(self, fake_api, progress):
        fake_api.artifacts["acme/app"] = [make_artifact(i) for i in range(1, 4)]

        await build_artifact_inventory(fake_api, "acme/app", progress, page_size=2)

        assert progress.events == [
            ("Repo acme/app: Fetching artifacts page 1", None),
            ("Repo acme/app: Fetching artifacts page 2", None),
        ]

    @pytest.mark.asyncio
    async def test_failed_page_keeps_partial(self, fake_api, progress):
        fake_api.artifacts["acme/app"] = [make_artifact(i, size=i) for i in range(1, 6)]
        fake_api.fail(TransportFailure(url="/x", error="boom"), "list_artifacts", "acme/app", 2)

        inventory = await build_artifact_inventory(fake_api, "acme/app", progress, page_size=2)

        assert [a.id for a in inventory] == [2, 1]


# ============================================================
# Handle
# ============================================================


class TestArtifactInventory:
    def test_totals(self):
        inventory = ArtifactInventory("acme/app", [make_artifact(1, size=1024 * 1024), make_artifact(2, size=0)])

        assert inventory.total_size_bytes == 1024 * 1024
        assert inventory.total_size_mb == 1.0
        assert inventory.needs_links
        assert not inventory.has_links

    def test_expired_never_enter(self):
        inventory = ArtifactInventory("acme/app", [make_artifact(1, expired=True)])

        assert len(inventory) == 0

    def test_exclusive_pass_rejects_second_pass(self):
        inventory = ArtifactInventory("acme/app", [make_artifact(1)])

        with inventory.exclusive():
            assert inventory.busy
            with pytest.raises(InventoryBusyError):
                with inventory.exclusive():
                    pass
            with pytest.raises(InventoryBusyError):
                inventory.sort_by_size()

        assert not inventory.busy

    def test_exclusive_released_on_error(self):
        inventory = ArtifactInventory("acme/app", [make_artifact(1)])

        with pytest.raises(RuntimeError):
            with inventory.exclusive():
                raise RuntimeError("boom")

        assert not inventory.busy

    def test_sort_is_stable(self):
        inventory = ArtifactInventory("acme/app", [make_artifact(1, 5), make_artifact(2, 9), make_artifact(3, 5)])

        inventory.sort_by_size()

        assert [a.id for a in inventory] == [2, 1, 3]

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Artifact(id=1, name="bad", size_in_bytes=-1)


# ============================================================
# Unresolved set
# ============================================================


class TestUnresolvedSet:
    def test_claim_once(self):
        artifact = make_artifact(1)
        unresolved = UnresolvedSet([artifact, make_artifact(2)])

        assert 1 in unresolved
        assert unresolved.claim(1) is artifact
        assert unresolved.claim(1) is None
        assert len(unresolved) == 1

    def test_unknown_id(self):
        unresolved = UnresolvedSet([make_artifact(1)])

        assert unresolved.claim(99) is None
        assert len(unresolved) == 1

    def test_empty_is_falsy(self):
        unresolved = UnresolvedSet([make_artifact(1)])
        unresolved.claim(1)

        assert not unresolved
