"""Inventory construction for snapshots.

The build path is decided once by plan_snapshot():

- ManifestBasedSnapshot: the inventory is derived from the promotion edges the
  manifests declare. The registry is only read when a minimal snapshot needs
  manifest list membership.
- DirectSnapshot: the source registry is crawled and its live inventory is
  filtered.

Both paths finish with the same child-digest reduction when a minimal snapshot
is requested.
"""

import logging
from dataclasses import dataclass

from regsnap.core.errors import ConfigurationError, EdgeConversionError, RegistryReadError
from regsnap.core.filters import filter_by_tag, remove_child_digest_entries
from regsnap.core.options import SnapshotOptions
from regsnap.core.source_registry import get_snapshot_source_registry
from regsnap.core.types import Manifest, RegInvImage, RegistryContext, RegistryState
from regsnap.integrations.edges.abc import EdgeBuilder
from regsnap.integrations.registry.abc import RegistryReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManifestBasedSnapshot:
    """Inventory derived from declared promotion edges."""

    source_registry: RegistryContext
    source_name: str
    minimal: bool


@dataclass(frozen=True)
class DirectSnapshot:
    """Inventory read live from a registry."""

    source_registry: RegistryContext
    inventory_registry: str  # Registry whose inventory is reported
    tag: str  # Empty means no tag filter
    minimal: bool


SnapshotPlan = ManifestBasedSnapshot | DirectSnapshot


def plan_snapshot(options: SnapshotOptions, manifests: list[Manifest]) -> SnapshotPlan:
    """Choose the inventory path for these options.

    Raises:
        ConfigurationError: If the source registry cannot be built or the
            manifest list has no registry to report on
    """
    try:
        source_registry = get_snapshot_source_registry(options)
    except ConfigurationError as e:
        raise ConfigurationError(f"creating source registry for image inventory: {e}") from e

    if options.manifest_based_snapshot_of:
        return ManifestBasedSnapshot(
            source_registry=source_registry,
            source_name=options.manifest_based_snapshot_of.rstrip("/"),
            minimal=options.minimal_snapshot,
        )

    if not manifests or not manifests[0].registries:
        raise ConfigurationError("snapshot manifest list has no registry to read")

    return DirectSnapshot(
        source_registry=source_registry,
        inventory_registry=manifests[0].registries[0].name,
        tag=options.snapshot_tag,
        minimal=options.minimal_snapshot,
    )


class InventoryBuilder:
    """Builds a RegInvImage from manifests using injected collaborators."""

    def __init__(self, *, registry_reader: RegistryReader, edge_builder: EdgeBuilder) -> None:
        self._registry_reader = registry_reader
        self._edge_builder = edge_builder

    def build(self, options: SnapshotOptions, manifests: list[Manifest]) -> RegInvImage:
        """Build the inventory for one snapshot run.

        Raises:
            ConfigurationError: If no source registry is configured
            EdgeConversionError: If manifests cannot be converted to edges
            RegistryReadError: If reading the registry or manifest lists fails
        """
        plan = plan_snapshot(options, manifests)
        if isinstance(plan, ManifestBasedSnapshot):
            return self._build_manifest_based(plan, manifests)
        return self._build_direct(plan)

    def _build_manifest_based(
        self, plan: ManifestBasedSnapshot, manifests: list[Manifest]
    ) -> RegInvImage:
        try:
            edges = self._edge_builder.manifests_to_edges(manifests)
        except EdgeConversionError as e:
            raise EdgeConversionError(
                f"converting list of manifests to edges for promotion: {e}"
            ) from e

        inventory = self._edge_builder.edges_to_inventory(edges, plan.source_name)
        logger.debug("Derived %d images from %d promotion edges", len(inventory), len(edges))

        if plan.minimal:
            state = self._read_source(plan.source_registry)
            inventory = self._remove_child_digests(inventory, state)
        return inventory

    def _build_direct(self, plan: DirectSnapshot) -> RegInvImage:
        state = self._read_source(plan.source_registry)
        inventory = state.inventory.get(plan.inventory_registry, {})

        if plan.tag:
            inventory = filter_by_tag(inventory, plan.tag)

        if plan.minimal:
            logger.info("removing tagless child digests of manifest lists")
            inventory = self._remove_child_digests(inventory, state)
        return inventory

    def _read_source(self, source_registry: RegistryContext) -> RegistryState:
        # Recursive, because a snapshot must cover every repository
        try:
            return self._registry_reader.read_registries([source_registry], recursive=True)
        except RegistryReadError as e:
            raise RegistryReadError(f"reading source registry {source_registry.name}: {e}") from e

    def _remove_child_digests(self, inventory: RegInvImage, state: RegistryState) -> RegInvImage:
        try:
            parent_digests = self._registry_reader.read_manifest_lists(state)
        except RegistryReadError as e:
            raise RegistryReadError(f"reading manifest lists: {e}") from e
        return remove_child_digest_entries(inventory, parent_digests)
