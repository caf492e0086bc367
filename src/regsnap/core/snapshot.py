"""Snapshot pipeline: source registry, manifest assembly and the full build.

build_snapshot runs the stages strictly in order:

    source registry -> manifest scaffold -> user manifest -> inventory -> filters

Any stage failure aborts the build; no partial inventory is returned.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from regsnap.core.errors import ConfigurationError, ManifestParseError
from regsnap.core.inventory import InventoryBuilder
from regsnap.core.options import SnapshotOptions
from regsnap.core.source_registry import get_snapshot_source_registry
from regsnap.core.types import Manifest, RegInvImage
from regsnap.integrations.manifest.abc import ManifestParser

if TYPE_CHECKING:
    from regsnap.core.context import RegsnapContext

logger = logging.getLogger(__name__)


def get_snapshot_manifests(options: SnapshotOptions) -> list[Manifest]:
    """Create the manifest scaffold: one manifest holding only the source registry."""
    try:
        src_registry = get_snapshot_source_registry(options)
    except ConfigurationError as e:
        raise ConfigurationError(f"building source registry for snapshot: {e}") from e

    return [Manifest(registries=(src_registry,), images=())]


def append_manifest_to_snapshot(
    options: SnapshotOptions, manifests: list[Manifest], parser: ManifestParser
) -> list[Manifest]:
    """Append the manifest named in options, if any, after the scaffold.

    Returns:
        The same list when no manifest is configured, otherwise a new list
        with the parsed manifest last
    """
    if not options.manifest:
        logger.info("No manifest defined, not appending to snapshot")
        return manifests

    try:
        manifest = parser.parse(Path(options.manifest))
    except ManifestParseError as e:
        raise ManifestParseError(f"parsing specified manifest: {e}") from e

    return [*manifests, manifest]


def build_snapshot(ctx: "RegsnapContext", options: SnapshotOptions) -> RegInvImage:
    """Run the assembler, inventory builder and filters for one snapshot."""
    manifests = get_snapshot_manifests(options)
    manifests = append_manifest_to_snapshot(options, manifests, ctx.manifest_parser)

    builder = InventoryBuilder(
        registry_reader=ctx.registry_reader,
        edge_builder=ctx.edge_builder,
    )
    return builder.build(options, manifests)
