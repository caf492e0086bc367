"""Promotion edge derivation.

Pure functions converting declared manifests into promotion edges and edges
into a registry inventory. Used by the manifest-based snapshot path.
"""

from collections.abc import Iterable

from regsnap.core.errors import EdgeConversionError
from regsnap.core.types import (
    ImageTag,
    Manifest,
    PromotionEdge,
    RegInvImage,
    normalize_tags,
)


def manifest_to_edges(manifest: Manifest) -> set[PromotionEdge]:
    """Expand one manifest into edges from its source registry to every destination.

    Untagged digests produce a single edge with an empty tag.

    Raises:
        EdgeConversionError: If the manifest declares images but no source registry
    """
    if not manifest.images:
        return set()

    src_registry = manifest.src_registry
    if src_registry is None:
        location = manifest.filepath or "<unnamed manifest>"
        raise EdgeConversionError(f"manifest {location} has no source registry")

    edges: set[PromotionEdge] = set()
    for image in manifest.images:
        for digest, tags in image.dmap.items():
            for tag in tags or ("",):
                for dst_registry in manifest.registries:
                    if dst_registry.src:
                        continue
                    edges.add(
                        PromotionEdge(
                            src_registry=src_registry,
                            src_image_tag=ImageTag(name=image.name, tag=tag),
                            digest=digest,
                            dst_registry=dst_registry,
                            dst_image_tag=ImageTag(name=image.name, tag=tag),
                        )
                    )
    return edges


def find_overlapping_edges(edges: Iterable[PromotionEdge]) -> dict[str, list[str]]:
    """Find tagged destinations claimed by more than one digest.

    Returns:
        Mapping of "<registry>/<image>:<tag>" to the sorted conflicting digests
    """
    claims: dict[str, set[str]] = {}
    for edge in edges:
        if not edge.dst_image_tag.tag:
            continue
        key = f"{edge.dst_registry.name}/{edge.dst_image_tag.name}:{edge.dst_image_tag.tag}"
        claims.setdefault(key, set()).add(edge.digest)

    return {key: sorted(digests) for key, digests in claims.items() if len(digests) > 1}


def to_promotion_edges(manifests: list[Manifest]) -> frozenset[PromotionEdge]:
    """Convert all manifests into a deduplicated set of promotion edges.

    Raises:
        EdgeConversionError: If a manifest has no source registry or two digests
            target the same destination tag
    """
    edges: set[PromotionEdge] = set()
    for manifest in manifests:
        edges |= manifest_to_edges(manifest)

    overlaps = find_overlapping_edges(edges)
    if overlaps:
        details = "; ".join(
            f"{dest} <- {', '.join(digests)}" for dest, digests in sorted(overlaps.items())
        )
        raise EdgeConversionError(f"overlapping promotion edges: {details}")

    return frozenset(edges)


def _image_name_under(registry_name: str, image_name: str, source_name: str) -> str | None:
    """Image key relative to source_name, or None if registry_name is outside it."""
    if registry_name == source_name:
        return image_name
    if registry_name.startswith(source_name + "/"):
        prefix = registry_name[len(source_name) + 1 :]
        return f"{prefix}/{image_name}"
    return None


def edges_to_reg_inv_image(edges: Iterable[PromotionEdge], source_name: str) -> RegInvImage:
    """Build the inventory that the edges declare for registry source_name.

    Edges whose destination registry is neither source_name nor below it are
    ignored. Tagless edges contribute a digest with no tags.
    """
    source_name = source_name.rstrip("/")
    collected: dict[str, dict[str, list[str]]] = {}

    for edge in edges:
        image_name = _image_name_under(
            edge.dst_registry.name.rstrip("/"), edge.dst_image_tag.name, source_name
        )
        if image_name is None:
            continue

        tags = collected.setdefault(image_name, {}).setdefault(edge.digest, [])
        if edge.dst_image_tag.tag:
            tags.append(edge.dst_image_tag.tag)

    return {
        image_name: {digest: normalize_tags(tags) for digest, tags in digest_tags.items()}
        for image_name, digest_tags in collected.items()
    }
