"""Type definitions for registry snapshots."""

from dataclasses import dataclass, field

# Tags attached to one digest. Sorted and free of duplicates.
TagSlice = tuple[str, ...]

# Digest -> tags for a single image.
DigestTags = dict[str, TagSlice]

# Image name -> digests. The inventory of one registry.
RegInvImage = dict[str, DigestTags]

# Child digest -> parent manifest list digest.
ParentDigests = dict[str, str]

MANIFEST_LIST_MEDIA_TYPES = frozenset(
    {
        "application/vnd.docker.distribution.manifest.list.v2+json",
        "application/vnd.oci.image.index.v1+json",
    }
)


@dataclass(frozen=True)
class RegistryContext:
    """Identity of one registry endpoint."""

    name: str  # e.g. "gcr.io/k8s-artifacts-prod"
    service_account: str = ""
    src: bool = False


@dataclass(frozen=True)
class Image:
    """An image declared in a manifest with its digest -> tags mapping."""

    name: str
    dmap: DigestTags = field(default_factory=dict)


@dataclass(frozen=True)
class Manifest:
    """Declarative description of the images that should exist in registries."""

    registries: tuple[RegistryContext, ...]
    images: tuple[Image, ...] = ()
    filepath: str | None = None  # Set when parsed from a file

    @property
    def src_registry(self) -> RegistryContext | None:
        """The registry images are promoted from, or None if none is marked."""
        for registry in self.registries:
            if registry.src:
                return registry
        return None


@dataclass(frozen=True)
class ImageTag:
    """Image name plus tag. The tag is empty for tagless references."""

    name: str
    tag: str


@dataclass(frozen=True)
class PromotionEdge:
    """A source image digest that should appear at a destination image tag."""

    src_registry: RegistryContext
    src_image_tag: ImageTag
    digest: str
    dst_registry: RegistryContext
    dst_image_tag: ImageTag


@dataclass(frozen=True)
class RegistryState:
    """What the registry reader observed during a crawl.

    inventory is keyed by registry name; media_types is keyed by digest.
    """

    inventory: dict[str, RegInvImage]
    media_types: dict[str, str] = field(default_factory=dict)

    def is_manifest_list(self, digest: str) -> bool:
        return self.media_types.get(digest) in MANIFEST_LIST_MEDIA_TYPES


def normalize_tags(tags: list[str] | tuple[str, ...]) -> TagSlice:
    """Sort and deduplicate tags."""
    return tuple(sorted(set(tags)))
