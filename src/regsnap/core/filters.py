"""Reduction filters applied to a built inventory.

Both filters return a new inventory and never add images, digests or tags.
Images left without any digest are dropped.
"""

from regsnap.core.types import ParentDigests, RegInvImage


def filter_by_tag(inventory: RegInvImage, tag: str) -> RegInvImage:
    """Keep only the (digest, tag) pairs whose tag equals tag."""
    filtered: RegInvImage = {}
    for image_name, digest_tags in inventory.items():
        for digest, tags in digest_tags.items():
            if tag in tags:
                filtered.setdefault(image_name, {})[digest] = (tag,)
    return filtered


def remove_child_digest_entries(
    inventory: RegInvImage, parent_digests: ParentDigests
) -> RegInvImage:
    """Drop untagged digests that only exist as children of a manifest list.

    Args:
        inventory: Inventory to reduce
        parent_digests: Child digest -> parent manifest list digest

    Returns:
        Inventory without tagless child digests
    """
    filtered: RegInvImage = {}
    for image_name, digest_tags in inventory.items():
        kept = {
            digest: tags
            for digest, tags in digest_tags.items()
            if tags or digest not in parent_digests
        }
        if kept:
            filtered[image_name] = kept
    return filtered
