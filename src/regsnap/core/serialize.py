"""Snapshot rendering.

CSV rows are "image,digest,tag", one per tag, with an empty tag column for
untagged digests. YAML output uses the manifest image format (name + dmap) so a
snapshot can be pasted into a promoter manifest. Both are sorted so identical
inventories render identically.
"""

import csv
import io
from collections.abc import Callable

import yaml

from regsnap.core.errors import ConfigurationError
from regsnap.core.types import RegInvImage


def _sorted_entries(inventory: RegInvImage) -> list[tuple[str, list[tuple[str, list[str]]]]]:
    entries = []
    for image_name in sorted(inventory):
        digest_tags = inventory[image_name]
        entries.append(
            (image_name, [(digest, sorted(digest_tags[digest])) for digest in sorted(digest_tags)])
        )
    return entries


def to_csv(inventory: RegInvImage) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for image_name, digests in _sorted_entries(inventory):
        for digest, tags in digests:
            if not tags:
                writer.writerow([image_name, digest, ""])
                continue
            for tag in tags:
                writer.writerow([image_name, digest, tag])
    return buffer.getvalue()


def to_yaml(inventory: RegInvImage) -> str:
    entries = [
        {"name": image_name, "dmap": {digest: tags for digest, tags in digests}}
        for image_name, digests in _sorted_entries(inventory)
    ]
    if not entries:
        return ""
    return yaml.safe_dump(entries, sort_keys=False, default_flow_style=False)


RENDERERS: dict[str, Callable[[RegInvImage], str]] = {
    "csv": to_csv,
    "yaml": to_yaml,
}


def validate_output_format(output_format: str) -> str:
    """Return the normalized format name.

    Raises:
        ConfigurationError: If output_format is not supported
    """
    normalized = output_format.lower()
    if normalized not in RENDERERS:
        raise ConfigurationError(f"invalid snapshot output format: {output_format}")
    return normalized


def serialize_snapshot(inventory: RegInvImage, output_format: str) -> str:
    """Render the inventory in the requested format.

    Args:
        inventory: Inventory to render
        output_format: "csv" or "yaml", compared case-insensitively

    Raises:
        ConfigurationError: If output_format is not supported
    """
    return RENDERERS[validate_output_format(output_format)](inventory)


def snapshot(inventory: RegInvImage, output_format: str, emit: Callable[[str], None]) -> None:
    """Render the inventory and hand it to emit, which writes it to stdout.

    Nothing is emitted when the format is invalid.
    """
    emit(serialize_snapshot(inventory, output_format))
