"""Point-in-time inventory snapshots of container image registries."""

from regsnap.core.errors import (
    ConfigurationError,
    EdgeConversionError,
    ManifestParseError,
    RegistryReadError,
    SnapshotError,
)
from regsnap.core.options import SnapshotOptions
from regsnap.core.serialize import serialize_snapshot
from regsnap.core.snapshot import build_snapshot
from regsnap.core.types import RegInvImage

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EdgeConversionError",
    "ManifestParseError",
    "RegInvImage",
    "RegistryReadError",
    "SnapshotError",
    "SnapshotOptions",
    "build_snapshot",
    "serialize_snapshot",
]
