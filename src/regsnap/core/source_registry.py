"""Source registry construction from snapshot options."""

from regsnap.core.errors import ConfigurationError
from regsnap.core.options import SnapshotOptions
from regsnap.core.types import RegistryContext


def get_snapshot_source_registry(options: SnapshotOptions) -> RegistryContext:
    """Build the source registry for a snapshot.

    The snapshot source name wins; the manifest-based source name is used
    otherwise. Snapshot and manifest-based runs differ only in that name.

    Raises:
        ConfigurationError: If neither or both source names are set
    """
    if options.snapshot and options.manifest_based_snapshot_of:
        raise ConfigurationError(
            "snapshot and manifest-based snapshot source are mutually exclusive"
        )

    if options.snapshot:
        name = options.snapshot
    elif options.manifest_based_snapshot_of:
        name = options.manifest_based_snapshot_of
    else:
        raise ConfigurationError(
            "when snapshotting, snapshot or manifest-based snapshot source has to be set"
        )

    return RegistryContext(
        name=name.rstrip("/"),
        service_account=options.snapshot_service_account,
        src=True,
    )
