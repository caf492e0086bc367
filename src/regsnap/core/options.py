"""Run configuration for a snapshot."""

from dataclasses import dataclass

DEFAULT_OUTPUT_FORMAT = "csv"


@dataclass(frozen=True)
class SnapshotOptions:
    """Immutable options for one snapshot run.

    Exactly one of snapshot / manifest_based_snapshot_of selects the source
    registry. Empty strings mean "not set".
    """

    output_format: str = DEFAULT_OUTPUT_FORMAT
    snapshot: str = ""
    manifest_based_snapshot_of: str = ""
    manifest: str = ""  # Path to a manifest file to append
    snapshot_tag: str = ""
    minimal_snapshot: bool = False
    snapshot_service_account: str = ""
