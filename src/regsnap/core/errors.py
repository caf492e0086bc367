"""Error types raised while building a snapshot.

Every stage of the pipeline re-raises failures as one of these classes with a
"<stage>: <cause>" message, so the CLI error boundary can print them without a
stack trace.
"""


class SnapshotError(Exception):
    """Base class for all snapshot failures."""


class ConfigurationError(SnapshotError, ValueError):
    """Options or config file values are missing, conflicting, or unsupported."""


class ManifestParseError(SnapshotError):
    """A manifest file could not be read or is malformed."""


class EdgeConversionError(SnapshotError):
    """Manifests could not be converted to promotion edges."""


class RegistryReadError(SnapshotError):
    """Reading a registry or a manifest list failed."""
