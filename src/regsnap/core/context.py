"""Application context with dependency injection.

RegsnapContext holds every collaborator the snapshot pipeline needs. It is
created once at the CLI entry point and passed to commands through click's
ctx.obj, so tests can substitute fakes for all of them.
"""

from dataclasses import dataclass

from regsnap.core.global_config import FilesystemGlobalConfigOps, GlobalConfig, GlobalConfigOps
from regsnap.integrations.edges.abc import EdgeBuilder
from regsnap.integrations.manifest.abc import ManifestParser
from regsnap.integrations.registry.abc import RegistryReader


@dataclass(frozen=True)
class RegsnapContext:
    """Immutable context holding all dependencies for snapshot operations.

    Attributes:
        registry_reader: Reads registry inventories and manifest lists
        manifest_parser: Parses user-supplied manifest files
        edge_builder: Converts manifests to promotion edges and edges to inventory
        global_config: User-level defaults
        debug: Whether to show full stack traces instead of clean errors
    """

    registry_reader: RegistryReader
    manifest_parser: ManifestParser
    edge_builder: EdgeBuilder
    global_config: GlobalConfig
    debug: bool

    @staticmethod
    def for_test(
        registry_reader: RegistryReader | None = None,
        manifest_parser: ManifestParser | None = None,
        edge_builder: EdgeBuilder | None = None,
        global_config: GlobalConfig | None = None,
        debug: bool = False,
    ) -> "RegsnapContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes for every collaborator that is not provided, except the
        edge builder, which defaults to the real (pure) implementation.

        Example:
            >>> from regsnap.integrations.registry.fake import FakeRegistryReader
            >>> reader = FakeRegistryReader(inventory={"gcr.io/foo": {}})
            >>> ctx = RegsnapContext.for_test(registry_reader=reader)
        """
        from regsnap.integrations.edges.real import ManifestEdgeBuilder
        from regsnap.integrations.manifest.fake import FakeManifestParser
        from regsnap.integrations.registry.fake import FakeRegistryReader

        return RegsnapContext(
            registry_reader=(
                registry_reader if registry_reader is not None else FakeRegistryReader()
            ),
            manifest_parser=(
                manifest_parser if manifest_parser is not None else FakeManifestParser()
            ),
            edge_builder=edge_builder if edge_builder is not None else ManifestEdgeBuilder(),
            global_config=global_config if global_config is not None else GlobalConfig(),
            debug=debug,
        )


def create_context(
    *,
    debug: bool,
    threads: int | None = None,
    global_config_ops: GlobalConfigOps | None = None,
) -> RegsnapContext:
    """Create production context with real implementations.

    Args:
        debug: If True, errors propagate with full stack traces
        threads: Registry reader concurrency; falls back to the global config
        global_config_ops: Config source (defaults to ~/.regsnap/config.toml)

    Raises:
        ConfigurationError: If the global config file is malformed
    """
    from regsnap.integrations.edges.real import ManifestEdgeBuilder
    from regsnap.integrations.manifest.real import YamlManifestParser
    from regsnap.integrations.registry.real import RealRegistryReader

    config_ops = global_config_ops if global_config_ops is not None else FilesystemGlobalConfigOps()
    global_config = config_ops.load()

    return RegsnapContext(
        registry_reader=RealRegistryReader(
            threads=threads if threads is not None else global_config.threads
        ),
        manifest_parser=YamlManifestParser(),
        edge_builder=ManifestEdgeBuilder(),
        global_config=global_config,
        debug=debug,
    )
