"""Tests for RegsnapContext construction."""

from regsnap.core.context import RegsnapContext, create_context
from regsnap.core.global_config import GlobalConfig, InMemoryGlobalConfigOps
from regsnap.integrations.edges.real import ManifestEdgeBuilder
from regsnap.integrations.manifest.fake import FakeManifestParser
from regsnap.integrations.manifest.real import YamlManifestParser
from regsnap.integrations.registry.fake import FakeRegistryReader
from regsnap.integrations.registry.real import RealRegistryReader


def test_for_test_defaults_to_fakes() -> None:
    ctx = RegsnapContext.for_test()

    assert isinstance(ctx.registry_reader, FakeRegistryReader)
    assert isinstance(ctx.manifest_parser, FakeManifestParser)
    assert isinstance(ctx.edge_builder, ManifestEdgeBuilder)
    assert ctx.global_config == GlobalConfig()
    assert ctx.debug is False


def test_create_context_uses_real_implementations() -> None:
    ops = InMemoryGlobalConfigOps(GlobalConfig(output_format="yaml", threads=3))

    ctx = create_context(debug=True, global_config_ops=ops)

    assert isinstance(ctx.registry_reader, RealRegistryReader)
    assert isinstance(ctx.manifest_parser, YamlManifestParser)
    assert ctx.global_config.output_format == "yaml"
    assert ctx.debug is True
