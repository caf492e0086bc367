"""Tests for source registry construction."""

import pytest

from regsnap.core.errors import ConfigurationError
from regsnap.core.options import SnapshotOptions
from regsnap.core.source_registry import get_snapshot_source_registry
from regsnap.core.types import RegistryContext


def test_snapshot_name_is_used_for_direct_snapshot() -> None:
    options = SnapshotOptions(snapshot="gcr.io/foo", snapshot_service_account="sa@example.com")

    registry = get_snapshot_source_registry(options)

    assert registry == RegistryContext(
        name="gcr.io/foo", service_account="sa@example.com", src=True
    )


def test_manifest_based_name_is_used_when_snapshot_unset() -> None:
    """The manifest-based source name is taken from its own option."""
    options = SnapshotOptions(manifest_based_snapshot_of="gcr.io/bar")

    registry = get_snapshot_source_registry(options)

    assert registry.name == "gcr.io/bar"
    assert registry.src is True


def test_trailing_slash_is_stripped() -> None:
    registry = get_snapshot_source_registry(SnapshotOptions(snapshot="gcr.io/foo/"))

    assert registry.name == "gcr.io/foo"


def test_missing_source_fails_with_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="has to be set"):
        get_snapshot_source_registry(SnapshotOptions())


def test_both_sources_fail_with_configuration_error() -> None:
    options = SnapshotOptions(snapshot="gcr.io/foo", manifest_based_snapshot_of="gcr.io/foo")

    with pytest.raises(ConfigurationError, match="mutually exclusive"):
        get_snapshot_source_registry(options)


def test_configuration_error_is_a_value_error() -> None:
    """Callers that only know about ValueError still catch configuration failures."""
    with pytest.raises(ValueError):
        get_snapshot_source_registry(SnapshotOptions(output_format="yaml"))
