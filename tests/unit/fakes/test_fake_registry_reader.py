"""Tests for FakeRegistryReader test infrastructure."""

import pytest

from regsnap.core.errors import RegistryReadError
from regsnap.core.types import RegistryContext
from regsnap.integrations.registry.fake import FakeRegistryReader


def test_fake_registry_reader_initialization() -> None:
    """Unconfigured registries read as empty."""
    reader = FakeRegistryReader()

    state = reader.read_registries([RegistryContext(name="gcr.io/foo")], recursive=True)

    assert state.inventory == {"gcr.io/foo": {}}
    assert reader.read_manifest_lists(state) == {}


def test_fake_registry_reader_tracks_calls() -> None:
    reader = FakeRegistryReader(inventory={"gcr.io/foo": {"bar": {"d1": ("v1",)}}})
    registry = RegistryContext(name="gcr.io/foo", src=True)

    state = reader.read_registries([registry], recursive=False)
    reader.read_manifest_lists(state)

    assert reader.read_calls == [([registry], False)]
    assert reader.manifest_list_calls == [state]


def test_fake_registry_reader_returns_copies() -> None:
    """Mutating a returned state does not leak into later reads."""
    reader = FakeRegistryReader(inventory={"gcr.io/foo": {"bar": {"d1": ("v1",)}}})
    registry = RegistryContext(name="gcr.io/foo")

    first = reader.read_registries([registry], recursive=True)
    first.inventory["gcr.io/foo"]["bar"]["d2"] = ()

    second = reader.read_registries([registry], recursive=True)
    assert second.inventory["gcr.io/foo"]["bar"] == {"d1": ("v1",)}


def test_fake_registry_reader_configured_errors() -> None:
    reader = FakeRegistryReader(read_error="boom", manifest_list_error="bang")

    with pytest.raises(RegistryReadError, match="boom"):
        reader.read_registries([RegistryContext(name="gcr.io/foo")], recursive=True)

    with pytest.raises(RegistryReadError, match="bang"):
        reader.read_manifest_lists(FakeRegistryReader().read_registries([], recursive=True))
