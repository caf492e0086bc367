"""Fake ManifestParser implementation for testing."""

from pathlib import Path

from regsnap.core.errors import ManifestParseError
from regsnap.core.types import Manifest
from regsnap.integrations.manifest.abc import ManifestParser


class FakeManifestParser(ManifestParser):
    """In-memory fake that returns pre-configured manifests by path.

    Paths without a configured manifest raise ManifestParseError, as an
    unreadable file would.
    """

    def __init__(self, *, manifests: dict[Path, Manifest] | None = None) -> None:
        self._manifests = manifests if manifests is not None else {}
        self._parsed_paths: list[Path] = []

    @property
    def parsed_paths(self) -> list[Path]:
        """Paths passed to parse(), for test assertions only."""
        return self._parsed_paths

    def parse(self, path: Path) -> Manifest:
        self._parsed_paths.append(path)
        if path not in self._manifests:
            raise ManifestParseError(f"reading manifest {path}: no such file")
        return self._manifests[path]
