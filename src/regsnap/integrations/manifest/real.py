"""Manifest parser reading YAML files from disk."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from regsnap.core.errors import ManifestParseError
from regsnap.core.types import Image, Manifest, RegistryContext, normalize_tags
from regsnap.integrations.manifest.abc import ManifestParser
from regsnap.integrations.manifest.schema import ManifestFile


def manifest_from_schema(manifest_file: ManifestFile, filepath: str | None) -> Manifest:
    """Convert a validated manifest document into the domain Manifest."""
    return Manifest(
        registries=tuple(
            RegistryContext(
                name=entry.name.rstrip("/"),
                service_account=entry.service_account,
                src=entry.src,
            )
            for entry in manifest_file.registries
        ),
        images=tuple(
            Image(
                name=entry.name,
                dmap={digest: normalize_tags(tags) for digest, tags in entry.dmap.items()},
            )
            for entry in manifest_file.images
        ),
        filepath=filepath,
    )


class YamlManifestParser(ManifestParser):
    """Production implementation that reads manifest YAML files."""

    def parse(self, path: Path) -> Manifest:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ManifestParseError(f"reading manifest {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ManifestParseError(f"invalid YAML in manifest {path}: {e}") from e

        if not isinstance(data, dict):
            raise ManifestParseError(f"manifest {path} must be a YAML mapping")

        try:
            manifest_file = ManifestFile.model_validate(data)
        except ValidationError as e:
            raise ManifestParseError(f"invalid manifest {path}: {e}") from e

        return manifest_from_schema(manifest_file, str(path))
