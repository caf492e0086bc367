"""Tests for YamlManifestParser."""

from pathlib import Path

import pytest

from regsnap.core.errors import ManifestParseError
from regsnap.core.types import RegistryContext
from regsnap.integrations.manifest.real import YamlManifestParser

DIGEST_A = "sha256:" + "a" * 64
DIGEST_B = "sha256:" + "b" * 64

VALID_MANIFEST = f"""\
registries:
- name: gcr.io/k8s-staging-foo
  src: true
- name: us.gcr.io/k8s-artifacts-prod/foo/
  service-account: sa@example.iam.gserviceaccount.com
images:
- name: bar
  dmap:
    "{DIGEST_A}": ["1.0", "latest", "1.0"]
    "{DIGEST_B}":
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "promoter-manifest.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_parses_registries_and_images(tmp_path: Path) -> None:
    path = _write(tmp_path, VALID_MANIFEST)

    manifest = YamlManifestParser().parse(path)

    assert manifest.registries == (
        RegistryContext(name="gcr.io/k8s-staging-foo", service_account="", src=True),
        RegistryContext(
            name="us.gcr.io/k8s-artifacts-prod/foo",
            service_account="sa@example.iam.gserviceaccount.com",
            src=False,
        ),
    )
    assert manifest.src_registry == manifest.registries[0]
    (image,) = manifest.images
    assert image.name == "bar"
    assert image.dmap == {DIGEST_A: ("1.0", "latest"), DIGEST_B: ()}
    assert manifest.filepath == str(path)


def test_missing_file_raises_parse_error(tmp_path: Path) -> None:
    with pytest.raises(ManifestParseError, match="reading manifest"):
        YamlManifestParser().parse(tmp_path / "missing.yaml")


def test_invalid_yaml_raises_parse_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "registries: [unclosed\n")

    with pytest.raises(ManifestParseError, match="invalid YAML"):
        YamlManifestParser().parse(path)


def test_non_mapping_document_raises_parse_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "- just\n- a list\n")

    with pytest.raises(ManifestParseError, match="must be a YAML mapping"):
        YamlManifestParser().parse(path)


def test_bad_digest_raises_parse_error(tmp_path: Path) -> None:
    content = """\
registries:
- name: gcr.io/staging
  src: true
images:
- name: bar
  dmap:
    "sha256:short": ["1.0"]
"""
    path = _write(tmp_path, content)

    with pytest.raises(ManifestParseError, match="invalid digest"):
        YamlManifestParser().parse(path)


def test_bad_tag_raises_parse_error(tmp_path: Path) -> None:
    content = f"""\
registries:
- name: gcr.io/staging
  src: true
images:
- name: bar
  dmap:
    "{DIGEST_A}": ["-bad tag"]
"""
    path = _write(tmp_path, content)

    with pytest.raises(ManifestParseError, match="invalid tag"):
        YamlManifestParser().parse(path)


@pytest.mark.parametrize(
    "registries",
    [
        "- name: gcr.io/prod\n",
        "- name: gcr.io/a\n  src: true\n- name: gcr.io/b\n  src: true\n",
    ],
)
def test_requires_exactly_one_source_registry(tmp_path: Path, registries: str) -> None:
    path = _write(tmp_path, "registries:\n" + registries)

    with pytest.raises(ManifestParseError, match="exactly one source registry"):
        YamlManifestParser().parse(path)
