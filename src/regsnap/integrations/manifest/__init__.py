from regsnap.integrations.manifest.abc import ManifestParser
from regsnap.integrations.manifest.fake import FakeManifestParser
from regsnap.integrations.manifest.real import YamlManifestParser

__all__ = [
    "FakeManifestParser",
    "ManifestParser",
    "YamlManifestParser",
]
