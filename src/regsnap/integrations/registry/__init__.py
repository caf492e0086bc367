from regsnap.integrations.registry.abc import RegistryReader
from regsnap.integrations.registry.fake import FakeRegistryReader
from regsnap.integrations.registry.real import RealRegistryReader

__all__ = [
    "FakeRegistryReader",
    "RealRegistryReader",
    "RegistryReader",
]
