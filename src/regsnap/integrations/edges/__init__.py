from regsnap.integrations.edges.abc import EdgeBuilder
from regsnap.integrations.edges.fake import FakeEdgeBuilder
from regsnap.integrations.edges.real import ManifestEdgeBuilder

__all__ = [
    "EdgeBuilder",
    "FakeEdgeBuilder",
    "ManifestEdgeBuilder",
]
