"""Fake EdgeBuilder implementation for testing."""

from regsnap.core.edges import edges_to_reg_inv_image
from regsnap.core.errors import EdgeConversionError
from regsnap.core.types import Manifest, PromotionEdge, RegInvImage
from regsnap.integrations.edges.abc import EdgeBuilder


class FakeEdgeBuilder(EdgeBuilder):
    """In-memory fake returning a fixed edge set.

    edges_to_inventory uses the real conversion so tests can reason about the
    resulting inventory from the configured edges.
    """

    def __init__(
        self,
        *,
        edges: frozenset[PromotionEdge] | None = None,
        conversion_error: str | None = None,
    ) -> None:
        self._edges = edges if edges is not None else frozenset()
        self._conversion_error = conversion_error
        self._converted_manifests: list[list[Manifest]] = []

    @property
    def converted_manifests(self) -> list[list[Manifest]]:
        """Manifest lists passed to manifests_to_edges(), for test assertions only."""
        return self._converted_manifests

    def manifests_to_edges(self, manifests: list[Manifest]) -> frozenset[PromotionEdge]:
        self._converted_manifests.append(list(manifests))
        if self._conversion_error is not None:
            raise EdgeConversionError(self._conversion_error)
        return self._edges

    def edges_to_inventory(
        self, edges: frozenset[PromotionEdge], source_name: str
    ) -> RegInvImage:
        return edges_to_reg_inv_image(edges, source_name)
