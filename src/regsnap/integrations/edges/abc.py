"""Promotion edge building abstraction."""

from abc import ABC, abstractmethod

from regsnap.core.types import Manifest, PromotionEdge, RegInvImage


class EdgeBuilder(ABC):
    """Abstract edge builder for dependency injection."""

    @abstractmethod
    def manifests_to_edges(self, manifests: list[Manifest]) -> frozenset[PromotionEdge]:
        """Convert manifests into promotion edges.

        Raises:
            EdgeConversionError: If the manifests do not describe a valid edge set
        """
        ...

    @abstractmethod
    def edges_to_inventory(
        self, edges: frozenset[PromotionEdge], source_name: str
    ) -> RegInvImage:
        """Derive the inventory the edges declare for registry source_name."""
        ...
