"""Production edge builder backed by the pure functions in regsnap.core.edges."""

from regsnap.core.edges import edges_to_reg_inv_image, to_promotion_edges
from regsnap.core.types import Manifest, PromotionEdge, RegInvImage
from regsnap.integrations.edges.abc import EdgeBuilder


class ManifestEdgeBuilder(EdgeBuilder):
    """Builds edges from every source -> destination pair declared in manifests."""

    def manifests_to_edges(self, manifests: list[Manifest]) -> frozenset[PromotionEdge]:
        return to_promotion_edges(manifests)

    def edges_to_inventory(
        self, edges: frozenset[PromotionEdge], source_name: str
    ) -> RegInvImage:
        return edges_to_reg_inv_image(edges, source_name)
