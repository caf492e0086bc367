"""Registry reading abstraction.

The snapshot core never talks to a registry directly. It asks a RegistryReader
to crawl the source registry and to resolve manifest list membership, then
inspects the returned state.
"""

from abc import ABC, abstractmethod

from regsnap.core.types import ParentDigests, RegistryContext, RegistryState


class RegistryReader(ABC):
    """Abstract registry reader for dependency injection."""

    @abstractmethod
    def read_registries(
        self, registries: list[RegistryContext], *, recursive: bool
    ) -> RegistryState:
        """Read the image inventory of each registry.

        Args:
            registries: Registries to read
            recursive: Whether to descend into child repositories

        Returns:
            RegistryState with inventory keyed by registry name and the media
            type of every digest seen

        Raises:
            RegistryReadError: If any registry cannot be read
        """
        ...

    @abstractmethod
    def read_manifest_lists(self, state: RegistryState) -> ParentDigests:
        """Resolve the children of every manifest list found in state.

        Returns:
            Mapping of child digest to parent manifest list digest

        Raises:
            RegistryReadError: If a manifest list cannot be fetched
        """
        ...
