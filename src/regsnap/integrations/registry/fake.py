"""Fake RegistryReader implementation for testing.

FakeRegistryReader is an in-memory implementation that returns pre-configured
inventories and manifest list membership without any network access.
"""

from regsnap.core.errors import RegistryReadError
from regsnap.core.types import ParentDigests, RegInvImage, RegistryContext, RegistryState
from regsnap.integrations.registry.abc import RegistryReader


class FakeRegistryReader(RegistryReader):
    """In-memory fake implementation that tracks calls.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        inventory: dict[str, RegInvImage] | None = None,
        media_types: dict[str, str] | None = None,
        parent_digests: ParentDigests | None = None,
        read_error: str | None = None,
        manifest_list_error: str | None = None,
    ) -> None:
        """Create FakeRegistryReader with pre-configured state.

        Args:
            inventory: Inventory keyed by registry name. Registries not listed
                read as empty.
            media_types: Media type per digest reported in the returned state
            parent_digests: Child -> parent mapping returned by read_manifest_lists
            read_error: If set, read_registries raises RegistryReadError with it
            manifest_list_error: If set, read_manifest_lists raises RegistryReadError
        """
        self._inventory = inventory if inventory is not None else {}
        self._media_types = media_types if media_types is not None else {}
        self._parent_digests = parent_digests if parent_digests is not None else {}
        self._read_error = read_error
        self._manifest_list_error = manifest_list_error
        self._read_calls: list[tuple[list[RegistryContext], bool]] = []
        self._manifest_list_calls: list[RegistryState] = []

    @property
    def read_calls(self) -> list[tuple[list[RegistryContext], bool]]:
        """(registries, recursive) for each read_registries() call.

        This property is for test assertions only.
        """
        return self._read_calls

    @property
    def manifest_list_calls(self) -> list[RegistryState]:
        """States passed to read_manifest_lists().

        This property is for test assertions only.
        """
        return self._manifest_list_calls

    def read_registries(
        self, registries: list[RegistryContext], *, recursive: bool
    ) -> RegistryState:
        self._read_calls.append((list(registries), recursive))
        if self._read_error is not None:
            raise RegistryReadError(self._read_error)

        inventory = {
            registry.name: {
                image_name: dict(digest_tags)
                for image_name, digest_tags in self._inventory.get(registry.name, {}).items()
            }
            for registry in registries
        }
        return RegistryState(inventory=inventory, media_types=dict(self._media_types))

    def read_manifest_lists(self, state: RegistryState) -> ParentDigests:
        self._manifest_list_calls.append(state)
        if self._manifest_list_error is not None:
            raise RegistryReadError(self._manifest_list_error)
        return dict(self._parent_digests)
