"""Manifest parsing abstraction."""

from abc import ABC, abstractmethod
from pathlib import Path

from regsnap.core.types import Manifest


class ManifestParser(ABC):
    """Abstract manifest parser for dependency injection."""

    @abstractmethod
    def parse(self, path: Path) -> Manifest:
        """Parse a promoter manifest file.

        Raises:
            ManifestParseError: If the file cannot be read or is malformed
        """
        ...
