"""Global configuration data structures and loading.

Provides immutable user-level defaults loaded from ~/.regsnap/config.toml.
A missing file is not an error: built-in defaults apply.
"""

import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from regsnap.core.errors import ConfigurationError
from regsnap.core.options import DEFAULT_OUTPUT_FORMAT

DEFAULT_THREADS = 10


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in RegsnapContext.
    Command-line flags take precedence over these values.
    """

    output_format: str = DEFAULT_OUTPUT_FORMAT
    service_account: str = ""
    threads: int = DEFAULT_THREADS


class GlobalConfigOps(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config.

        Returns:
            GlobalConfig with values from the config, defaults where unset

        Raises:
            ConfigurationError: If config values are malformed
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for error messages)."""
        ...


def parse_global_config(data: dict, config_path: Path) -> GlobalConfig:
    """Validate raw TOML data into a GlobalConfig.

    Raises:
        ConfigurationError: If a value has the wrong type or is out of range
    """
    output_format = data.get("output_format", DEFAULT_OUTPUT_FORMAT)
    if not isinstance(output_format, str):
        raise ConfigurationError(f"'output_format' must be a string in {config_path}")

    service_account = data.get("service_account", "")
    if not isinstance(service_account, str):
        raise ConfigurationError(f"'service_account' must be a string in {config_path}")

    threads = data.get("threads", DEFAULT_THREADS)
    # bool is an int subclass, reject it explicitly
    if isinstance(threads, bool) or not isinstance(threads, int) or threads < 1:
        raise ConfigurationError(f"'threads' must be a positive integer in {config_path}")

    return GlobalConfig(
        output_format=output_format,
        service_account=service_account,
        threads=threads,
    )


class FilesystemGlobalConfigOps(GlobalConfigOps):
    """Production implementation that reads ~/.regsnap/config.toml."""

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        config_path = self.path()
        if not self.exists():
            return GlobalConfig()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

        return parse_global_config(data, config_path)

    def path(self) -> Path:
        return Path.home() / ".regsnap" / "config.toml"


class InMemoryGlobalConfigOps(GlobalConfigOps):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config ops.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return GlobalConfig()
        return self._config

    def path(self) -> Path:
        return Path("/fake/regsnap/config.toml")
