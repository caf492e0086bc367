"""Tests for global config loading."""

from pathlib import Path

import pytest

from regsnap.core.errors import ConfigurationError
from regsnap.core.global_config import (
    FilesystemGlobalConfigOps,
    GlobalConfig,
    InMemoryGlobalConfigOps,
    parse_global_config,
)


class TmpGlobalConfigOps(FilesystemGlobalConfigOps):
    """Filesystem config ops rooted in a temporary directory."""

    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path

    def path(self) -> Path:
        return self._config_path


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    ops = TmpGlobalConfigOps(tmp_path / "config.toml")

    assert ops.exists() is False
    assert ops.load() == GlobalConfig()


def test_values_are_read_from_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        'output_format = "yaml"\nservice_account = "sa@example.com"\nthreads = 4\n',
        encoding="utf-8",
    )

    config = TmpGlobalConfigOps(config_path).load()

    assert config == GlobalConfig(output_format="yaml", service_account="sa@example.com", threads=4)


def test_invalid_toml_raises_configuration_error(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("threads = = 3", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        TmpGlobalConfigOps(config_path).load()


@pytest.mark.parametrize("threads", [0, -1, "8", True])
def test_invalid_threads_rejected(threads: object) -> None:
    with pytest.raises(ConfigurationError, match="'threads' must be a positive integer"):
        parse_global_config({"threads": threads}, Path("/config.toml"))


def test_non_string_output_format_rejected() -> None:
    with pytest.raises(ConfigurationError, match="'output_format' must be a string"):
        parse_global_config({"output_format": 3}, Path("/config.toml"))


def test_in_memory_ops_returns_configured_value() -> None:
    config = GlobalConfig(threads=2)

    assert InMemoryGlobalConfigOps(config).load() == config
    assert InMemoryGlobalConfigOps().exists() is False
    assert InMemoryGlobalConfigOps().load() == GlobalConfig()
