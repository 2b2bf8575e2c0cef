"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from pubdocs.config import AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.root is None
        assert config.host == "127.0.0.1"
        assert config.port == 8080
        assert config.refresh_interval_minutes == 10

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(root=Path("/srv/docs"), host="0.0.0.0", port=9000, refresh_interval_minutes=1)

        assert config.root == Path("/srv/docs")
        assert config.host == "0.0.0.0"
        assert config.port == 9000
        assert config.refresh_interval_minutes == 1

    def test_resolve_root_absolute(self) -> None:
        """Should return an absolute root as-is."""
        config = AppConfig(root=Path("/srv/docs"))

        assert config.resolve_root(Path("/elsewhere")) == Path("/srv/docs")

    def test_resolve_root_relative_with_base(self) -> None:
        """Should resolve a relative root against base_dir."""
        config = AppConfig(root=Path("docs"))

        assert config.resolve_root(Path("/base")) == Path("/base/docs")

    def test_resolve_root_normalizes(self) -> None:
        """Should collapse dot segments."""
        config = AppConfig(root=Path("/srv/docs/../public/."))

        assert config.resolve_root() == Path("/srv/public")

    def test_resolve_root_missing(self) -> None:
        """Should fail without a configured root."""
        with pytest.raises(ValueError):
            AppConfig().resolve_root()

    def test_from_env(self) -> None:
        """Should read overrides from the environment mapping."""
        config = AppConfig.from_env(
            {
                "PUBDOCS_ROOT": "/srv/docs",
                "PUBDOCS_HOST": "0.0.0.0",
                "PUBDOCS_PORT": "9090",
                "PUBDOCS_REFRESH_MINUTES": "5",
            }
        )

        assert config.root == Path("/srv/docs")
        assert config.host == "0.0.0.0"
        assert config.port == 9090
        assert config.refresh_interval_minutes == 5

    def test_from_env_defaults(self) -> None:
        """Should fall back to defaults for unset variables."""
        config = AppConfig.from_env({})

        assert config.root is None
        assert config.port == 8080
