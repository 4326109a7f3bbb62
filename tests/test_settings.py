"""
==============================================================================
Settings Tests
==============================================================================
"""

from pathlib import Path

from catalog_api.config import Settings


class TestSettings:
    """Tests for configuration parsing."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings(products_file="")
        assert settings.app_env == "development"
        assert settings.products_path is None
        assert settings.cors_origins_list == ["http://localhost:5173"]

    def test_unknown_env_falls_back(self):
        """Test unknown environment becomes development."""
        assert Settings(app_env="Moon").app_env == "development"
        assert Settings(app_env=" PRODUCTION ").app_env == "production"

    def test_products_path(self):
        """Test products file becomes a Path."""
        assert Settings(products_file="data/products.json").products_path == Path("data/products.json")

    def test_invalid_cors_json(self):
        """Test malformed CORS origins fall back to wildcard."""
        assert Settings(cors_origins="not json").cors_origins_list == ["*"]
        assert Settings(cors_origins='{"a": 1}').cors_origins_list == ["*"]
