"""
==============================================================================
Settings and Entry Point Tests
==============================================================================

Tests for configuration loading and process exit codes.

==============================================================================
"""

import builtins
import json
import logging

import pytest
from pydantic import ValidationError

from product_manager import main as main_module
from product_manager.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()
        assert settings.products_file == "products.json"
        assert settings.json_indent == 2
        assert settings.effective_log_level == logging.WARNING

    def test_environment_override(self, monkeypatch, tmp_path):
        """Test variables with the PRODUCT_MANAGER_ prefix are read."""
        monkeypatch.setenv("PRODUCT_MANAGER_PRODUCTS_FILE", str(tmp_path / "inv.json"))
        monkeypatch.setenv("PRODUCT_MANAGER_DEBUG", "true")
        settings = get_settings()
        assert settings.products_path == tmp_path / "inv.json"
        assert settings.effective_log_level == logging.DEBUG

    def test_unrecognized_variables_ignored(self, monkeypatch):
        """Test stray PRODUCT_MANAGER_ variables do not become settings."""
        monkeypatch.setenv("PRODUCT_MANAGER_APP_ENV", "production")
        settings = get_settings()
        assert not hasattr(settings, "app_env")
        assert "app_env" not in settings.model_dump()

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_settings_cached(self):
        """Test get_settings returns one instance."""
        assert get_settings() is get_settings()


class TestMain:
    """Tests for main() exit codes."""

    def test_exit_returns_zero(self, monkeypatch, products_file):
        """Test choosing Exit returns status 0."""
        answers = iter(["3", "5"])
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

        assert main_module.main(["--file", str(products_file)]) == 0

    def test_session_changes_are_saved(self, monkeypatch, tmp_path):
        """Test a product added in a session lands in the file."""
        path = tmp_path / "products.json"
        answers = iter(["1", "1", "A", "X", "5", "true", "5"])
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

        assert main_module.main(["--file", str(path)]) == 0
        assert json.loads(path.read_text(encoding="utf-8")) == [
            {"id": 1, "name": "A", "category": "X", "price": 5.0, "available": True}
        ]

    def test_unexpected_failure_returns_one(self, monkeypatch, products_file, caplog):
        """Test an uncaught error during bootstrap returns status 1."""
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(main_module.ProductCatalog, "from_settings", broken)

        with caplog.at_level(logging.ERROR):
            assert main_module.main(["--file", str(products_file)]) == 1
        assert "Application error" in caplog.text

    def test_invalid_configuration_returns_one(self, monkeypatch):
        """Test invalid environment configuration returns status 1."""
        monkeypatch.setenv("PRODUCT_MANAGER_LOG_LEVEL", "chatty")
        assert main_module.main([]) == 1
