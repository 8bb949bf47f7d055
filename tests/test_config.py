"""Tests for pos_checkout.core.config."""

import importlib

from pos_checkout.core import config


class TestSettings:
    def test_defaults(self):
        settings = config.Settings()
        assert settings.shipping_increment_grams == 100
        assert settings.shipping_rate_per_increment == 3.0

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("POS_SHIPPING_RATE_PER_INCREMENT", "5")
        assert config.Settings().shipping_rate_per_increment == 5.0


class TestDotenv:
    def test_env_file_is_loaded_before_cached_settings(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("POS_SHIPPING_RATE_PER_INCREMENT=7\n")
        monkeypatch.chdir(tmp_path)
        # Register the variable so monkeypatch removes what the .env sets
        monkeypatch.setenv("POS_SHIPPING_RATE_PER_INCREMENT", "3")
        monkeypatch.delenv("POS_SHIPPING_RATE_PER_INCREMENT")

        try:
            reloaded = importlib.reload(config)
            assert reloaded.settings.shipping_rate_per_increment == 7.0
        finally:
            monkeypatch.undo()
            importlib.reload(config)
