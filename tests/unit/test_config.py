"""Tests for configuration."""

import logging
import pytest
from core.config.config import Config, config


class TestConfig:
    """Tests for Config."""
    
    def test_defaults(self):
        """Test default operational settings."""
        assert config.SAMPLER == "system"
        assert config.LOG_LEVEL == "WARNING"
        assert "%(message)s" in config.LOG_FORMAT
    
    def test_log_level_resolves(self):
        """Test that LOG_LEVEL maps to a logging level."""
        assert config.log_level() == logging.WARNING
    
    def test_log_level_case_insensitive(self, monkeypatch):
        """Test that lowercase names resolve too."""
        cfg = Config()
        monkeypatch.setattr(cfg, "LOG_LEVEL", "debug")
        assert cfg.log_level() == logging.DEBUG
    
    def test_invalid_log_level_raises(self, monkeypatch):
        """Test that an unknown level name is rejected."""
        cfg = Config()
        monkeypatch.setattr(cfg, "LOG_LEVEL", "CHATTY")
        with pytest.raises(ValueError, match="Invalid log level"):
            cfg.log_level()
