"""Tests for logging helpers."""

import logging

from squatscan.utils.logger import (
    _apply_module_levels, _normalize_module_name, get_logger, parse_module_levels, setup_logger
)


class TestModuleLevels:
    """Test cases for per-module log level handling."""

    def setup_method(self):
        """Remember logger levels touched by the tests."""
        self.names = ["squatscan.scanner.resolver", "squatscan.core.engine", "squatscan.twister"]
        self.saved = {name: logging.getLogger(name).level for name in self.names}

    def teardown_method(self):
        """Restore logger levels."""
        for name, level in self.saved.items():
            logging.getLogger(name).setLevel(level)

    def test_parse_module_levels(self):
        """Test parsing the name=LEVEL list."""
        result = parse_module_levels("engine=debug, resolver=INFO,broken, =x")

        assert result["engine"] == "DEBUG"
        assert result["resolver"] == "INFO"
        assert "broken" not in result

    def test_normalize_alias(self):
        """Test short aliases expand to module paths."""
        assert _normalize_module_name("engine") == "squatscan.core.engine"
        assert _normalize_module_name("dns") == "squatscan.scanner.resolver"

    def test_normalize_prefix(self):
        """Test known top modules get the package prefix."""
        assert _normalize_module_name("scanner.geoip") == "squatscan.scanner.geoip"
        assert _normalize_module_name("squatscan.core.*") == "squatscan.core"
        assert _normalize_module_name("urllib3") == "urllib3"

    def test_apply_mapping(self):
        """Test applying levels from a mapping skips unknown level names."""
        _apply_module_levels({"resolver": "DEBUG", "engine": "NOT_A_LEVEL"})

        assert logging.getLogger("squatscan.scanner.resolver").level == logging.DEBUG
        assert logging.getLogger("squatscan.core.engine").level == self.saved["squatscan.core.engine"]

    def test_apply_from_env(self, monkeypatch):
        """Test levels are read from SQUATSCAN_LOG_LEVELS."""
        monkeypatch.setenv("SQUATSCAN_LOG_LEVELS", "twister=WARNING")

        _apply_module_levels(None)

        assert logging.getLogger("squatscan.twister").level == logging.WARNING

    def test_get_logger(self):
        """Test get_logger returns the named logger."""
        assert get_logger("squatscan.twister") is logging.getLogger("squatscan.twister")


class TestSetupLogger:
    """Test cases for setup_logger."""

    def setup_method(self):
        """Remember the root level."""
        self.saved = logging.getLogger().level

    def teardown_method(self):
        """Restore the root level."""
        logging.getLogger().setLevel(self.saved)

    def test_level_by_name(self):
        """Test the root level is set from a name."""
        setup_logger(level="warning")

        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back(self):
        """Test an unknown level name falls back to INFO."""
        setup_logger(level="LOUD")

        assert logging.getLogger().level == logging.INFO
