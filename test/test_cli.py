"""Tests for the command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from squatscan.cli import cli

from test_scanner import FakeResolver


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep user configuration files out of the tests."""
    monkeypatch.setenv("HOME", str(tmp_path))


class TestCLI:
    """Test cases for CLI commands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()
        self.resolver = FakeResolver({("example.com", "A"): ["192.0.2.1"]})

    def invoke_scan(self, *args):
        with patch("squatscan.scanner.scanner.Resolver", return_value=self.resolver):
            return self.runner.invoke(cli, ["scan", "example.com", *args])

    def test_fuzzers_command(self):
        """Test listing fuzzers."""
        result = self.runner.invoke(cli, ["fuzzers"])

        assert result.exit_code == 0
        assert "addition" in result.output
        assert "tld-swap" in result.output
        assert "vowel-swap" in result.output

    def test_init_config(self):
        """Test writing a default configuration file."""
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(cli, ["init-config"])
            assert result.exit_code == 0
            assert Path("squatscan.yaml").exists()

            again = self.runner.invoke(cli, ["init-config"])
            assert again.exit_code == 1

            forced = self.runner.invoke(cli, ["init-config", "--force"])
            assert forced.exit_code == 0

    def test_scan_list_to_file(self):
        """Test a scan written to an output file."""
        with self.runner.isolated_filesystem():
            result = self.invoke_scan("--fuzzers", "addition", "--format", "list", "--output", "out.txt")

            assert result.exit_code == 0
            lines = Path("out.txt").read_text(encoding="utf-8").splitlines()

        assert len(lines) == 37
        assert lines[0] == "example.com"

    def test_scan_registered_json(self):
        """Test the registered filter with JSON output."""
        with self.runner.isolated_filesystem():
            result = self.invoke_scan("-f", "addition", "--registered", "--format", "json", "-o", "out.json")

            assert result.exit_code == 0
            data = json.loads(Path("out.json").read_text(encoding="utf-8"))

        assert data == [{"fuzzer": "original", "domain": "example.com", "dns": {"A": ["192.0.2.1"]}}]

    def test_scan_uses_config_file(self):
        """Test options are read from the configuration file."""
        with self.runner.isolated_filesystem():
            Path("custom.yaml").write_text("fuzzers: omission\nformat: list\n", encoding="utf-8")
            with patch("squatscan.scanner.scanner.Resolver", return_value=self.resolver):
                result = self.runner.invoke(cli, ["--config", "custom.yaml", "scan", "example.com", "-o", "out.txt"])

            assert result.exit_code == 0
            lines = Path("out.txt").read_text(encoding="utf-8").splitlines()

        assert lines[0] == "example.com"
        assert "xample.com" in lines

    def test_scan_conflicting_filters(self):
        """Test registered and unregistered together fail."""
        result = self.invoke_scan("--registered", "--unregistered")

        assert result.exit_code == 1

    def test_scan_invalid_domain(self):
        """Test an invalid domain fails."""
        with patch("squatscan.scanner.scanner.Resolver", return_value=self.resolver):
            result = self.runner.invoke(cli, ["scan", "localhost"])

        assert result.exit_code == 1

    def test_scan_invalid_threads(self):
        """Test a non-positive thread count fails."""
        result = self.invoke_scan("--threads", "0")

        assert result.exit_code == 1

    def test_scan_strict(self):
        """Test strict mode fails on unknown fuzzer names."""
        result = self.invoke_scan("--fuzzers", "typo", "--strict")

        assert result.exit_code == 1
