"""Tests for the CLI module."""

import pytest
from typer.testing import CliRunner

from sitedocs import __version__
from sitedocs.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def static_http(monkeypatch, fetcher):
    """Route the CLI's default fetcher to the static fixture."""
    monkeypatch.setattr("sitedocs.gateway.HttpFetcher", lambda config=None: fetcher)
    for var in ("SITEDOCS_TIMEOUT", "SITEDOCS_MAX_RETRIES", "SITEDOCS_RETRY_DELAY"):
        monkeypatch.delenv(var, raising=False)


class TestCli:
    """Tests for the sitedocs commands."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_sites(self, monkeypatch):
        """Test listing sites marks the default."""
        monkeypatch.setenv("COLUMNS", "200")
        result = runner.invoke(app, ["sites"])
        assert result.exit_code == 0
        assert "module-federation (default)" in result.stdout
        assert "firebase" in result.stdout

    def test_index(self, sample_index):
        result = runner.invoke(app, ["index"])
        assert result.exit_code == 0
        assert "Documentation index for Module Federation:" in result.stdout
        assert "## Guide" in result.stdout

    def test_page(self):
        result = runner.invoke(app, ["page", "/guide/start/quick-start.md"])
        assert result.exit_code == 0
        assert "# Quick Start" in result.stdout

    def test_search(self):
        result = runner.invoke(app, ["search", "RUNTIME"])
        assert result.exit_code == 0
        assert 'Found 1 match for "RUNTIME" in Module Federation:' in result.stdout

    def test_search_case_sensitive(self):
        result = runner.invoke(app, ["search", "RUNTIME", "--case-sensitive"])
        assert result.exit_code == 0
        assert "No matches found" in result.stdout

    def test_fetch_failure_exits_nonzero(self):
        """Test that a failed fetch exits with status 1."""
        result = runner.invoke(app, ["index", "--site", "firebase"])
        assert result.exit_code == 1

    def test_invalid_site_rejected(self):
        result = runner.invoke(app, ["index", "--site", "vue"])
        assert result.exit_code != 0

    def test_invalid_env_config(self, monkeypatch):
        monkeypatch.setenv("SITEDOCS_TIMEOUT", "soon")
        result = runner.invoke(app, ["index"])
        assert result.exit_code == 1


class TestHelpers:
    """Tests for CLI helper signatures."""

    def test_fail_never_returns(self):
        """Test that the failure helper is declared as never returning."""
        from typing import NoReturn, get_type_hints

        from sitedocs.cli import _fail

        assert get_type_hints(_fail)["return"] is NoReturn

    def test_tool_result_annotated(self):
        """Test that the server's result helper declares its return type."""
        from typing import get_type_hints

        from mcp.types import CallToolResult

        from sitedocs.server import _tool_result

        assert get_type_hints(_tool_result)["return"] is CallToolResult
