"""Tests for the tm-bridge command line."""

import json
from unittest.mock import patch

from click.testing import CliRunner
from fakes import FakeCoreFactory, FakeCoreHandle

from tm_bridge.cli import EXIT_DEFERRED, cli
from tm_bridge.enums import StorageType


class TestTagsCommand:
    """Tests for `tm-bridge tags`."""

    def test_text_output(self, remote_factory):
        with patch("tm_bridge.dispatcher.initialize_core", new=remote_factory):
            result = CliRunner().invoke(cli, ["tags", "--project-root", "/p"])
        assert result.exit_code == 0, result.output
        assert "Fetching Tags from Hamster" in result.output
        assert "alpha" in result.output
        assert "Found 2 tag(s)" in result.output
        assert remote_factory.project_paths == ["/p"]

    def test_json_output(self, remote_factory):
        with patch("tm_bridge.dispatcher.initialize_core", new=remote_factory):
            result = CliRunner().invoke(cli, ["tags", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["success"] is True
        assert data["totalTags"] == 2
        assert [t["name"] for t in data["tags"]] == ["alpha", "beta"]

    def test_local_storage_exits_deferred(self, local_factory):
        with patch("tm_bridge.dispatcher.initialize_core", new=local_factory):
            result = CliRunner().invoke(cli, ["tags"])
        assert result.exit_code == EXIT_DEFERRED
        assert "file-based tags listing" in result.output

    def test_fetch_error_exits_with_message(self):
        factory = FakeCoreFactory(FakeCoreHandle(StorageType.API, error=RuntimeError("Session expired, log in again")))
        with patch("tm_bridge.dispatcher.initialize_core", new=factory):
            result = CliRunner().invoke(cli, ["tags"])
        assert result.exit_code == 1
        assert "Error: Session expired, log in again" in result.output


class TestPromptCommands:
    """Tests for `tm-bridge prompt`."""

    def test_list(self):
        result = CliRunner().invoke(cli, ["prompt", "list"])
        assert result.exit_code == 0
        assert "analyze-complexity" in result.output.splitlines()

    def test_show(self):
        result = CliRunner().invoke(cli, ["prompt", "show", "analyze-complexity"])
        assert result.exit_code == 0, result.output
        assert "analyze-complexity v1.0.0" in result.output
        assert "tasks (array, required)" in result.output
        assert "threshold (number, default=5) [1..10]" in result.output
        assert "Variants: default" in result.output

    def test_show_json(self):
        result = CliRunner().invoke(cli, ["prompt", "show", "analyze-complexity", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["id"] == "analyze-complexity"

    def test_show_unknown(self):
        result = CliRunner().invoke(cli, ["prompt", "show", "missing"])
        assert result.exit_code == 1
        assert "Unknown prompt template 'missing'" in result.output
