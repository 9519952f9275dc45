"""
Unit tests for the command line interface.
Tests argument parsing and wiring of configuration, aggregation and rendering.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from usage_tally.main import main, parse_command_line
from usage_tally.models.token_usage import TokenUsage


class TestParseCommandLine:
    """Test CLI argument parsing and validation logic."""

    def test_defaults(self):
        with patch("sys.argv", ["usage-tally"]):
            args = parse_command_line()

        assert args.projects_dir is None
        assert args.max_workers is None
        assert args.log_level is None
        assert args.short_names is False

    def test_all_options(self):
        argv = ["usage-tally", "--projects-dir", "/data/logs", "--max-workers", "3",
                "--log-level", "debug", "--short-names"]
        with patch("sys.argv", argv):
            args = parse_command_line()

        assert args.projects_dir == Path("/data/logs")
        assert args.max_workers == 3
        assert args.log_level == "DEBUG"
        assert args.short_names is True

    @pytest.mark.parametrize("workers", ["0", "-2"])
    def test_rejects_non_positive_workers(self, workers):
        with patch("sys.argv", ["usage-tally", "--max-workers", workers]):
            with pytest.raises(SystemExit):
                parse_command_line()

    def test_rejects_unknown_log_level(self):
        with patch("sys.argv", ["usage-tally", "--log-level", "loud"]):
            with pytest.raises(SystemExit):
                parse_command_line()


class TestMain:
    """Test the end to end CLI entry point with mocked collaborators."""

    def test_uses_projects_dir_argument(self, tmp_path):
        data = [(("m", "2024-01-01"), TokenUsage(input_tokens=1))]
        with patch("sys.argv", ["usage-tally", "--projects-dir", str(tmp_path)]), \
                patch("usage_tally.main.create_usage_aggregator") as mock_create, \
                patch("usage_tally.main.render_usage_table") as mock_render:
            mock_create.return_value.process.return_value = data

            assert main() == 0

        mock_create.assert_called_once_with(None)
        mock_create.return_value.process.assert_called_once_with(tmp_path)
        mock_render.assert_called_once_with(data, short_names=False)

    def test_falls_back_to_configured_projects_dir(self, tmp_path):
        with patch.dict(os.environ, {"CLAUDE_PROJECTS_DIR": str(tmp_path)}), \
                patch("sys.argv", ["usage-tally", "--short-names", "--max-workers", "2"]), \
                patch("usage_tally.main.create_usage_aggregator") as mock_create, \
                patch("usage_tally.main.render_usage_table") as mock_render:
            mock_create.return_value.process.return_value = []

            assert main() == 0

        mock_create.assert_called_once_with(2)
        mock_create.return_value.process.assert_called_once_with(tmp_path)
        mock_render.assert_called_once_with([], short_names=True)

    def test_invalid_configuration_exits_with_error(self, caplog):
        with patch.dict(os.environ, {"MAX_WORKERS": "lots"}), \
                patch("sys.argv", ["usage-tally"]), \
                patch("usage_tally.main.create_usage_aggregator") as mock_create:
            assert main() == 1

        mock_create.assert_not_called()
        assert "Invalid configuration" in caplog.text

    def test_prints_table_for_real_logs(self, sample_projects, capsys):
        argv = ["usage-tally", "--projects-dir", str(sample_projects)]
        with patch.dict(os.environ, {"COLUMNS": "160"}), patch("sys.argv", argv):
            assert main() == 0

        out = capsys.readouterr().out
        assert "Usage Summary" in out
        assert "claude-opus-4-20250514" in out

    def test_prints_message_without_logs(self, projects_dir, capsys):
        with patch("sys.argv", ["usage-tally", "--projects-dir", str(projects_dir)]):
            assert main() == 0

        assert "No usage data to display." in capsys.readouterr().out
