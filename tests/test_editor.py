"""Tests for the editor adapter."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from standup_md.adapters.editor import SubprocessEditor, resolve_editor
from standup_md.config import Config


class TestResolveEditor:
    def test_prefers_config(self):
        assert resolve_editor(Config(editor="nano"), {"VISUAL": "code", "EDITOR": "vi"}) == "nano"

    def test_visual_before_editor(self):
        assert resolve_editor(Config(), {"VISUAL": "code", "EDITOR": "vi"}) == "code"

    def test_editor_env(self):
        assert resolve_editor(Config(), {"EDITOR": "vi"}) == "vi"

    def test_defaults_to_vim(self):
        assert resolve_editor(Config(), {}) == "vim"


class TestSubprocessEditor:
    @patch("standup_md.adapters.editor.subprocess.run")
    def test_runs_command_with_path(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0)
        SubprocessEditor("code --wait").open(Path("/tmp/2024_01.md"))
        mock_run.assert_called_once_with(["code", "--wait", "/tmp/2024_01.md"])

    @patch("standup_md.adapters.editor.subprocess.run")
    def test_nonzero_exit(self, mock_run):
        mock_run.return_value = MagicMock(returncode=2)
        with pytest.raises(RuntimeError, match="status 2"):
            SubprocessEditor("vim").open(Path("/tmp/x.md"))

    @patch("standup_md.adapters.editor.subprocess.run", side_effect=FileNotFoundError)
    def test_missing_binary(self, mock_run):
        with pytest.raises(RuntimeError, match="Editor not found"):
            SubprocessEditor("nosuch-editor").open(Path("/tmp/x.md"))
