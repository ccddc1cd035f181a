"""Unit tests for shell execution utilities."""

from unittest.mock import MagicMock, patch

import pytest
from nvmprune.utils.shell import CommandResult, command_exists, run_command


class TestRunCommand:
    """Tests for run_command function."""

    @patch("nvmprune.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        """run_command returns captured stdout, stderr and exit code."""
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=3)

        result = run_command(["nvm", "ls"])

        assert result == CommandResult(stdout="out", stderr="err", returncode=3)
        assert result.success is False
        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True

    @patch("nvmprune.utils.shell.subprocess.run")
    def test_no_env_inherits(self, mock_run: MagicMock) -> None:
        """Without extra env the child inherits the environment."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["node", "-v"])

        assert mock_run.call_args.kwargs["env"] is None

    @patch("nvmprune.utils.shell.subprocess.run")
    def test_merges_env(self, mock_run: MagicMock) -> None:
        """Extra env is merged over the current environment."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["npm", "ls"], env={"NVM_DIR": "/tmp/nvm"})

        call_env = mock_run.call_args.kwargs["env"]
        assert call_env["NVM_DIR"] == "/tmp/nvm"
        assert "PATH" in call_env

    def test_raises_file_not_found(self) -> None:
        """run_command raises FileNotFoundError for missing commands."""
        with pytest.raises(FileNotFoundError):
            run_command(["nonexistent_command_xyz_12345"])


class TestCommandExists:
    """Tests for command_exists function."""

    def test_existing_command(self) -> None:
        """command_exists finds commands on PATH."""
        with patch("nvmprune.utils.shell.shutil.which", return_value="/usr/bin/bash"):
            assert command_exists("bash") is True

    def test_missing_command(self) -> None:
        """command_exists returns False for unknown commands."""
        with patch("nvmprune.utils.shell.shutil.which", return_value=None):
            assert command_exists("brew") is False
