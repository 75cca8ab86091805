"""Tests for git/repository.py."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from reltag.core.result import Err, Ok
from reltag.git.repository import Repository


def make_completed_process(returncode: int = 0) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["git"], returncode=returncode)


class TestRepository:
    @patch("subprocess.run")
    def test_create_annotated_tag(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process()

        result = Repository(tmp_path).create_annotated_tag("v0.1.4", "Release version 0.1.4")

        assert result == Ok(None)
        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "tag", "-a", "v0.1.4", "-m", "Release version 0.1.4"]
        assert kwargs["cwd"] == str(tmp_path)

    @patch("subprocess.run")
    def test_push_tag(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process()

        result = Repository(tmp_path).push_tag("origin", "v0.1.4")

        assert result == Ok(None)
        assert mock_run.call_args[0][0] == ["git", "push", "origin", "v0.1.4"]

    @patch("subprocess.run")
    def test_tag_already_exists_reports_git_status(
        self, mock_run: MagicMock, tmp_path: Path
    ) -> None:
        mock_run.return_value = make_completed_process(returncode=128)

        result = Repository(tmp_path).create_annotated_tag("v0.1.4", "Release version 0.1.4")

        assert isinstance(result, Err)
        assert result.error.returncode == 128

    @patch("subprocess.run", side_effect=FileNotFoundError("git"))
    def test_git_missing(self, _mock_run: MagicMock, tmp_path: Path) -> None:
        result = Repository(tmp_path).push_tag("origin", "v1.0.0")

        assert isinstance(result, Err)
        assert result.error.not_started is True
