"""Shared test fixtures and configuration."""

import shutil
import subprocess
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from commitform.git.repo import Repository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def mock_repo(mock_repo_root):
    """Repository handle for the mock repository."""
    return Repository(root=mock_repo_root, git_dir=mock_repo_root / ".git")


@pytest.fixture
def fake_home(temp_dir, monkeypatch):
    """Point the home directory at an empty temporary folder."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def git_result():
    """Build a completed-process stand-in for subprocess.run."""
    def _make(stdout="", returncode=0):
        result = MagicMock()
        result.stdout = stdout
        result.returncode = returncode
        return result
    return _make


@pytest.fixture
def git_repo(temp_dir, fake_home, monkeypatch):
    """Create a real, empty git repository. Skipped when git is unavailable."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    root = temp_dir / "repo"
    root.mkdir()
    subprocess.run(["git", "init", "-q"], cwd=root, check=True)
    return root
