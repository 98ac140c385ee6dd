"""Repository discovery and opening.

Contains:
- Repository: Handle to an opened git repository
- find_repo_root: Walk upward from a directory to the nearest repository root
- open_repository: Open the repository at a given root
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from commitform.exceptions import GitError, RepositoryNotFoundError, RepositoryOpenError
from commitform.git.runner import _run_git_command

GIT_DIR_NAME = ".git"


@dataclass(frozen=True)
class Repository:
    """Handle to an opened git repository."""

    root: Path
    git_dir: Path

    @property
    def config_path(self) -> Path:
        """Path to the repository-local configuration store."""
        return self.git_dir / "config"


def find_repo_root(start: Optional[Path] = None) -> Path:
    """Find the root of the git repository containing a directory.

    Walks upward from ``start`` until a directory containing a ``.git``
    directory is found.

    Args:
        start: Directory to start from. Defaults to the current working directory.

    Returns:
        Path to the repository root.

    Raises:
        RepositoryNotFoundError: If the filesystem root is reached without a match.
    """
    if start is None:
        try:
            start = Path(os.getcwd())
        except OSError as e:
            raise RepositoryNotFoundError(f"failed to get current directory: {e}") from e

    directory = Path(os.path.abspath(start))
    while True:
        if (directory / GIT_DIR_NAME).is_dir():
            return directory

        parent = directory.parent
        if parent == directory:
            raise RepositoryNotFoundError("git repository not found")
        directory = parent


def open_repository(root: Path) -> Repository:
    """Open the git repository located at ``root``.

    Args:
        root: The repository root, as returned by find_repo_root.

    Returns:
        The opened Repository.

    Raises:
        RepositoryOpenError: If git does not accept the directory as a repository.
    """
    try:
        git_dir = _run_git_command(["rev-parse", "--git-dir"], cwd=root)
    except GitError as e:
        raise RepositoryOpenError(f"failed to open repository at {root}: {e}") from e

    git_dir_path = Path(git_dir)
    if not git_dir_path.is_absolute():
        git_dir_path = root / git_dir_path
    return Repository(root=root, git_dir=git_dir_path)
