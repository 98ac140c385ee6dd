"""Git access for commitform.

This package provides:
- runner: _run_git_command
- repo: Repository, find_repo_root, open_repository
- status: get_status, get_staged_files, has_staged_changes
- commit: build_commit_env, create_commit (import from commitform.git.commit;
  it depends on commitform.author, which depends on this package)
"""

from commitform.git.runner import _run_git_command
from commitform.git.repo import Repository, find_repo_root, open_repository
from commitform.git.status import get_status, get_staged_files, has_staged_changes


__all__ = [
    "_run_git_command",
    "Repository",
    "find_repo_root",
    "open_repository",
    "get_status",
    "get_staged_files",
    "has_staged_changes",
]
