"""Git status utilities.

Contains:
- get_status: Get git status output in porcelain format
- get_staged_files: List paths whose index state is not unmodified
- has_staged_changes: Whether anything is staged for the next commit
"""

from commitform.git.repo import Repository
from commitform.git.runner import _run_git_command

# Index column values that do not mean "staged"
_UNSTAGED_MARKERS = (" ", "?", "!")


def get_status(repo: Repository) -> str:
    """Get git status output in porcelain format.

    Args:
        repo: The repository to inspect.

    Returns:
        The git status output.
    """
    return _run_git_command(["status", "--porcelain=v1"], cwd=repo.root, strip=False)


def get_staged_files(repo: Repository) -> list[str]:
    """Get the paths that are staged for commit.

    The porcelain format uses two columns:
    - First column: staged status (index)
    - Second column: worktree status

    Only lines where the first column indicates a staged change are kept.

    Args:
        repo: The repository to inspect.

    Returns:
        List of staged file paths, in status order.
    """
    staged = []
    for line in get_status(repo).split("\n"):
        # Shortest valid line is "XY <path>"
        if len(line) < 4:
            continue
        if line[0] in _UNSTAGED_MARKERS:
            continue
        path = line[3:]
        # Renames are reported as "old -> new"
        if " -> " in path:
            path = path.split(" -> ", 1)[1]
        staged.append(path)
    return staged


def has_staged_changes(repo: Repository) -> bool:
    """Check whether at least one path is staged."""
    return bool(get_staged_files(repo))
