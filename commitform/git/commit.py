"""Commit creation.

Contains:
- build_commit_env: Environment recording the author identity and timestamp
- create_commit: Validate staging, format the message and create the commit
"""

import os
from datetime import datetime, timezone
from typing import Mapping, Optional

from commitform.author import Author
from commitform.exceptions import CommitFailedError, GitError, NoStagedChangesError
from commitform.git.repo import Repository
from commitform.git.runner import _run_git_command
from commitform.git.status import has_staged_changes
from commitform.message import CommitMessage, render_commit_message

# No hooks and no signing: the stored message is exactly the rendered body.
# verbatim keeps the trailing blank line of an empty description.
COMMIT_ARGS = [
    "-c", "core.hooksPath=/dev/null",
    "commit", "--no-gpg-sign", "--cleanup=verbatim", "--file=-",
]


def build_commit_env(
    author: Author,
    when: Optional[datetime] = None,
    base: Optional[Mapping[str, str]] = None,
) -> dict[str, str]:
    """Build the environment for ``git commit``.

    The author is recorded as both author and committer, stamped with ``when``.

    Args:
        author: The resolved author identity.
        when: Commit timestamp. Defaults to now.
        base: Environment to extend. Defaults to os.environ.

    Returns:
        A new environment dictionary.
    """
    when = when or datetime.now(timezone.utc).astimezone()
    stamp = when.isoformat(timespec="seconds")

    env = dict(os.environ if base is None else base)
    env.update({
        "GIT_AUTHOR_NAME": author.name,
        "GIT_AUTHOR_EMAIL": author.email,
        "GIT_AUTHOR_DATE": stamp,
        "GIT_COMMITTER_NAME": author.name,
        "GIT_COMMITTER_EMAIL": author.email,
        "GIT_COMMITTER_DATE": stamp,
    })
    return env


def create_commit(repo: Repository, author: Author, message: CommitMessage) -> str:
    """Commit the staged changes.

    Args:
        repo: The opened repository.
        author: Identity recorded on the commit.
        message: The composed commit message.

    Returns:
        The new commit hash.

    Raises:
        NoStagedChangesError: If nothing is staged. No commit is attempted.
        CommitFailedError: If git rejects the commit.
    """
    try:
        staged = has_staged_changes(repo)
    except GitError as e:
        raise CommitFailedError(f"failed to get status: {e}") from e
    if not staged:
        raise NoStagedChangesError("no files are staged")

    body = render_commit_message(message)
    env = build_commit_env(author)

    try:
        _run_git_command(
            COMMIT_ARGS,
            cwd=repo.root,
            input_text=body,
            env=env,
        )
        return _run_git_command(["rev-parse", "HEAD"], cwd=repo.root)
    except GitError as e:
        raise CommitFailedError(f"failed to commit: {e}") from e
