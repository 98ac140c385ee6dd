"""End-to-end commit flow.

Runs the pipeline:
1. find_repo_root / open_repository
2. resolve_author
3. the interactive form
4. create_commit

and reports a single Outcome: Committed, Cancelled or Failed.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from commitform.author import resolve_author
from commitform.exceptions import CommitFormError
from commitform.git.commit import create_commit
from commitform.git.repo import find_repo_root, open_repository
from commitform.message import CommitMessage


@dataclass(frozen=True)
class Committed:
    """A commit was created."""

    commit_id: str


@dataclass(frozen=True)
class Cancelled:
    """The user quit the form. Not an error."""


@dataclass(frozen=True)
class Failed:
    """The flow stopped on an error."""

    error: CommitFormError


Outcome = Union[Committed, Cancelled, Failed]


def run_commit_flow(
    compose: Callable[[], Optional[CommitMessage]],
    start: Optional[Path] = None,
    report: Optional[Callable[[str], None]] = None,
) -> Outcome:
    """Run the commit pipeline once.

    Args:
        compose: Runs the commit form; returns the message, or None on quit.
        start: Directory to search for the repository from. Defaults to the cwd.
        report: Receives progress notes, if given.

    Returns:
        The Outcome of the run.
    """
    note = report or (lambda _msg: None)

    try:
        root = find_repo_root(start)
        repo = open_repository(root)
        note(f"Repository: {repo.root}")

        author = resolve_author(repo)
        note(f"Author: {author}")

        message = compose()
        if message is None:
            return Cancelled()

        commit_id = create_commit(repo, author, message)
    except CommitFormError as e:
        return Failed(e)

    return Committed(commit_id)
