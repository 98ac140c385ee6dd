"""Exception classes for commitform.

Contains:
- CommitFormError: Base exception for every failure reported to the user
- GitError: Base exception for repository and git engine failures
- RepositoryNotFoundError: No repository above the working directory
- RepositoryOpenError: The repository exists but cannot be opened
- NoStagedChangesError: Nothing is staged for commit
- CommitFailedError: The git engine rejected the commit
- AuthorConfigError: No usable author identity in local or global config
- TerminalError: The composer could not drive the terminal
- SettingsError: The settings file is unreadable or invalid
"""


class CommitFormError(Exception):
    """Base exception for commitform errors."""

    pass


class GitError(CommitFormError):
    """Custom exception for git-related errors."""

    pass


class RepositoryNotFoundError(GitError):
    """Raised when no git repository is found above the working directory."""

    pass


class RepositoryOpenError(GitError):
    """Raised when the repository root cannot be opened."""

    pass


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass


class CommitFailedError(GitError):
    """Raised when git refuses to create the commit."""

    pass


class AuthorConfigError(CommitFormError):
    """Raised when the author name or email cannot be resolved."""

    pass


class TerminalError(CommitFormError):
    """Raised when the interactive form cannot read from the terminal."""

    pass


class SettingsError(CommitFormError):
    """Raised when there's an error with the settings file."""

    pass
