"""Commit message model and rendering."""

from pydantic import BaseModel, ConfigDict, field_validator

# Conventional commit prefixes offered by the form, in display order
PREFIX_OPTIONS = ("feat", "fix", "refactor", "test", "style", "chore", "docs")

SUMMARY_MAX_LENGTH = 100


class CommitMessage(BaseModel):
    """Pydantic model for a composed commit message.

    Attributes:
        prefix: One of PREFIX_OPTIONS.
        summary: Single-line summary, at most SUMMARY_MAX_LENGTH characters.
        description: Free-form multi-line body. May be empty.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str
    summary: str
    description: str = ""

    @field_validator("prefix")
    @classmethod
    def prefix_must_be_known(cls, v: str) -> str:
        """Ensure the prefix belongs to the fixed vocabulary."""
        if v not in PREFIX_OPTIONS:
            raise ValueError(f"Prefix must be one of: {', '.join(PREFIX_OPTIONS)}")
        return v

    @field_validator("summary")
    @classmethod
    def summary_must_fit_one_line(cls, v: str) -> str:
        """Ensure the summary is a single bounded line."""
        if "\n" in v or "\r" in v:
            raise ValueError("Summary must be a single line")
        if len(v) > SUMMARY_MAX_LENGTH:
            raise ValueError(f"Summary cannot exceed {SUMMARY_MAX_LENGTH} characters")
        return v


def render_commit_message(message: CommitMessage) -> str:
    """Render a CommitMessage into the commit body handed to git.

    Args:
        message: The composed commit message.

    Returns:
        The message as "<prefix>: <summary>", a blank line, then the description.

    Example output:
        feat: add user authentication

        Login and logout endpoints backed by sessions.
    """
    return f"{message.prefix}: {message.summary}\n\n{message.description}"
