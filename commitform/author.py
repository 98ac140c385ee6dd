"""Author identity resolution.

Resolves the commit author from git configuration:
- <git_dir>/config: repository-local store, used when it has both name and email
- ~/.gitconfig: global store, used otherwise

Local and global values are never merged.
"""

import configparser
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from commitform.exceptions import AuthorConfigError
from commitform.git.repo import Repository

GLOBAL_CONFIG_NAME = ".gitconfig"


class Author(BaseModel):
    """Name and email recorded on the commit."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str

    @field_validator("name", "email")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        """Ensure neither field is blank."""
        if not v or not v.strip():
            raise ValueError("cannot be empty")
        return v

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


def get_global_config_path() -> Path:
    """Get path to the global git configuration file.

    Returns:
        Path to ~/.gitconfig

    Raises:
        AuthorConfigError: If the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise AuthorConfigError(f"failed to get home directory: {e}") from e
    return home / GLOBAL_CONFIG_NAME


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def read_git_config(path: Path) -> configparser.ConfigParser:
    """Parse a git configuration file.

    Args:
        path: Path to the file.

    Returns:
        The parsed configuration.

    Raises:
        OSError: If the file cannot be read.
        configparser.Error: If the file is not in section/key format or not UTF-8.
    """
    parser = configparser.ConfigParser(
        strict=False,
        allow_no_value=True,
        interpolation=None,
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=("#", ";"),
    )
    try:
        with open(path, "r", encoding="utf-8") as f:
            parser.read_file(f, source=str(path))
    except UnicodeDecodeError as e:
        raise configparser.Error(f"{path} is not valid UTF-8: {e}") from e
    return parser


def _user_field(parser: configparser.ConfigParser, key: str) -> str:
    if not parser.has_section("user"):
        return ""
    return _unquote(parser.get("user", key, fallback="") or "")


def load_local_author(repo: Repository) -> Optional[Author]:
    """Load the author from the repository-local configuration.

    Args:
        repo: The opened repository.

    Returns:
        The Author if both name and email are set locally, None otherwise.
    """
    try:
        parser = read_git_config(repo.config_path)
    except (OSError, configparser.Error):
        return None

    name = _user_field(parser, "name")
    email = _user_field(parser, "email")
    if not name.strip() or not email.strip():
        return None
    return Author(name=name, email=email)


def load_global_author() -> Author:
    """Load the author from the [user] section of ~/.gitconfig.

    Returns:
        The global Author.

    Raises:
        AuthorConfigError: If the file, the section, or either key is missing.
    """
    path = get_global_config_path()
    try:
        parser = read_git_config(path)
    except (OSError, configparser.Error) as e:
        raise AuthorConfigError(f"failed to load global config file: {e}") from e

    if not parser.has_section("user"):
        raise AuthorConfigError(f"failed to get [user] section from {path}")
    if not parser.has_option("user", "name"):
        raise AuthorConfigError(f"failed to get user.name key from {path}")
    if not parser.has_option("user", "email"):
        raise AuthorConfigError(f"failed to get user.email key from {path}")

    try:
        return Author(name=_user_field(parser, "name"), email=_user_field(parser, "email"))
    except ValidationError as e:
        raise AuthorConfigError(f"user.name and user.email must not be empty in {path}") from e


def resolve_author(repo: Repository) -> Author:
    """Resolve the commit author, preferring the repository configuration.

    Args:
        repo: The opened repository.

    Returns:
        The resolved Author.

    Raises:
        AuthorConfigError: If neither store provides a complete identity.
    """
    author = load_local_author(repo)
    if author is not None:
        return author
    return load_global_author()
