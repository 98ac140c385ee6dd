"""Git command runner.

Contains:
- _run_git_command: Run a git command inside a repository and return its output
"""

import subprocess
from pathlib import Path
from typing import Mapping, Optional

from commitform.exceptions import GitError


def _run_git_command(
    args: list[str],
    cwd: Optional[Path] = None,
    input_text: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    strip: bool = True,
) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in. Defaults to the current directory.
        input_text: Text fed to git's stdin, if any.
        env: Full environment for the git process. Inherited when None.
        strip: Strip surrounding whitespace from the output. Porcelain
            formats need leading spaces kept.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=str(cwd) if cwd is not None else None,
            input=input_text,
            env=dict(env) if env is not None else None,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip() if strip else result.stdout
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or e.stdout or "").strip()
        raise GitError(f"git {' '.join(args)} failed: {detail}") from e
    except FileNotFoundError as e:
        raise GitError("Git is not installed or not in PATH.") from e
