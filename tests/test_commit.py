"""Tests for commitform.git.commit module."""

import subprocess
from datetime import datetime, timezone

import pytest

from commitform.author import Author
from commitform.exceptions import CommitFailedError, NoStagedChangesError
from commitform.git.commit import build_commit_env, create_commit
from commitform.git.repo import open_repository
from commitform.message import CommitMessage


AUTHOR = Author(name="Jane Doe", email="jane@example.com")


def _subcommand(cmd):
    """Return the git subcommand, skipping "-c key=value" options."""
    args = cmd[1:]
    while args[0] == "-c":
        args = args[2:]
    return args[0]


def _fake_git(responses, calls):
    """Build a subprocess.run side effect answering by git subcommand."""
    def run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        response = responses[_subcommand(cmd)]
        if isinstance(response, Exception):
            raise response
        result = subprocess.CompletedProcess(cmd, 0)
        result.stdout = response
        result.stderr = ""
        return result
    return run


class TestBuildCommitEnv:
    """Tests for build_commit_env function."""

    def test_sets_author_and_committer(self):
        """Test that the identity is recorded as author and committer."""
        when = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

        env = build_commit_env(AUTHOR, when=when, base={"PATH": "/usr/bin"})

        assert env["PATH"] == "/usr/bin"
        assert env["GIT_AUTHOR_NAME"] == "Jane Doe"
        assert env["GIT_AUTHOR_EMAIL"] == "jane@example.com"
        assert env["GIT_COMMITTER_NAME"] == "Jane Doe"
        assert env["GIT_COMMITTER_EMAIL"] == "jane@example.com"
        assert env["GIT_AUTHOR_DATE"] == "2024-05-01T12:30:00+00:00"
        assert env["GIT_COMMITTER_DATE"] == env["GIT_AUTHOR_DATE"]

    def test_does_not_modify_base(self):
        """Test that the base mapping is copied."""
        base = {"PATH": "/usr/bin"}

        build_commit_env(AUTHOR, base=base)

        assert base == {"PATH": "/usr/bin"}

    def test_defaults_to_now(self):
        """Test that a timestamp is filled in when none is given."""
        env = build_commit_env(AUTHOR, base={})

        stamp = datetime.fromisoformat(env["GIT_AUTHOR_DATE"])
        assert abs((datetime.now(timezone.utc) - stamp).total_seconds()) < 60


class TestCreateCommit:
    """Tests for create_commit function."""

    def test_no_staged_changes(self, mocker, mock_repo):
        """Test that nothing staged raises and no commit is attempted."""
        calls = []
        mocker.patch("subprocess.run", side_effect=_fake_git({"status": "?? new.py\n"}, calls))

        with pytest.raises(NoStagedChangesError) as exc_info:
            create_commit(mock_repo, AUTHOR, CommitMessage(prefix="feat", summary="x"))

        assert "no files are staged" in str(exc_info.value)
        assert [_subcommand(cmd) for cmd, _ in calls] == ["status"]

    def test_commits_formatted_message(self, mocker, mock_repo):
        """Test the message body, identity and returned hash."""
        calls = []
        responses = {"status": "A  x.py\n", "commit": "", "rev-parse": "abc123\n"}
        mocker.patch("subprocess.run", side_effect=_fake_git(responses, calls))

        message = CommitMessage(prefix="fix", summary="handle empty input", description="Line one\nLine two")
        commit_id = create_commit(mock_repo, AUTHOR, message)

        assert commit_id == "abc123"
        commit_cmd, commit_kwargs = calls[1]
        assert commit_cmd == [
            "git", "-c", "core.hooksPath=/dev/null",
            "commit", "--no-gpg-sign", "--cleanup=verbatim", "--file=-",
        ]
        assert commit_kwargs["input"] == "fix: handle empty input\n\nLine one\nLine two"
        assert commit_kwargs["cwd"] == str(mock_repo.root)
        assert commit_kwargs["env"]["GIT_AUTHOR_NAME"] == "Jane Doe"
        assert commit_kwargs["env"]["GIT_AUTHOR_EMAIL"] == "jane@example.com"
        assert calls[2][0] == ["git", "rev-parse", "HEAD"]

    def test_engine_rejection_raises_commit_failed(self, mocker, mock_repo):
        """Test that git refusing the commit raises CommitFailedError."""
        calls = []
        responses = {
            "status": "M  x.py\n",
            "commit": subprocess.CalledProcessError(1, "git", stderr="hook rejected"),
        }
        mocker.patch("subprocess.run", side_effect=_fake_git(responses, calls))

        with pytest.raises(CommitFailedError) as exc_info:
            create_commit(mock_repo, AUTHOR, CommitMessage(prefix="feat", summary="x"))

        assert "failed to commit" in str(exc_info.value)
        assert "hook rejected" in str(exc_info.value)

    def test_status_failure_raises_commit_failed(self, mocker, mock_repo):
        """Test that an unreadable status is reported as a failed commit."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="index corrupt"),
        )

        with pytest.raises(CommitFailedError) as exc_info:
            create_commit(mock_repo, AUTHOR, CommitMessage(prefix="feat", summary="x"))

        assert "failed to get status" in str(exc_info.value)


class TestCreateCommitRealRepository:
    """Commit scenarios against a real git repository."""

    def test_empty_repository_has_nothing_staged(self, git_repo):
        """Test that an empty repository reports no staged changes."""
        repo = open_repository(git_repo)

        with pytest.raises(NoStagedChangesError):
            create_commit(repo, AUTHOR, CommitMessage(prefix="feat", summary="add x"))

    def test_commit_with_default_prefix(self, git_repo):
        """Test committing one staged file with an empty description."""
        (git_repo / "x.txt").write_text("x\n")
        subprocess.run(["git", "add", "x.txt"], cwd=git_repo, check=True)
        repo = open_repository(git_repo)

        commit_id = create_commit(repo, AUTHOR, CommitMessage(prefix="feat", summary="add x"))

        assert commit_id
        body = subprocess.run(
            ["git", "log", "-1", "--format=%B"],
            cwd=git_repo, capture_output=True, text=True, check=True,
        ).stdout
        assert body.startswith("feat: add x\n\n")
        head = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=git_repo, capture_output=True, text=True, check=True,
        ).stdout.strip()
        assert head == commit_id
        identity = subprocess.run(
            ["git", "log", "-1", "--format=%an <%ae>"],
            cwd=git_repo, capture_output=True, text=True, check=True,
        ).stdout.strip()
        assert identity == "Jane Doe <jane@example.com>"

    def test_raw_message_is_exact(self, git_repo):
        """Test that the stored message is byte-for-byte the rendered body."""
        (git_repo / "y.txt").write_text("y\n")
        subprocess.run(["git", "add", "y.txt"], cwd=git_repo, check=True)
        repo = open_repository(git_repo)

        create_commit(repo, AUTHOR, CommitMessage(prefix="feat", summary="add x"))

        raw = subprocess.run(
            ["git", "cat-file", "commit", "HEAD"],
            cwd=git_repo, capture_output=True, text=True, check=True,
        ).stdout
        assert raw.split("\n\n", 1)[1] == "feat: add x\n\n"

    def test_commit_msg_hook_does_not_rewrite_message(self, git_repo):
        """Test that repository hooks cannot alter the stored message."""
        hook = git_repo / ".git" / "hooks" / "commit-msg"
        hook.parent.mkdir(exist_ok=True)
        hook.write_text('#!/bin/sh\necho "Change-Id: I123" >> "$1"\n')
        hook.chmod(0o755)
        (git_repo / "z.txt").write_text("z\n")
        subprocess.run(["git", "add", "z.txt"], cwd=git_repo, check=True)
        repo = open_repository(git_repo)

        create_commit(repo, AUTHOR, CommitMessage(prefix="feat", summary="add x"))

        raw = subprocess.run(
            ["git", "cat-file", "commit", "HEAD"],
            cwd=git_repo, capture_output=True, text=True, check=True,
        ).stdout
        assert raw.split("\n\n", 1)[1] == "feat: add x\n\n"

    def test_gpgsign_config_is_ignored(self, git_repo):
        """Test that commit.gpgsign does not make the commit signed or fail."""
        subprocess.run(["git", "config", "commit.gpgsign", "true"], cwd=git_repo, check=True)
        subprocess.run(["git", "config", "gpg.program", "false"], cwd=git_repo, check=True)
        (git_repo / "s.txt").write_text("s\n")
        subprocess.run(["git", "add", "s.txt"], cwd=git_repo, check=True)
        repo = open_repository(git_repo)

        create_commit(repo, AUTHOR, CommitMessage(prefix="chore", summary="unsigned"))

        raw = subprocess.run(
            ["git", "cat-file", "commit", "HEAD"],
            cwd=git_repo, capture_output=True, text=True, check=True,
        ).stdout
        assert "gpgsig" not in raw
        assert raw.split("\n\n", 1)[1] == "chore: unsigned\n\n"
