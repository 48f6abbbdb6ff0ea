"""Safe subprocess wrapper for git operations.

This module provides a wrapper around the git CLI that:
- Never uses shell=True
- Rejects revision arguments that could be read as options
- Enforces timeouts on all operations
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import structlog

from patch_speller.utils.errors import GitCommandTimeoutError, GitError

log = structlog.get_logger()


@dataclass
class CommandResult:
    """Result of a git command execution."""

    stdout: str
    stderr: str
    return_code: int
    command: list[str]

    @property
    def success(self) -> bool:
        """Return True if the command succeeded."""
        return self.return_code == 0


class SafeGit:
    """Safe wrapper for the git commands the checker needs.

    Example:
        git = SafeGit(Path("."))
        diff_text = git.diff("origin/main")
    """

    DEFAULT_TIMEOUT = 60

    def __init__(
        self,
        repo_path: Path,
        git_path: str | None = None,
        default_timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the SafeGit wrapper.

        Args:
            repo_path: Working tree to run git in
            git_path: Path to the git binary. If None, uses PATH.
            default_timeout: Default timeout for commands in seconds.

        Raises:
            GitError: If git is not found.
        """
        resolved_path = git_path or shutil.which("git")
        if not resolved_path:
            raise GitError("git not found in PATH")

        self._git_path: str = resolved_path
        self._repo_path = repo_path
        self._default_timeout = default_timeout

    @staticmethod
    def _validate_revision(revision: str) -> None:
        if not revision or revision.startswith("-") or any(c.isspace() for c in revision):
            log.warning("invalid_revision_rejected", revision=revision)
            raise GitError(f"Invalid revision: {revision!r}")

    def _run_command(
        self,
        args: list[str],
        timeout: int | None = None,
        check: bool = True,
    ) -> CommandResult:
        """Run a git command.

        Args:
            args: Command arguments (without 'git' prefix).
            timeout: Timeout in seconds (uses default if None).
            check: If True, raise an exception on failure.

        Returns:
            CommandResult with stdout, stderr, and return code.

        Raises:
            GitCommandTimeoutError: If the command times out.
            GitError: If check=True and the command fails.
        """
        cmd = [self._git_path, *args]
        effective_timeout = timeout or self._default_timeout

        log.debug("executing_git_command", command=cmd, timeout=effective_timeout)

        try:
            proc = subprocess.run(
                cmd,
                cwd=self._repo_path,
                capture_output=True,
                text=True,
                timeout=effective_timeout,
                shell=False,
            )
        except subprocess.TimeoutExpired as e:
            log.error("command_timeout", command=cmd, timeout=effective_timeout)
            raise GitCommandTimeoutError(
                f"Command timed out after {effective_timeout}s: {cmd}"
            ) from e
        except OSError as e:
            raise GitError(f"Could not run {cmd}: {e}") from e

        result = CommandResult(
            stdout=proc.stdout,
            stderr=proc.stderr,
            return_code=proc.returncode,
            command=cmd,
        )

        if check and not result.success:
            raise GitError(f"Command failed: {result.stderr.strip() or result.stdout.strip()}")

        return result

    def diff(self, base: str, head: str | None = None) -> str:
        """Unified diff of the working tree (or head) against base.

        Args:
            base: Revision to compare against, e.g. "origin/main"
            head: Revision to compare to; the working tree when None

        Returns:
            Diff text without color codes

        Raises:
            GitError: If a revision is invalid or git fails
        """
        self._validate_revision(base)
        args = ["diff", "--no-color", "--no-ext-diff", "--unified=0", base]
        if head is not None:
            self._validate_revision(head)
            args.append(head)
        args.append("--")

        return self._run_command(args).stdout
