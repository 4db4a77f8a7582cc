"""Git repository initialization for freshly scaffolded projects."""

from __future__ import annotations

import asyncio
from pathlib import Path


class GitError(Exception):
    """Raised when a git command cannot be run or fails."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


async def _run_git(
    *args: str,
    cwd: str | Path | None = None,
    timeout: float | None = None,
) -> tuple[str, str]:
    """Run a git command asynchronously and return (stdout, stderr).

    Raises GitError if git cannot be started, exits non-zero, or runs past
    *timeout* seconds.  ``timeout=None`` waits indefinitely.
    """
    cmd = ["git"] + list(args)
    cmd_str = " ".join(cmd)

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd else None,
        )
    except OSError as exc:
        # Missing git executable or missing working directory.
        raise GitError(f"Could not run {cmd_str}: {exc}", command=cmd_str) from exc

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        raise GitError(
            f"Git command timed out after {timeout}s: {cmd_str}",
            command=cmd_str,
        ) from None

    stdout = stdout_bytes.decode("utf-8", errors="replace").strip()
    stderr = stderr_bytes.decode("utf-8", errors="replace").strip()

    if process.returncode != 0:
        raise GitError(
            f"Git command failed (exit {process.returncode}): {cmd_str}\n{stderr}",
            command=cmd_str,
            stderr=stderr,
        )

    return stdout, stderr


async def init_repository(directory: str | Path, timeout: float | None = None) -> str:
    """Run ``git init`` inside *directory*.

    The directory must already exist.  Returns git's stdout.

    Raises:
        GitError: If git is unavailable or the init fails.
    """
    stdout, _ = await _run_git("init", cwd=directory, timeout=timeout)
    return stdout
