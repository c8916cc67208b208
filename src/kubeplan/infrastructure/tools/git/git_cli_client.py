import subprocess
from pathlib import Path

import structlog

from kubeplan.core.application.exceptions import GitInspectionError
from kubeplan.core.application.ports import GitInspectionPort, GitRepoDetails
from kubeplan.infrastructure.configuration import PlannerSettings

logger = structlog.get_logger()


class GitCliClient(GitInspectionPort):
    """GitInspectionPort backed by the ``git`` executable."""

    def __init__(self, git_binary: str = "git", timeout_seconds: float = 10.0) -> None:
        self._git_binary = git_binary
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: PlannerSettings) -> "GitCliClient":
        return cls(git_binary=settings.git_binary, timeout_seconds=settings.git_timeout_seconds)

    def list_remote_names(self, path: Path) -> list[str]:
        output = self._run(path, "remote")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def get_repo_details(self, path: Path, remote_name: str | None) -> GitRepoDetails:
        repo_root = self._run(path, "rev-parse", "--show-toplevel").strip()
        return GitRepoDetails(
            repo_root=repo_root,
            branch=self._current_branch(path),
            urls=self._remote_urls(path, remote_name),
        )

    def _current_branch(self, path: Path) -> str:
        # symbolic-ref exits non-zero on a detached HEAD
        try:
            return self._run(path, "symbolic-ref", "--short", "-q", "HEAD").strip()
        except GitInspectionError:
            logger.debug("HEAD is detached or unknown", path=str(path))
            return ""

    def _remote_urls(self, path: Path, remote_name: str | None) -> list[str]:
        if not remote_name:
            return []
        try:
            output = self._run(path, "remote", "get-url", "--all", remote_name)
        except GitInspectionError:
            logger.debug("Remote has no URLs", path=str(path), remote=remote_name)
            return []
        return [line.strip() for line in output.splitlines() if line.strip()]

    def _run(self, path: Path, *args: str) -> str:
        cmd = [self._git_binary, "-C", str(path), *args]
        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._timeout_seconds,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GitInspectionError(
                f"git executable '{self._git_binary}' not found",
                context={"command": cmd},
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise GitInspectionError(
                f"git timed out after {self._timeout_seconds}s",
                context={"command": cmd},
            ) from exc

        if completed.returncode != 0:
            raise GitInspectionError(
                completed.stderr.strip() or f"git exited with {completed.returncode}",
                context={"command": cmd, "returncode": completed.returncode},
            )
        return completed.stdout
