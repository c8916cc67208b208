import os
import stat
from pathlib import Path

import structlog

from kubeplan.core.application.exceptions import GitInspectionError, RepoPathError
from kubeplan.core.application.ports import GitInspectionPort
from kubeplan.core.domain.plan import RepoInfo, Service

logger = structlog.get_logger()

PREFERRED_REMOTES = ("upstream", "origin")


class RepoMetadataResolver:
    """Best-effort lookup of the git repository a service was discovered in.

    A missing or unreadable path is the caller's mistake and raises
    RepoPathError. Anything else that goes wrong means "no repository" and
    is only logged.
    """

    def __init__(self, git: GitInspectionPort) -> None:
        self._git = git

    def resolve(self, path: str | Path) -> RepoInfo | None:
        directory = self._to_directory(Path(path))
        remote_name = self._pick_remote(directory)
        try:
            details = self._git.get_repo_details(directory, remote_name)
        except GitInspectionError as exc:
            logger.debug("No git repository found", path=str(directory), error=str(exc))
            return None

        url = ""
        if details.urls:
            url = details.urls[0]
        else:
            logger.debug("Git repository has no remote URL", path=str(directory), remote=remote_name)
        return RepoInfo(
            git_repo_dir=details.repo_root,
            git_repo_url=url,
            git_repo_branch=details.branch,
        )

    def gather_git_info(self, service: Service, path: str | Path) -> tuple[bool, Service]:
        """Returns whether a repository was found and the service carrying its metadata."""
        repo_info = self.resolve(path)
        if repo_info is None:
            return False, service
        return True, service.with_repo_info(repo_info)

    @staticmethod
    def _to_directory(path: Path) -> Path:
        try:
            is_dir = stat.S_ISDIR(path.stat().st_mode)
        except OSError as exc:
            logger.error("Failed to stat the path", path=str(path), error=str(exc))
            raise RepoPathError(
                f"Cannot read path '{path}': {exc}", context={"path": str(path)}
            ) from exc
        if not is_dir:
            logger.debug("Path is not a directory, using its parent", path=str(path))
            path = path.parent
        if not os.access(path, os.R_OK | os.X_OK):
            logger.error("Directory is not readable", path=str(path))
            raise RepoPathError(f"Cannot read directory '{path}'", context={"path": str(path)})
        return path

    def _pick_remote(self, directory: Path) -> str | None:
        try:
            remote_names = self._git.list_remote_names(directory)
        except GitInspectionError as exc:
            logger.debug("No remotes found", path=str(directory), error=str(exc))
            return None
        if not remote_names:
            logger.debug("No remotes found", path=str(directory))
            return None
        for preferred in PREFERRED_REMOTES:
            if preferred in remote_names:
                return preferred
        return remote_names[0]
