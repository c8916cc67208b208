from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class GitRepoDetails:
    repo_root: str
    branch: str = ""
    urls: list[str] = field(default_factory=list)


class GitInspectionPort(ABC):
    """Read-only view of the git repository enclosing a directory."""

    @abstractmethod
    def list_remote_names(self, path: Path) -> list[str]:
        """Names of the remotes configured for the repository at ``path``.

        Raises GitInspectionError when ``path`` is not inside a repository.
        """

    @abstractmethod
    def get_repo_details(self, path: Path, remote_name: str | None) -> GitRepoDetails:
        """Repository root, current branch and the URLs of ``remote_name``.

        The branch is empty on a detached HEAD. The URL list is empty when
        ``remote_name`` is None or unknown. Raises GitInspectionError when
        ``path`` is not inside a repository.
        """
