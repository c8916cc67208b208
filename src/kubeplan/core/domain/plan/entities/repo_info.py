from dataclasses import dataclass


@dataclass(frozen=True)
class RepoInfo:
    """Git metadata used when generating CI/CD pipelines for a service.

    All fields empty means no git repository was detected.
    """

    git_repo_dir: str = ""
    git_repo_url: str = ""
    git_repo_branch: str = ""
    target_path: str = ""

    def is_empty(self) -> bool:
        return self == RepoInfo()
