"""Planning exception hierarchy.

Every failure a planning run can surface is raised from this tree so callers
can tell caller-input mistakes from collaborator failures without
string-matching. Merging and plan assembly never raise.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application-layer errors in kubeplan."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class PlanningError(ApplicationError):
    """Raised when a planning run cannot complete."""


class RepoPathError(PlanningError):
    """The path handed to git metadata resolution does not exist or cannot be read."""


class GitInspectionError(PlanningError):
    """Git plumbing failed: not a repository, git missing, or the command timed out.

    The metadata resolver treats this as "no repository found".
    """


class AnalyzerExecutionError(PlanningError):
    """A source analyzer raised while discovering services."""


class PlanPersistenceError(ApplicationError):
    """Base for plan file read/write failures."""


class PlanNotFoundError(PlanPersistenceError):
    pass


class PlanFormatError(PlanPersistenceError):
    """The plan file is not valid YAML or does not match the plan schema."""
