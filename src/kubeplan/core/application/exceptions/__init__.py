from kubeplan.core.application.exceptions.planning_exceptions import (
    AnalyzerExecutionError,
    ApplicationError,
    GitInspectionError,
    PlanFormatError,
    PlanNotFoundError,
    PlanningError,
    PlanPersistenceError,
    RepoPathError,
)

__all__ = [
    "AnalyzerExecutionError",
    "ApplicationError",
    "GitInspectionError",
    "PlanFormatError",
    "PlanNotFoundError",
    "PlanPersistenceError",
    "PlanningError",
    "RepoPathError",
]
