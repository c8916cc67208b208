from kubeplan.core.application.services.plan_assembly_service import (
    AssemblyReport,
    add_services_to_plan,
    apply_output_layers,
)
from kubeplan.core.application.services.planning_session import PlanningSession
from kubeplan.core.application.services.repo_metadata_resolver import RepoMetadataResolver
from kubeplan.core.application.services.service_merge_service import is_same_service, try_merge

__all__ = [
    "AssemblyReport",
    "PlanningSession",
    "RepoMetadataResolver",
    "add_services_to_plan",
    "apply_output_layers",
    "is_same_service",
    "try_merge",
]
