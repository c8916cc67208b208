from kubeplan.core.domain.plan.entities.kubernetes_output import KubernetesOutput, TargetClusterType
from kubeplan.core.domain.plan.entities.plan import Inputs, Outputs, Plan, PlanSpec
from kubeplan.core.domain.plan.entities.repo_info import RepoInfo
from kubeplan.core.domain.plan.entities.service import Service

__all__ = [
    "Inputs",
    "KubernetesOutput",
    "Outputs",
    "Plan",
    "PlanSpec",
    "RepoInfo",
    "Service",
    "TargetClusterType",
]
