from kubeplan.core.domain.plan.entities import (
    Inputs,
    KubernetesOutput,
    Outputs,
    Plan,
    PlanSpec,
    RepoInfo,
    Service,
    TargetClusterType,
)
from kubeplan.core.domain.plan.value_objects import (
    DEFAULT_CLUSTER_TYPE,
    DEFAULT_PROJECT_NAME,
    PLAN_API_VERSION,
    PLAN_KIND,
    ArtifactPathMap,
    BuildArtifactType,
    ContainerBuildType,
    SourceArtifactType,
    SourceType,
    TargetInfoArtifactType,
    TranslationType,
)

__all__ = [
    "ArtifactPathMap",
    "BuildArtifactType",
    "ContainerBuildType",
    "DEFAULT_CLUSTER_TYPE",
    "DEFAULT_PROJECT_NAME",
    "Inputs",
    "KubernetesOutput",
    "Outputs",
    "PLAN_API_VERSION",
    "PLAN_KIND",
    "Plan",
    "PlanSpec",
    "RepoInfo",
    "Service",
    "SourceArtifactType",
    "SourceType",
    "TargetClusterType",
    "TargetInfoArtifactType",
    "TranslationType",
]
