from kubeplan.core.domain.plan.value_objects.artifact_path_map import ArtifactPathMap
from kubeplan.core.domain.plan.value_objects.artifact_types import (
    BuildArtifactType,
    SourceArtifactType,
    TargetInfoArtifactType,
)
from kubeplan.core.domain.plan.value_objects.container_build_type import ContainerBuildType
from kubeplan.core.domain.plan.value_objects.plan_constants import (
    DEFAULT_CLUSTER_TYPE,
    DEFAULT_PROJECT_NAME,
    PLAN_API_VERSION,
    PLAN_KIND,
)
from kubeplan.core.domain.plan.value_objects.source_type import SourceType
from kubeplan.core.domain.plan.value_objects.translation_type import TranslationType

__all__ = [
    "ArtifactPathMap",
    "BuildArtifactType",
    "ContainerBuildType",
    "DEFAULT_CLUSTER_TYPE",
    "DEFAULT_PROJECT_NAME",
    "PLAN_API_VERSION",
    "PLAN_KIND",
    "SourceArtifactType",
    "SourceType",
    "TargetInfoArtifactType",
    "TranslationType",
]
