from enum import StrEnum


class SourceArtifactType(StrEnum):
    """Kind of file a source artifact path refers to."""

    KUBERNETES = "Kubernetes"
    KNATIVE = "Knative"
    COMPOSE = "DockerCompose"
    IMAGE_INFO = "ImageInfo"
    CF_MANIFEST = "CfManifest"
    CF_RUNNING_MANIFEST = "CfRunningManifest"
    SOURCE_CODE = "SourceCode"
    DOCKERFILE = "Dockerfile"


class BuildArtifactType(StrEnum):
    SOURCE_CODE = "SourceCode"


class TargetInfoArtifactType(StrEnum):
    K8S_CLUSTER = "KubernetesCluster"
