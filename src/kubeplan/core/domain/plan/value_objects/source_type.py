from enum import StrEnum


class SourceType(StrEnum):
    COMPOSE = "DockerCompose"
    DIRECTORY = "Directory"
    CF_MANIFEST = "CfManifest"
    KNATIVE = "Knative"
    KUBERNETES = "Kubernetes"
    DOCKERFILE = "Dockerfile"
