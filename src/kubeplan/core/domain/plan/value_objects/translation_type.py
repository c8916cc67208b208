from enum import StrEnum


class TranslationType(StrEnum):
    """Source platform category that drives the transformation strategy."""

    COMPOSE = "DockerCompose"
    CF_MANIFEST = "CloudFoundry"
    ANY = "Containerize"
    KUBERNETES = "Kubernetes"
    DOCKERFILE = "Dockerfile"
