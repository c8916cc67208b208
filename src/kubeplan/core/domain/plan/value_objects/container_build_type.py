from enum import StrEnum


class ContainerBuildType(StrEnum):
    """Mechanism used to produce the container image of a service."""

    NEW_DOCKERFILE = "NewDockerfile"
    REUSE_DOCKERFILE = "ReuseDockerfile"
    REUSE = "Reuse"
    CNB = "CNB"
    MANUAL = "Manual"
    S2I = "S2I"

    @property
    def has_path_target_options(self) -> bool:
        """Target options of these strategies are filesystem paths, not image names."""
        return self in PATH_TARGET_OPTION_BUILD_TYPES


PATH_TARGET_OPTION_BUILD_TYPES: frozenset[ContainerBuildType] = frozenset(
    {
        ContainerBuildType.NEW_DOCKERFILE,
        ContainerBuildType.REUSE_DOCKERFILE,
        ContainerBuildType.S2I,
    }
)
