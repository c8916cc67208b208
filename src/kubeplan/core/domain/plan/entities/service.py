from dataclasses import dataclass, field, replace

from kubeplan.core.domain.plan.entities.repo_info import RepoInfo
from kubeplan.core.domain.plan.value_objects import (
    ArtifactPathMap,
    BuildArtifactType,
    ContainerBuildType,
    SourceArtifactType,
    SourceType,
    TranslationType,
)


@dataclass
class Service:
    """One analyzer's proposal for how a part of the source tree maps to a deployable unit.

    Source types, target options and the paths under each artifact key are
    kept duplicate-free, in discovery order.
    """

    service_name: str
    image: str
    translation_type: TranslationType
    container_build_type: ContainerBuildType = ContainerBuildType.REUSE
    service_rel_path: str = ""
    source_types: list[SourceType] = field(default_factory=list)
    containerization_target_options: list[str] = field(default_factory=list)
    source_artifacts: ArtifactPathMap[SourceArtifactType] = field(default_factory=ArtifactPathMap)
    build_artifacts: ArtifactPathMap[BuildArtifactType] = field(default_factory=ArtifactPathMap)
    update_container_build_pipeline: bool = False
    update_deploy_pipeline: bool = False
    repo_info: RepoInfo = field(default_factory=RepoInfo)

    @classmethod
    def new(cls, service_name: str, translation_type: TranslationType) -> "Service":
        return cls(
            service_name=service_name,
            service_rel_path="/" + service_name,
            image=service_name + ":latest",
            translation_type=translation_type,
            container_build_type=ContainerBuildType.REUSE,
        )

    def add_source_type(self, source_type: SourceType) -> None:
        if source_type not in self.source_types:
            self.source_types.append(source_type)

    def add_target_option(self, option: str) -> None:
        if option not in self.containerization_target_options:
            self.containerization_target_options.append(option)

    def add_source_artifact(self, artifact_type: SourceArtifactType, path: str) -> None:
        self.source_artifacts.add(artifact_type, path)

    def add_build_artifact(self, artifact_type: BuildArtifactType, path: str) -> None:
        self.build_artifacts.add(artifact_type, path)

    def primary_build_source_dir(self) -> str | None:
        return self.build_artifacts.first(BuildArtifactType.SOURCE_CODE)

    def with_repo_info(self, repo_info: RepoInfo) -> "Service":
        return replace(self.copy(), repo_info=repo_info)

    def copy(self) -> "Service":
        return replace(
            self,
            source_types=list(self.source_types),
            containerization_target_options=list(self.containerization_target_options),
            source_artifacts=self.source_artifacts.copy(),
            build_artifacts=self.build_artifacts.copy(),
        )
