"""PLAN FILE CONTRACT: the YAML schema a Plan is written to and read from."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from kubeplan.core.domain.plan import (
    PLAN_API_VERSION,
    PLAN_KIND,
    BuildArtifactType,
    ContainerBuildType,
    SourceArtifactType,
    SourceType,
    TargetInfoArtifactType,
    TranslationType,
)


def _none_as_empty_list(value: Any) -> Any:
    return [] if value is None else value


def _none_as_empty_dict(value: Any) -> Any:
    return {} if value is None else value


PathList = Annotated[list[str], BeforeValidator(_none_as_empty_list)]


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TargetClusterDocument(_Document):
    type: str = ""
    path: str = ""


class KubernetesOutputDocument(_Document):
    registry_url: str = Field(default="", alias="registryURL")
    registry_namespace: str = Field(default="", alias="registryNamespace")
    target_cluster: TargetClusterDocument = Field(
        default_factory=TargetClusterDocument, alias="targetCluster"
    )
    ignore_unsupported_kinds: bool = Field(default=False, alias="ignoreUnsupportedKinds")


class OutputsDocument(_Document):
    kubernetes: KubernetesOutputDocument = Field(default_factory=KubernetesOutputDocument)


class RepoInfoDocument(_Document):
    git_repo_dir: str = Field(default="", alias="gitRepoDir")
    git_repo_url: str = Field(default="", alias="gitRepoURL")
    git_repo_branch: str = Field(default="", alias="gitRepoBranch")
    target_path: str = Field(default="", alias="targetPath")


class ServiceDocument(_Document):
    service_name: str = Field(alias="serviceName")
    service_rel_path: str = Field(default="", alias="serviceRelPath")
    image: str = ""
    translation_type: TranslationType = Field(alias="translationType")
    container_build_type: ContainerBuildType = Field(alias="containerBuildType")
    source_types: Annotated[list[SourceType], BeforeValidator(_none_as_empty_list)] = Field(
        default_factory=list, alias="sourceType"
    )
    target_options: PathList = Field(default_factory=list, alias="targetOptions")
    source_artifacts: Annotated[
        dict[SourceArtifactType, PathList], BeforeValidator(_none_as_empty_dict)
    ] = Field(default_factory=dict, alias="sourceArtifacts")
    build_artifacts: Annotated[
        dict[BuildArtifactType, PathList], BeforeValidator(_none_as_empty_dict)
    ] = Field(default_factory=dict, alias="buildArtifacts")
    update_container_build_pipeline: bool = Field(
        default=False, alias="updateContainerBuildPipeline"
    )
    update_deploy_pipeline: bool = Field(default=False, alias="updateDeployPipeline")
    repo_info: RepoInfoDocument = Field(default_factory=RepoInfoDocument, alias="repoInfo")


class InputsDocument(_Document):
    root_dir: str = Field(default="", alias="rootDir")
    k8s_files: PathList = Field(default_factory=list, alias="kubernetesYamls")
    services: Annotated[
        dict[str, Annotated[list[ServiceDocument], BeforeValidator(_none_as_empty_list)]],
        BeforeValidator(_none_as_empty_dict),
    ] = Field(default_factory=dict)
    target_info_artifacts: Annotated[
        dict[TargetInfoArtifactType, PathList], BeforeValidator(_none_as_empty_dict)
    ] = Field(default_factory=dict, alias="targetInfoArtifacts")


class PlanSpecDocument(_Document):
    inputs: InputsDocument = Field(default_factory=InputsDocument)
    outputs: OutputsDocument = Field(default_factory=OutputsDocument)


class MetadataDocument(_Document):
    name: str = ""


class PlanDocument(_Document):
    api_version: str = Field(default=PLAN_API_VERSION, alias="apiVersion")
    kind: str = PLAN_KIND
    metadata: MetadataDocument = Field(default_factory=MetadataDocument)
    spec: PlanSpecDocument = Field(default_factory=PlanSpecDocument)

    @field_validator("kind")
    @classmethod
    def check_kind(cls, value: str) -> str:
        if value != PLAN_KIND:
            raise ValueError(f"Expected kind '{PLAN_KIND}', got '{value}'")
        return value

    def to_yaml_dict(self) -> dict[str, Any]:
        """Alias-keyed plain dict with empty optional sections left out."""
        data = self.model_dump(by_alias=True, mode="json")
        inputs = data["spec"]["inputs"]
        _drop_empty(inputs, "kubernetesYamls", "targetInfoArtifacts")
        for entries in inputs["services"].values():
            for service in entries:
                _drop_empty(service, "serviceRelPath", "targetOptions", "buildArtifacts")
                _drop_empty(service["repoInfo"], *list(service["repoInfo"]))
                _drop_empty(service, "repoInfo")
        kubernetes = data["spec"]["outputs"]["kubernetes"]
        _drop_empty(kubernetes["targetCluster"], "type", "path")
        _drop_empty(kubernetes, "registryURL", "registryNamespace", "targetCluster", "ignoreUnsupportedKinds")
        return data


def _drop_empty(data: dict[str, Any], *keys: str) -> None:
    for key in keys:
        if key in data and not data[key]:
            del data[key]
