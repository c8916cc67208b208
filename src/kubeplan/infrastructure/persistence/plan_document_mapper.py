"""Maps between the Plan aggregate and its file document.

Both directions take a path converter so the store can rewrite every
path-valued field (relative on write, absolute on read) in one pass.
"""

from collections.abc import Callable

from kubeplan.core.domain.plan import (
    ArtifactPathMap,
    Inputs,
    KubernetesOutput,
    Outputs,
    Plan,
    PlanSpec,
    RepoInfo,
    Service,
    TargetClusterType,
)
from kubeplan.infrastructure.persistence.plan_document_models import (
    InputsDocument,
    KubernetesOutputDocument,
    MetadataDocument,
    OutputsDocument,
    PlanDocument,
    PlanSpecDocument,
    RepoInfoDocument,
    ServiceDocument,
    TargetClusterDocument,
)

PathConverter = Callable[[str], str]


def _keep(path: str) -> str:
    return path


def plan_to_document(plan: Plan, convert: PathConverter = _keep) -> PlanDocument:
    inputs = plan.spec.inputs
    kubernetes = plan.spec.outputs.kubernetes
    return PlanDocument(
        api_version=plan.api_version,
        kind=plan.kind,
        metadata=MetadataDocument(name=plan.name),
        spec=PlanSpecDocument(
            inputs=InputsDocument(
                root_dir=inputs.root_dir,
                k8s_files=[convert(p) for p in inputs.k8s_files],
                services={
                    name: [_service_to_document(s, convert) for s in entries]
                    for name, entries in inputs.services.items()
                },
                target_info_artifacts=_convert_map(inputs.target_info_artifacts, convert),
            ),
            outputs=OutputsDocument(
                kubernetes=KubernetesOutputDocument(
                    registry_url=kubernetes.registry_url,
                    registry_namespace=kubernetes.registry_namespace,
                    target_cluster=TargetClusterDocument(
                        type=kubernetes.target_cluster.type,
                        path=_convert_optional(kubernetes.target_cluster.path, convert),
                    ),
                    ignore_unsupported_kinds=kubernetes.ignore_unsupported_kinds,
                )
            ),
        ),
    )


def document_to_plan(document: PlanDocument, convert: PathConverter = _keep) -> Plan:
    inputs = document.spec.inputs
    kubernetes = document.spec.outputs.kubernetes
    return Plan(
        name=document.metadata.name,
        api_version=document.api_version,
        kind=document.kind,
        spec=PlanSpec(
            inputs=Inputs(
                root_dir=inputs.root_dir,
                k8s_files=[convert(p) for p in inputs.k8s_files],
                services={
                    name: [_document_to_service(d, convert) for d in entries]
                    for name, entries in inputs.services.items()
                },
                target_info_artifacts=ArtifactPathMap(
                    _convert_map(ArtifactPathMap(inputs.target_info_artifacts), convert)
                ),
            ),
            outputs=Outputs(
                kubernetes=KubernetesOutput(
                    registry_url=kubernetes.registry_url,
                    registry_namespace=kubernetes.registry_namespace,
                    target_cluster=TargetClusterType(
                        type=kubernetes.target_cluster.type,
                        path=_convert_optional(kubernetes.target_cluster.path, convert),
                    ),
                    ignore_unsupported_kinds=kubernetes.ignore_unsupported_kinds,
                )
            ),
        ),
    )


def _service_to_document(service: Service, convert: PathConverter) -> ServiceDocument:
    options = service.containerization_target_options
    if service.container_build_type.has_path_target_options:
        options = [convert(o) for o in options]
    return ServiceDocument(
        service_name=service.service_name,
        service_rel_path=service.service_rel_path,
        image=service.image,
        translation_type=service.translation_type,
        container_build_type=service.container_build_type,
        source_types=list(service.source_types),
        target_options=list(options),
        source_artifacts=_convert_map(service.source_artifacts, convert),
        build_artifacts=_convert_map(service.build_artifacts, convert),
        update_container_build_pipeline=service.update_container_build_pipeline,
        update_deploy_pipeline=service.update_deploy_pipeline,
        repo_info=RepoInfoDocument(
            git_repo_dir=_convert_optional(service.repo_info.git_repo_dir, convert),
            git_repo_url=service.repo_info.git_repo_url,
            git_repo_branch=service.repo_info.git_repo_branch,
            target_path=_convert_optional(service.repo_info.target_path, convert),
        ),
    )


def _document_to_service(document: ServiceDocument, convert: PathConverter) -> Service:
    options = document.target_options
    if document.container_build_type.has_path_target_options:
        options = [convert(o) for o in options]
    service = Service(
        service_name=document.service_name,
        service_rel_path=document.service_rel_path,
        image=document.image,
        translation_type=document.translation_type,
        container_build_type=document.container_build_type,
        source_artifacts=ArtifactPathMap(_convert_map(ArtifactPathMap(document.source_artifacts), convert)),
        build_artifacts=ArtifactPathMap(_convert_map(ArtifactPathMap(document.build_artifacts), convert)),
        update_container_build_pipeline=document.update_container_build_pipeline,
        update_deploy_pipeline=document.update_deploy_pipeline,
        repo_info=RepoInfo(
            git_repo_dir=_convert_optional(document.repo_info.git_repo_dir, convert),
            git_repo_url=document.repo_info.git_repo_url,
            git_repo_branch=document.repo_info.git_repo_branch,
            target_path=_convert_optional(document.repo_info.target_path, convert),
        ),
    )
    # Hand-edited plans may repeat values; the adders restore the invariant
    for source_type in document.source_types:
        service.add_source_type(source_type)
    for option in options:
        service.add_target_option(option)
    return service


def _convert_map(paths: ArtifactPathMap, convert: PathConverter) -> dict:
    return {key: [convert(p) for p in values] for key, values in paths.items()}


def _convert_optional(path: str, convert: PathConverter) -> str:
    return convert(path) if path else ""
