from collections.abc import Iterator
from dataclasses import dataclass, field

from kubeplan.core.domain.plan.entities.kubernetes_output import (
    KubernetesOutput,
    TargetClusterType,
)
from kubeplan.core.domain.plan.entities.service import Service
from kubeplan.core.domain.plan.value_objects import (
    DEFAULT_CLUSTER_TYPE,
    DEFAULT_PROJECT_NAME,
    PLAN_API_VERSION,
    PLAN_KIND,
    ArtifactPathMap,
    TargetInfoArtifactType,
)


@dataclass
class Inputs:
    root_dir: str = ""
    k8s_files: list[str] = field(default_factory=list)
    # service name -> every distinct service discovered under that name
    services: dict[str, list[Service]] = field(default_factory=dict)
    target_info_artifacts: ArtifactPathMap[TargetInfoArtifactType] = field(
        default_factory=ArtifactPathMap
    )


@dataclass
class Outputs:
    kubernetes: KubernetesOutput = field(default_factory=KubernetesOutput)


@dataclass
class PlanSpec:
    inputs: Inputs = field(default_factory=Inputs)
    outputs: Outputs = field(default_factory=Outputs)


@dataclass
class Plan:
    """Canonical merged view of every deployable service found in one source tree.

    A Plan is a single mutable aggregate without internal locking. Callers
    that feed it from several threads must serialise access themselves.
    """

    name: str = DEFAULT_PROJECT_NAME
    spec: PlanSpec = field(default_factory=PlanSpec)
    api_version: str = PLAN_API_VERSION
    kind: str = PLAN_KIND

    @classmethod
    def new(
        cls,
        name: str = DEFAULT_PROJECT_NAME,
        cluster_type: str = DEFAULT_CLUSTER_TYPE,
    ) -> "Plan":
        return cls(
            name=name,
            spec=PlanSpec(
                outputs=Outputs(
                    kubernetes=KubernetesOutput(
                        target_cluster=TargetClusterType(type=cluster_type),
                        ignore_unsupported_kinds=False,
                    )
                )
            ),
        )

    @property
    def services(self) -> dict[str, list[Service]]:
        return self.spec.inputs.services

    def iter_services(self) -> Iterator[Service]:
        for entries in self.spec.inputs.services.values():
            yield from entries

    def service_count(self) -> int:
        return sum(len(entries) for entries in self.spec.inputs.services.values())
