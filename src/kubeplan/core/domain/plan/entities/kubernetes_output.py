from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class TargetClusterType:
    """Either a named cluster type or a path to cluster metadata. Set one, not both."""

    type: str = ""
    path: str = ""


@dataclass(frozen=True)
class KubernetesOutput:
    registry_url: str = ""
    registry_namespace: str = ""
    target_cluster: TargetClusterType = field(default_factory=TargetClusterType)
    ignore_unsupported_kinds: bool = False

    def is_zero(self) -> bool:
        return self == KubernetesOutput()

    def merge(self, new_output: "KubernetesOutput") -> "KubernetesOutput":
        """
        Layers a higher-priority output over this one and returns the result.

        Empty strings mean "no opinion" and keep the current value. The boolean
        has no such sentinel, so the newer layer always wins. A zero-valued
        layer changes nothing.
        """
        if new_output.is_zero():
            return self

        merged = replace(self, ignore_unsupported_kinds=new_output.ignore_unsupported_kinds)
        if new_output.registry_url:
            merged = replace(merged, registry_url=new_output.registry_url)
        if new_output.registry_namespace:
            merged = replace(merged, registry_namespace=new_output.registry_namespace)
        if new_output.target_cluster.type:
            merged = replace(merged, target_cluster=new_output.target_cluster)
        return merged
