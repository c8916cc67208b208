"""Unit tests — Plan construction defaults."""

from kubeplan.core.domain.plan import (
    DEFAULT_CLUSTER_TYPE,
    DEFAULT_PROJECT_NAME,
    PLAN_API_VERSION,
    PLAN_KIND,
    Plan,
    Service,
    TranslationType,
)


class TestNewPlan:
    def test_defaults(self) -> None:
        plan = Plan.new()

        assert plan.kind == PLAN_KIND == "Plan"
        assert plan.api_version == PLAN_API_VERSION
        assert plan.name == DEFAULT_PROJECT_NAME
        assert plan.spec.inputs.services == {}
        assert not plan.spec.inputs.target_info_artifacts
        assert plan.spec.outputs.kubernetes.target_cluster.type == DEFAULT_CLUSTER_TYPE == "Kubernetes"
        assert plan.spec.outputs.kubernetes.ignore_unsupported_kinds is False

    def test_custom_name_and_cluster_type(self) -> None:
        plan = Plan.new(name="shop", cluster_type="IBM-Openshift")

        assert plan.name == "shop"
        assert plan.spec.outputs.kubernetes.target_cluster.type == "IBM-Openshift"

    def test_service_helpers(self) -> None:
        plan = Plan.new()
        plan.services["a"] = [Service.new("a", TranslationType.ANY)]
        plan.services["b"] = [
            Service.new("b", TranslationType.ANY),
            Service.new("b", TranslationType.COMPOSE),
        ]

        assert plan.service_count() == 3
        assert [s.service_name for s in plan.iter_services()] == ["a", "b", "b"]
