from kubeplan.infrastructure.persistence.yaml_plan_store import YamlPlanStore

__all__ = ["YamlPlanStore"]
