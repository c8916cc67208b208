from kubeplan.infrastructure.configuration.planner_settings import PlannerSettings

__all__ = ["PlannerSettings"]
