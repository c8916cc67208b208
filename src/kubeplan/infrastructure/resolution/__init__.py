from kubeplan.infrastructure.resolution.container import PlannerContainer, build_planner

__all__ = ["PlannerContainer", "build_planner"]
