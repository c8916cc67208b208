from kubeplan.core.application.workflows.planning_workflow import PlanningWorkflow

__all__ = ["PlanningWorkflow"]
