from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from kubeplan.core.application.ports import SourceAnalyzer
from kubeplan.core.application.services import RepoMetadataResolver
from kubeplan.core.application.workflows import PlanningWorkflow
from kubeplan.core.domain.plan import KubernetesOutput, Plan
from kubeplan.infrastructure.configuration import PlannerSettings
from kubeplan.infrastructure.observability import configure_logging
from kubeplan.infrastructure.persistence import YamlPlanStore
from kubeplan.infrastructure.tools.git import GitCliClient


@dataclass(frozen=True)
class PlannerContainer:
    settings: PlannerSettings
    workflow: PlanningWorkflow
    store: YamlPlanStore

    def plan(self, root_dir: str | Path, output_layers: Sequence[KubernetesOutput] = ()) -> Plan:
        """Run the workflow with the settings layer below any caller-supplied layers."""
        layers = [self.settings.to_kubernetes_output(), *output_layers]
        return self.workflow.execute(root_dir, layers)


def build_planner(
    analyzers: Sequence[SourceAnalyzer], settings: PlannerSettings | None = None
) -> PlannerContainer:
    """Wires logging, git inspection, the planning workflow and the plan store from settings."""
    settings = settings or PlannerSettings()
    configure_logging(settings.log_format or None, settings.log_level)

    resolver = RepoMetadataResolver(GitCliClient.from_settings(settings))
    workflow = PlanningWorkflow(
        analyzers=analyzers,
        resolver=resolver,
        plan_name=settings.project_name,
        cluster_type=settings.cluster_type,
        max_workers=settings.analyzer_workers,
    )
    return PlannerContainer(settings=settings, workflow=workflow, store=YamlPlanStore())
