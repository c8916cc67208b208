from kubeplan.core.application.ports.git_inspection_port import GitInspectionPort, GitRepoDetails
from kubeplan.core.application.ports.plan_store_port import PlanStorePort
from kubeplan.core.application.ports.source_analyzer_port import SourceAnalyzer

__all__ = ["GitInspectionPort", "GitRepoDetails", "PlanStorePort", "SourceAnalyzer"]
