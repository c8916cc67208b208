"""One planning run: discover -> enrich with git metadata -> merge -> layer outputs."""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import structlog
from structlog.contextvars import bind_contextvars, unbind_contextvars

from kubeplan.core.application.exceptions import AnalyzerExecutionError
from kubeplan.core.application.ports import SourceAnalyzer
from kubeplan.core.application.services import PlanningSession, RepoMetadataResolver
from kubeplan.core.domain.plan import (
    DEFAULT_CLUSTER_TYPE,
    DEFAULT_PROJECT_NAME,
    KubernetesOutput,
    Plan,
    Service,
    SourceArtifactType,
)

logger = structlog.get_logger()


class PlanningWorkflow:
    def __init__(
        self,
        analyzers: Sequence[SourceAnalyzer],
        resolver: RepoMetadataResolver | None = None,
        plan_name: str = DEFAULT_PROJECT_NAME,
        cluster_type: str = DEFAULT_CLUSTER_TYPE,
        max_workers: int = 1,
    ) -> None:
        self._analyzers = list(analyzers)
        self._resolver = resolver
        self._plan_name = plan_name
        self._cluster_type = cluster_type
        self._max_workers = max(1, max_workers)

    def execute(
        self, root_dir: str | Path, output_layers: Sequence[KubernetesOutput] = ()
    ) -> Plan:
        """Build a plan for ``root_dir``. Output layers are applied lowest priority first."""
        root = Path(root_dir)
        bind_contextvars(plan_name=self._plan_name, root_dir=str(root))
        try:
            logger.info("Planning started", analyzers=len(self._analyzers))
            plan = Plan.new(name=self._plan_name, cluster_type=self._cluster_type)
            plan.spec.inputs.root_dir = str(root)
            session = PlanningSession(plan)

            for analyzer, candidates in self._discover(root):
                enriched = [self._attach_repo_info(root, service) for service in candidates]
                report = session.submit(enriched)
                logger.info(
                    "Analyzer results merged",
                    analyzer=analyzer.name,
                    candidates=len(enriched),
                    merged=report.merged,
                    appended=report.appended,
                )

            for layer in output_layers:
                session.apply_output(layer)

            result = session.snapshot()
            logger.info("Planning completed", services=result.service_count())
            return result
        finally:
            unbind_contextvars("plan_name", "root_dir")

    def _discover(self, root: Path) -> list[tuple[SourceAnalyzer, list[Service]]]:
        """Run every analyzer, possibly in parallel, and return results in analyzer order."""
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            futures = [(a, pool.submit(a.discover, root)) for a in self._analyzers]
            results = []
            for analyzer, future in futures:
                try:
                    results.append((analyzer, future.result()))
                except Exception as exc:
                    logger.error(
                        "Analyzer failed",
                        analyzer=analyzer.name,
                        error_type=type(exc).__name__,
                        error_details=str(exc),
                    )
                    raise AnalyzerExecutionError(
                        f"Analyzer {analyzer.name} failed: {exc}",
                        context={"analyzer": analyzer.name, "root_dir": str(root)},
                    ) from exc
            return results

    def _attach_repo_info(self, root: Path, service: Service) -> Service:
        if self._resolver is None or not service.repo_info.is_empty():
            return service
        found, service = self._resolver.gather_git_info(service, _service_source_path(root, service))
        if not found:
            logger.debug("Service has no git metadata", service_name=service.service_name)
        return service


def _service_source_path(root: Path, service: Service) -> Path:
    source_dir = service.source_artifacts.first(SourceArtifactType.SOURCE_CODE)
    if not source_dir:
        return root
    path = Path(source_dir)
    return path if path.is_absolute() else root / path
