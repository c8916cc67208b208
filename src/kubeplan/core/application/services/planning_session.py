import copy
import threading
from collections.abc import Iterable

from kubeplan.core.application.services.plan_assembly_service import (
    AssemblyReport,
    add_services_to_plan,
    apply_output_layers,
)
from kubeplan.core.domain.plan import KubernetesOutput, Plan, Service


class PlanningSession:
    """
    Owns one Plan and serialises every mutation of it behind a single lock.

    Analyzers running on several threads hand their candidates to
    ``submit``; discovery itself stays parallel, only the merge is exclusive.
    """

    def __init__(self, plan: Plan) -> None:
        self._lock = threading.Lock()
        self._plan = plan

    def submit(self, services: Iterable[Service]) -> AssemblyReport:
        candidates = list(services)
        with self._lock:
            return add_services_to_plan(self._plan, candidates)

    def apply_output(self, output: KubernetesOutput) -> KubernetesOutput:
        with self._lock:
            return apply_output_layers(self._plan, [output])

    def snapshot(self) -> Plan:
        """Return a deep copy of the plan as it stands now."""
        with self._lock:
            return copy.deepcopy(self._plan)
