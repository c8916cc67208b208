from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from kubeplan.core.application.services.service_merge_service import try_merge
from kubeplan.core.domain.plan import KubernetesOutput, Plan, Service

logger = structlog.get_logger()


@dataclass(frozen=True)
class AssemblyReport:
    merged: int = 0
    appended: int = 0


def add_services_to_plan(plan: Plan, services: Iterable[Service]) -> AssemblyReport:
    """
    Inserts discovered services into the plan's service map.

    Each candidate is offered to every existing entry under its name. Every
    entry that accepts it is replaced by the merged value; the loop does not
    stop at the first match. A candidate nobody accepts becomes a new entry.
    """
    merged_count = 0
    appended_count = 0
    service_map = plan.spec.inputs.services
    for candidate in services:
        if candidate.service_name not in service_map:
            service_map[candidate.service_name] = []
            logger.debug("Added new service to plan", service_name=candidate.service_name)

        entries = service_map[candidate.service_name]
        matches = 0
        for index, existing in enumerate(entries):
            merged = try_merge(existing, candidate)
            if merged is not None:
                entries[index] = merged
                matches += 1

        if matches > 1:
            logger.warning(
                "Candidate merged into several entries",
                service_name=candidate.service_name,
                matches=matches,
            )
        if matches:
            merged_count += 1
        else:
            entries.append(candidate.copy())
            appended_count += 1

    return AssemblyReport(merged=merged_count, appended=appended_count)


def apply_output_layers(plan: Plan, layers: Iterable[KubernetesOutput]) -> KubernetesOutput:
    """Folds configuration layers, lowest priority first, into the plan's Kubernetes output."""
    output = plan.spec.outputs.kubernetes
    for layer in layers:
        output = output.merge(layer)
    plan.spec.outputs.kubernetes = output
    return output
