from abc import ABC, abstractmethod
from pathlib import Path

from kubeplan.core.domain.plan import Plan


class PlanStorePort(ABC):
    @abstractmethod
    def write(self, plan: Plan, path: Path) -> None:
        """Persist ``plan`` at ``path``, replacing any previous file."""

    @abstractmethod
    def read(self, path: Path) -> Plan:
        """Load a plan written by ``write``."""
