from abc import ABC, abstractmethod
from pathlib import Path

from kubeplan.core.domain.plan import Service


class SourceAnalyzer(ABC):
    """Contract for anything that proposes candidate services from a source tree."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def discover(self, root_dir: Path) -> list[Service]:
        """Return the candidate services found under ``root_dir``."""
