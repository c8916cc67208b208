import os
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from kubeplan.core.application.exceptions import (
    PlanFormatError,
    PlanNotFoundError,
    PlanPersistenceError,
)
from kubeplan.core.application.ports import PlanStorePort
from kubeplan.core.domain.plan import Plan
from kubeplan.infrastructure.persistence.plan_document_mapper import (
    document_to_plan,
    plan_to_document,
)
from kubeplan.infrastructure.persistence.plan_document_models import PlanDocument

logger = structlog.get_logger()


class YamlPlanStore(PlanStorePort):
    """
    Reads and writes plans as YAML documents.

    Path-valued fields are stored relative to ``rootDir`` so a plan can move
    with its source tree. An absolute ``rootDir`` is stored as given; a relative
    one is stored relative to the directory holding the plan file, which is
    also what it is resolved against on read.
    """

    def write(self, plan: Plan, path: Path) -> None:
        path = Path(path)
        root = plan.spec.inputs.root_dir
        abs_root = os.path.abspath(root) if root else ""

        def to_relative(value: str) -> str:
            if abs_root and os.path.isabs(value):
                return os.path.relpath(value, abs_root)
            return value

        document = plan_to_document(plan, to_relative)
        if root and not os.path.isabs(root):
            # Readers resolve a relative rootDir against the plan file's directory
            document.spec.inputs.root_dir = os.path.relpath(abs_root, path.parent.resolve())
        data = document.to_yaml_dict()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(data, handle, sort_keys=False, default_flow_style=False)
        except OSError as exc:
            logger.error("Failed to write plan", path=str(path), error=str(exc))
            raise PlanPersistenceError(
                f"Cannot write plan to '{path}': {exc}", context={"path": str(path)}
            ) from exc
        logger.info("Plan written", path=str(path), services=plan.service_count())

    def read(self, path: Path) -> Plan:
        path = Path(path)
        document = self._load_document(path)

        root = document.spec.inputs.root_dir
        abs_root = ""
        if root:
            abs_root = os.path.normpath(os.path.join(path.parent.resolve(), root))

        def to_absolute(value: str) -> str:
            if abs_root and not os.path.isabs(value):
                return os.path.normpath(os.path.join(abs_root, value))
            return value

        plan = document_to_plan(document, to_absolute)
        plan.spec.inputs.root_dir = abs_root
        logger.info("Plan loaded", path=str(path), services=plan.service_count())
        return plan

    @staticmethod
    def _load_document(path: Path) -> PlanDocument:
        context = {"path": str(path)}
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise PlanNotFoundError(f"Plan file '{path}' not found", context=context) from exc
        except OSError as exc:
            raise PlanPersistenceError(f"Cannot read plan '{path}': {exc}", context=context) from exc

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise PlanFormatError(f"Plan '{path}' is not valid YAML: {exc}", context=context) from exc
        if not isinstance(data, dict):
            raise PlanFormatError(f"Plan '{path}' must be a YAML mapping", context=context)

        try:
            return PlanDocument.model_validate(data)
        except ValidationError as exc:
            logger.warning("Plan failed schema validation", path=str(path), errors=exc.error_count())
            raise PlanFormatError(
                f"Plan '{path}' does not match the plan schema: {exc}", context=context
            ) from exc
