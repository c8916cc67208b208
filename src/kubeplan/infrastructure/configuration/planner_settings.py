from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kubeplan.core.domain.plan import (
    DEFAULT_CLUSTER_TYPE,
    DEFAULT_PROJECT_NAME,
    KubernetesOutput,
    TargetClusterType,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PlannerSettings(BaseSettings):
    """Settings for a planning run. Read from KUBEPLAN_* env vars and .env."""

    # ── Plan defaults ──
    project_name: str = Field(default=DEFAULT_PROJECT_NAME)
    cluster_type: str = Field(default=DEFAULT_CLUSTER_TYPE)

    # ── Output layer ──
    registry_url: str = ""
    registry_namespace: str = ""
    ignore_unsupported_kinds: bool = False

    # ── Git inspection ──
    git_binary: str = "git"
    git_timeout_seconds: float = Field(default=10.0, gt=0)

    # ── Runtime ──
    analyzer_workers: int = Field(default=1, ge=1)
    log_format: str = ""
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="KUBEPLAN_", env_file=".env", extra="ignore")

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("", "json", "console"):
            raise ValueError(f"Unsupported log format '{value}'. Use json or console.")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unsupported log level '{value}'. Use one of {', '.join(LOG_LEVELS)}.")
        return value

    def to_kubernetes_output(self) -> KubernetesOutput:
        """The output layer these settings contribute, as a KubernetesOutput."""
        return KubernetesOutput(
            registry_url=self.registry_url,
            registry_namespace=self.registry_namespace,
            target_cluster=TargetClusterType(type=self.cluster_type),
            ignore_unsupported_kinds=self.ignore_unsupported_kinds,
        )
