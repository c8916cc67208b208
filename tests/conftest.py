from collections.abc import Callable
from pathlib import Path

import pytest

from kubeplan.core.domain.plan import (
    BuildArtifactType,
    ContainerBuildType,
    Plan,
    Service,
    SourceArtifactType,
    SourceType,
    TranslationType,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ServiceFactory = Callable[..., Service]


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def plan() -> Plan:
    return Plan.new(name="nodejs-app")


@pytest.fixture
def make_service() -> ServiceFactory:
    """Builds a containerized nodejs candidate; keyword arguments override fields."""

    def _make(
        name: str = "nodejs",
        build_type: ContainerBuildType = ContainerBuildType.NEW_DOCKERFILE,
        source_types: tuple[SourceType, ...] = (SourceType.DIRECTORY,),
        target_options: tuple[str, ...] = (),
        source_code: tuple[str, ...] = (".",),
        build_source: tuple[str, ...] = (),
        **overrides,
    ) -> Service:
        service = Service.new(name, TranslationType.ANY)
        service.container_build_type = build_type
        for source_type in source_types:
            service.add_source_type(source_type)
        for option in target_options:
            service.add_target_option(option)
        for path in source_code:
            service.add_source_artifact(SourceArtifactType.SOURCE_CODE, path)
        for path in build_source:
            service.add_build_artifact(BuildArtifactType.SOURCE_CODE, path)
        for field_name, value in overrides.items():
            setattr(service, field_name, value)
        return service

    return _make
