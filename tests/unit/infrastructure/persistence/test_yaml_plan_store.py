"""Unit tests — YamlPlanStore read/write and root-relative path handling."""

import os
from pathlib import Path

import pytest
import yaml

from kubeplan.core.application.exceptions import PlanFormatError, PlanNotFoundError
from kubeplan.core.application.services import add_services_to_plan
from kubeplan.core.domain.plan import (
    BuildArtifactType,
    ContainerBuildType,
    KubernetesOutput,
    Plan,
    RepoInfo,
    SourceArtifactType,
    SourceType,
    TargetInfoArtifactType,
    TranslationType,
)
from kubeplan.infrastructure.persistence import YamlPlanStore

SOURCE = SourceArtifactType.SOURCE_CODE


@pytest.fixture()
def store() -> YamlPlanStore:
    return YamlPlanStore()


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "api").mkdir(parents=True)
    return root


@pytest.fixture()
def populated_plan(project: Path, make_service) -> Plan:
    plan = Plan.new(name="shop")
    plan.spec.inputs.root_dir = str(project)
    plan.spec.inputs.k8s_files = [str(project / "deploy" / "k8s.yaml")]
    plan.spec.inputs.target_info_artifacts.add(
        TargetInfoArtifactType.K8S_CLUSTER, str(project / "clusters" / "prod.yaml")
    )
    dockerfile = make_service(
        target_options=(str(project / "m2kassets" / "dockerfiles" / "nodejs"),),
        source_code=(str(project), str(project / "api")),
        build_source=(str(project),),
        update_container_build_pipeline=True,
        repo_info=RepoInfo(
            git_repo_dir=str(project), git_repo_url="https://example.com/shop.git", git_repo_branch="main"
        ),
    )
    cnb = make_service(
        build_type=ContainerBuildType.CNB,
        target_options=("gcr.io/buildpacks/builder",),
        source_code=(str(project),),
    )
    add_services_to_plan(plan, [dockerfile, cnb])
    plan.spec.outputs.kubernetes = plan.spec.outputs.kubernetes.merge(
        KubernetesOutput(registry_url="quay.io", registry_namespace="shop")
    )
    return plan


class TestReadSamplePlan:
    def test_reads_every_service_entry(self, store: YamlPlanStore, fixtures_dir: Path) -> None:
        plan = store.read(fixtures_dir / "nodejsplan.yaml")

        entries = plan.services["nodejs"]
        assert plan.name == "nodejs-app"
        assert [e.container_build_type for e in entries] == [
            ContainerBuildType.NEW_DOCKERFILE,
            ContainerBuildType.S2I,
            ContainerBuildType.CNB,
        ]
        assert all(e.translation_type == TranslationType.ANY for e in entries)
        assert all(e.source_types == [SourceType.DIRECTORY] for e in entries)
        assert all(e.update_deploy_pipeline for e in entries)
        assert plan.spec.outputs.kubernetes.target_cluster.type == "Kubernetes"

    def test_relative_paths_are_resolved_against_root(
        self, store: YamlPlanStore, fixtures_dir: Path
    ) -> None:
        plan = store.read(fixtures_dir / "nodejsplan.yaml")

        root = str((fixtures_dir.parent / "samples" / "nodejs").resolve())
        dockerfile, _, cnb = plan.services["nodejs"]
        assert plan.spec.inputs.root_dir == root
        assert dockerfile.source_artifacts.get(SOURCE) == [root]
        assert dockerfile.build_artifacts.get(BuildArtifactType.SOURCE_CODE) == [root]
        assert dockerfile.containerization_target_options == [
            str(Path(root) / "m2kassets" / "dockerfiles" / "nodejs")
        ]
        # CNB target options are builder images, not paths
        assert cnb.containerization_target_options == [
            "cloudfoundry/cnb:cflinuxfs3",
            "gcr.io/buildpacks/builder",
        ]


class TestWrite:
    def test_round_trip(self, store: YamlPlanStore, populated_plan: Plan, tmp_path: Path) -> None:
        path = tmp_path / "out" / "m2k.plan"

        store.write(populated_plan, path)
        loaded = store.read(path)

        assert loaded == populated_plan

    def test_relative_root_survives_round_trip_outside_cwd(
        self, store: YamlPlanStore, make_service, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "project" / "api").mkdir(parents=True)
        plan = Plan.new(name="shop")
        plan.spec.inputs.root_dir = "project"
        add_services_to_plan(plan, [make_service(source_code=(os.path.abspath("project/api"),))])
        path = tmp_path / "out" / "m2k.plan"

        store.write(plan, path)
        data = yaml.safe_load(path.read_text())
        loaded = store.read(path)

        assert data["spec"]["inputs"]["rootDir"] == "../project"
        assert data["spec"]["inputs"]["services"]["nodejs"][0]["sourceArtifacts"] == {"SourceCode": ["api"]}
        root = os.path.join(os.getcwd(), "project")
        assert loaded.spec.inputs.root_dir == root
        assert loaded.services["nodejs"][0].source_artifacts.get(SOURCE) == [os.path.join(root, "api")]

    def test_paths_are_written_relative_to_root(
        self, store: YamlPlanStore, populated_plan: Plan, tmp_path: Path
    ) -> None:
        path = tmp_path / "m2k.plan"

        store.write(populated_plan, path)
        data = yaml.safe_load(path.read_text())

        inputs = data["spec"]["inputs"]
        dockerfile = inputs["services"]["nodejs"][0]
        assert inputs["kubernetesYamls"] == ["deploy/k8s.yaml"]
        assert inputs["targetInfoArtifacts"] == {"KubernetesCluster": ["clusters/prod.yaml"]}
        assert dockerfile["sourceArtifacts"] == {"SourceCode": [".", "api"]}
        assert dockerfile["buildArtifacts"] == {"SourceCode": ["."]}
        assert dockerfile["targetOptions"] == ["m2kassets/dockerfiles/nodejs"]
        assert dockerfile["repoInfo"]["gitRepoDir"] == "."
        assert dockerfile["repoInfo"]["gitRepoURL"] == "https://example.com/shop.git"

    def test_layout_matches_plan_schema(
        self, store: YamlPlanStore, populated_plan: Plan, tmp_path: Path
    ) -> None:
        path = tmp_path / "m2k.plan"

        store.write(populated_plan, path)
        data = yaml.safe_load(path.read_text())

        assert list(data) == ["apiVersion", "kind", "metadata", "spec"]
        assert data["kind"] == "Plan"
        assert data["metadata"] == {"name": "shop"}
        cnb = data["spec"]["inputs"]["services"]["nodejs"][1]
        assert cnb["containerBuildType"] == "CNB"
        assert cnb["sourceType"] == ["Directory"]
        assert "buildArtifacts" not in cnb
        assert "repoInfo" not in cnb
        assert data["spec"]["outputs"]["kubernetes"] == {
            "registryURL": "quay.io",
            "registryNamespace": "shop",
            "targetCluster": {"type": "Kubernetes"},
        }

    def test_sample_plan_survives_rewrite(
        self, store: YamlPlanStore, fixtures_dir: Path, tmp_path: Path
    ) -> None:
        original = store.read(fixtures_dir / "nodejsplan.yaml")
        copy_path = tmp_path / "copy.plan"

        store.write(original, copy_path)

        assert store.read(copy_path) == original


class TestReadErrors:
    def test_missing_file(self, store: YamlPlanStore, tmp_path: Path) -> None:
        with pytest.raises(PlanNotFoundError):
            store.read(tmp_path / "absent.plan")

    @pytest.mark.parametrize(
        "content",
        [
            "kind: Plan\nspec: [unclosed",
            "- just\n- a list\n",
            "apiVersion: v1\nkind: Deployment\nmetadata:\n  name: x\n",
            (
                "kind: Plan\nspec:\n  inputs:\n    services:\n      web:\n"
                "        - serviceName: web\n          translationType: Teleport\n"
                "          containerBuildType: Reuse\n"
            ),
        ],
        ids=["bad-yaml", "not-a-mapping", "wrong-kind", "unknown-translation-type"],
    )
    def test_malformed_plans(self, store: YamlPlanStore, tmp_path: Path, content: str) -> None:
        path = tmp_path / "bad.plan"
        path.write_text(content)

        with pytest.raises(PlanFormatError):
            store.read(path)

    def test_null_sections_read_as_empty(self, store: YamlPlanStore, tmp_path: Path) -> None:
        path = tmp_path / "sparse.plan"
        path.write_text(
            "kind: Plan\nmetadata:\n  name: sparse\nspec:\n  inputs:\n    rootDir: .\n"
            "    services:\n      web:\n        - serviceName: web\n"
            "          translationType: DockerCompose\n          containerBuildType: Reuse\n"
            "          sourceType:\n          sourceArtifacts:\n"
        )

        plan = store.read(path)

        web = plan.services["web"][0]
        assert web.source_types == []
        assert not web.source_artifacts
        assert plan.spec.inputs.root_dir == str(tmp_path.resolve())
