"""Identity test and union merge for candidate services.

Two candidates describe the same logical service when name, image,
translation type and build type match and, if both name a build source
directory, that directory is the same. Matching candidates fold into one
entry whose list fields are order-preserving set unions.
"""

from collections.abc import Iterable
from dataclasses import replace
from typing import TypeVar

from kubeplan.core.domain.plan import Service

T = TypeVar("T")


def is_same_service(existing: Service, candidate: Service) -> bool:
    if (
        existing.service_name != candidate.service_name
        or existing.image != candidate.image
        or existing.translation_type != candidate.translation_type
        or existing.container_build_type != candidate.container_build_type
    ):
        return False
    existing_dir = existing.primary_build_source_dir()
    candidate_dir = candidate.primary_build_source_dir()
    if existing_dir is not None and candidate_dir is not None:
        return existing_dir == candidate_dir
    return True


def try_merge(existing: Service, candidate: Service) -> Service | None:
    """
    Folds ``candidate`` into ``existing`` and returns the merged service.

    Returns None when the two are different logical services. Neither
    argument is modified, and merging a candidate that adds nothing new
    returns a service equal to ``existing``.
    """
    if not is_same_service(existing, candidate):
        return None
    return replace(
        existing,
        update_container_build_pipeline=(
            existing.update_container_build_pipeline or candidate.update_container_build_pipeline
        ),
        update_deploy_pipeline=existing.update_deploy_pipeline or candidate.update_deploy_pipeline,
        source_types=_ordered_union(existing.source_types, candidate.source_types),
        containerization_target_options=_ordered_union(
            existing.containerization_target_options,
            candidate.containerization_target_options,
        ),
        source_artifacts=existing.source_artifacts.union(candidate.source_artifacts),
        build_artifacts=existing.build_artifacts.union(candidate.build_artifacts),
    )


def _ordered_union(current: Iterable[T], new: Iterable[T]) -> list[T]:
    merged = list(current)
    for item in new:
        if item not in merged:
            merged.append(item)
    return merged
