from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, TypeVar

K = TypeVar("K", bound=str)


class ArtifactPathMap(Generic[K]):
    """Ordered multi-map from an artifact type to a duplicate-free list of paths.

    Keys keep first-insertion order and every path list keeps the order in
    which paths were first seen. Adding a path that is already recorded under
    the same key is a no-op.
    """

    def __init__(self, entries: Mapping[K, Iterable[str]] | None = None) -> None:
        self._entries: dict[K, list[str]] = {}
        for key, paths in (entries or {}).items():
            self.extend(key, paths)

    def add(self, key: K, path: str) -> None:
        paths = self._entries.setdefault(key, [])
        if path not in paths:
            paths.append(path)

    def extend(self, key: K, paths: Iterable[str]) -> None:
        self._entries.setdefault(key, [])
        for path in paths:
            self.add(key, path)

    def union(self, other: ArtifactPathMap[K]) -> ArtifactPathMap[K]:
        """Return a new map holding this map's paths followed by the new ones of ``other``."""
        merged = self.copy()
        for key, paths in other.items():
            merged.extend(key, paths)
        return merged

    def get(self, key: K) -> list[str]:
        return list(self._entries.get(key, []))

    def first(self, key: K) -> str | None:
        paths = self._entries.get(key)
        return paths[0] if paths else None

    def keys(self) -> list[K]:
        return list(self._entries)

    def items(self) -> Iterator[tuple[K, list[str]]]:
        for key, paths in self._entries.items():
            yield key, list(paths)

    def to_dict(self) -> dict[K, list[str]]:
        return {key: list(paths) for key, paths in self._entries.items()}

    def copy(self) -> ArtifactPathMap[K]:
        return ArtifactPathMap(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArtifactPathMap):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"ArtifactPathMap({self._entries!r})"
