"""Data models for detected dependency updates.

An update is either a ``Single`` artifact moving from its current version to
one or more newer versions, or a ``Group`` of artifacts of the same groupId
that share exactly the same version transition. Both are immutable; every
derived value (name, next version, search terms) is computed on access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from constants import Constants
from common.strings import longest_common_prefix_greater, remove_suffix, rightmost_label


def name_of(group_id: str, artifact_id: str) -> str:
    """Return the human-facing name of an artifact.

    Generic artifact ids like ``core`` are replaced by the last label of
    the groupId, e.g. ``name_of("com.example.foo", "core") == "foo"``.
    """
    if artifact_id in Constants.COMMON_SUFFIXES:
        return rightmost_label(group_id)
    return artifact_id


def remove_common_suffix(term: str) -> str:
    """Strip a trailing generic suffix word (``core``, ``server``, ...) from a search term."""
    return remove_suffix(term, Constants.COMMON_SUFFIXES)


def _check_common(group_id: str, current_version: str, newer_versions: Tuple[str, ...]) -> None:
    if not group_id:
        raise ValueError("groupId must not be empty")
    if not current_version:
        raise ValueError("currentVersion must not be empty")
    if not newer_versions:
        raise ValueError("newerVersions must not be empty")


@dataclass(frozen=True)
class Single:
    """An update of exactly one artifact."""

    group_id: str
    artifact_id: str
    current_version: str
    newer_versions: Tuple[str, ...]
    configurations: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "newer_versions", tuple(self.newer_versions))
        _check_common(self.group_id, self.current_version, self.newer_versions)
        if not self.artifact_id:
            raise ValueError("artifactId must not be empty")

    @property
    def artifact_ids(self) -> Tuple[str, ...]:
        return (self.artifact_id,)

    @property
    def name(self) -> str:
        return name_of(self.group_id, self.artifact_id)

    @property
    def next_version(self) -> str:
        return self.newer_versions[0]

    def search_terms(self) -> Tuple[str, ...]:
        return (self.name,)

    def show(self) -> str:
        artifacts = self.artifact_id
        if self.configurations is not None:
            artifacts += ":" + self.configurations
        return _show(self.group_id, artifacts, self.current_version, self.newer_versions)


@dataclass(frozen=True)
class Group:
    """An update of several artifacts sharing groupId and version transition.

    ``artifact_ids`` is kept sorted and deduplicated and must hold at least
    two distinct ids; a lone artifact is a ``Single``.
    """

    group_id: str
    artifact_ids: Tuple[str, ...]
    current_version: str
    newer_versions: Tuple[str, ...]

    def __post_init__(self):
        if isinstance(self.artifact_ids, str):
            raise ValueError("artifactIds must be a sequence of ids, not a single string")
        object.__setattr__(self, "artifact_ids", tuple(sorted(set(self.artifact_ids))))
        object.__setattr__(self, "newer_versions", tuple(self.newer_versions))
        _check_common(self.group_id, self.current_version, self.newer_versions)
        if len(self.artifact_ids) < 2:
            raise ValueError("a Group needs at least two distinct artifactIds")
        if not all(self.artifact_ids):
            raise ValueError("artifactIds must not contain empty ids")

    @property
    def artifact_ids_prefix(self) -> Optional[str]:
        """Common prefix of all artifact ids, if longer than three characters."""
        return longest_common_prefix_greater(self.artifact_ids, Constants.MIN_PREFIX_LENGTH)

    @property
    def artifact_id(self) -> str:
        """Representative artifact id of the group.

        When the ids share a prefix, the first id that equals the prefix
        followed by one of the generic suffix words wins (``cats-core`` for
        ``cats-core``/``cats-kernel``); otherwise the first id.
        """
        prefix = self.artifact_ids_prefix
        if prefix is not None:
            candidates = [prefix + suffix for suffix in Constants.COMMON_SUFFIXES]
            for artifact_id in self.artifact_ids:
                if artifact_id in candidates:
                    return artifact_id
        return self.artifact_ids[0]

    @property
    def name(self) -> str:
        return name_of(self.group_id, self.artifact_id)

    @property
    def next_version(self) -> str:
        return self.newer_versions[0]

    def search_terms(self) -> Tuple[str, ...]:
        terms = list(self.artifact_ids)
        prefix = self.artifact_ids_prefix
        if prefix is not None:
            terms.append(prefix)
        return tuple(name_of(self.group_id, term) for term in terms)

    def show(self) -> str:
        artifacts = "{" + ", ".join(self.artifact_ids) + "}"
        return _show(self.group_id, artifacts, self.current_version, self.newer_versions)


Update = Union[Single, Group]


def _show(group_id: str, artifacts: str, current_version: str, newer_versions: Tuple[str, ...]) -> str:
    versions = " -> ".join((current_version,) + tuple(newer_versions))
    return f"{group_id}:{artifacts} : {versions}"


def ensure_update(value: object) -> Update:
    """Return ``value`` unchanged if it is a known update variant, else raise TypeError."""
    if isinstance(value, (Single, Group)):
        return value
    raise TypeError(f"not an update: {type(value).__name__}")
