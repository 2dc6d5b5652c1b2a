"""Merge single-artifact updates that share a version transition."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from .models import Group, Single, Update

logger = logging.getLogger(__name__)

GroupKey = Tuple[str, str, Tuple[str, ...]]


def group_updates(updates: Iterable[Single]) -> List[Update]:
    """Group ``updates`` by ``(groupId, currentVersion, newerVersions)``.

    Buckets with one distinct artifact id yield their first ``Single``
    unchanged; larger buckets become a ``Group``. The result is sorted by
    ``(groupId, artifactId)``, using the representative id for groups.
    """
    buckets: Dict[GroupKey, List[Single]] = {}
    for update in updates:
        key = (update.group_id, update.current_version, tuple(update.newer_versions))
        buckets.setdefault(key, []).append(update)

    result: List[Update] = []
    for (group_id, current_version, newer_versions), members in buckets.items():
        artifact_ids = sorted({member.artifact_id for member in members})
        if len(artifact_ids) > 1:
            grouped = Group(group_id, tuple(artifact_ids), current_version, newer_versions)
            if is_debug_enabled(logger):
                logger.debug(
                    "Grouped updates",
                    extra=extra_context(
                        event="group",
                        component="grouping",
                        group_id=group_id,
                        artifact_count=len(artifact_ids),
                        representative=grouped.artifact_id,
                    ),
                )
            result.append(grouped)
        else:
            result.append(members[0])

    return sorted(result, key=lambda u: (u.group_id, u.artifact_id))


def flatten(updates: Iterable[Update]) -> List[Single]:
    """Expand groups back into one ``Single`` per artifact id."""
    singles: List[Single] = []
    for update in updates:
        if isinstance(update, Single):
            singles.append(update)
        elif isinstance(update, Group):
            singles.extend(
                Single(update.group_id, artifact_id, update.current_version, update.newer_versions)
                for artifact_id in update.artifact_ids
            )
        else:
            raise TypeError(f"not an update: {type(update).__name__}")
    return singles
