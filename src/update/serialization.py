"""Tagged-record encoding of updates for storage and transport.

A ``Single`` is written as ``{"Single": {...}}`` and a ``Group`` as
``{"Group": {...}}``, with camelCase field names. Documents holding many
updates are YAML or JSON, either a plain list of records or a mapping with
an ``updates`` key.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

import yaml

from .models import Group, Single, Update, ensure_update


class UpdateFormatError(ValueError):
    """Raised when a serialized update cannot be decoded."""


def to_dict(update: Update) -> Dict[str, Any]:
    """Encode ``update`` as a tagged record."""
    update = ensure_update(update)
    if isinstance(update, Single):
        return {
            "Single": {
                "groupId": update.group_id,
                "artifactId": update.artifact_id,
                "currentVersion": update.current_version,
                "newerVersions": list(update.newer_versions),
                "configurations": update.configurations,
            }
        }
    return {
        "Group": {
            "groupId": update.group_id,
            "artifactIds": list(update.artifact_ids),
            "currentVersion": update.current_version,
            "newerVersions": list(update.newer_versions),
        }
    }


def _string(fields: Dict[str, Any], key: str) -> str:
    value = fields.get(key)
    if not isinstance(value, str) or not value:
        raise UpdateFormatError(f"field '{key}' must be a non-empty string")
    return value


def _string_list(fields: Dict[str, Any], key: str) -> List[str]:
    value = fields.get(key)
    if not isinstance(value, list) or not value:
        raise UpdateFormatError(f"field '{key}' must be a non-empty list")
    if not all(isinstance(item, str) and item for item in value):
        raise UpdateFormatError(f"field '{key}' must only contain non-empty strings")
    return value


def from_dict(record: Any) -> Update:
    """Decode a tagged record produced by :func:`to_dict`."""
    if not isinstance(record, dict) or len(record) != 1:
        raise UpdateFormatError("an update record must be a mapping with exactly one variant tag")
    tag, fields = next(iter(record.items()))
    if not isinstance(fields, dict):
        raise UpdateFormatError(f"fields of '{tag}' must be a mapping")

    try:
        if tag == "Single":
            configurations = fields.get("configurations")
            if configurations is not None and not isinstance(configurations, str):
                raise UpdateFormatError("field 'configurations' must be a string or null")
            return Single(
                group_id=_string(fields, "groupId"),
                artifact_id=_string(fields, "artifactId"),
                current_version=_string(fields, "currentVersion"),
                newer_versions=tuple(_string_list(fields, "newerVersions")),
                configurations=configurations,
            )
        if tag == "Group":
            return Group(
                group_id=_string(fields, "groupId"),
                artifact_ids=tuple(_string_list(fields, "artifactIds")),
                current_version=_string(fields, "currentVersion"),
                newer_versions=tuple(_string_list(fields, "newerVersions")),
            )
    except UpdateFormatError:
        raise
    except ValueError as exc:
        raise UpdateFormatError(f"invalid {tag}: {exc}") from exc
    raise UpdateFormatError(f"unknown update variant '{tag}'")


def to_json(update: Update) -> str:
    return json.dumps(to_dict(update), sort_keys=True)


def from_json(text: str) -> Update:
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise UpdateFormatError(f"invalid JSON: {exc}") from exc
    return from_dict(record)


def load_updates(text: str) -> List[Update]:
    """Decode a YAML or JSON document holding a list of update records."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise UpdateFormatError(f"invalid YAML/JSON document: {exc}") from exc
    if data is None:
        return []
    if isinstance(data, dict) and "updates" in data:
        data = data["updates"] or []
    if not isinstance(data, list):
        raise UpdateFormatError("expected a list of updates or a mapping with an 'updates' list")
    return [from_dict(record) for record in data]


def dump_updates(updates: Iterable[Update]) -> str:
    """Encode ``updates`` as a YAML document readable by :func:`load_updates`."""
    return yaml.safe_dump(
        {"updates": [to_dict(update) for update in updates]},
        sort_keys=False,
        default_flow_style=False,
    )
