"""Tests for the tagged-record encoding of updates."""

import json

import pytest

from update.models import Group, Single
from update.serialization import (
    UpdateFormatError,
    dump_updates,
    from_dict,
    from_json,
    load_updates,
    to_dict,
    to_json,
)

SINGLE = Single("org.typelevel", "cats-core", "1.0.0", ("1.0.1", "1.1.0"))
GROUP = Group("org.typelevel", ("cats-core", "cats-kernel"), "1.0.0", ("1.0.1",))


def test_single_record_layout():
    assert to_dict(SINGLE) == {
        "Single": {
            "groupId": "org.typelevel",
            "artifactId": "cats-core",
            "currentVersion": "1.0.0",
            "newerVersions": ["1.0.1", "1.1.0"],
            "configurations": None,
        }
    }


def test_group_record_layout():
    assert to_dict(GROUP) == {
        "Group": {
            "groupId": "org.typelevel",
            "artifactIds": ["cats-core", "cats-kernel"],
            "currentVersion": "1.0.0",
            "newerVersions": ["1.0.1"],
        }
    }


@pytest.mark.parametrize("update", [
    SINGLE,
    GROUP,
    Single("org.scalatest", "scalatest", "3.0.0", ("3.0.5",), "test"),
])
def test_json_round_trip(update):
    assert from_json(to_json(update)) == update


def test_missing_configurations_defaults_to_none():
    record = {"Single": {
        "groupId": "g.h", "artifactId": "a", "currentVersion": "1", "newerVersions": ["2"],
    }}
    assert from_dict(record).configurations is None


def test_unknown_variant_rejected():
    with pytest.raises(UpdateFormatError, match="unknown update variant"):
        from_dict({"Triple": {}})


def test_group_with_one_artifact_rejected():
    record = to_dict(GROUP)
    record["Group"]["artifactIds"] = ["cats-core"]
    with pytest.raises(UpdateFormatError):
        from_dict(record)


def test_empty_newer_versions_rejected():
    record = to_dict(SINGLE)
    record["Single"]["newerVersions"] = []
    with pytest.raises(UpdateFormatError, match="newerVersions"):
        from_dict(record)


def test_non_string_version_rejected():
    record = to_dict(SINGLE)
    record["Single"]["currentVersion"] = 1.1
    with pytest.raises(UpdateFormatError, match="currentVersion"):
        from_dict(record)


def test_invalid_json_rejected():
    with pytest.raises(UpdateFormatError):
        from_json("{not json")


def test_load_updates_from_yaml_mapping():
    text = """
updates:
  - Single:
      groupId: org.typelevel
      artifactId: cats-core
      currentVersion: 1.0.0
      newerVersions: [1.0.1, 1.1.0]
  - Group:
      groupId: org.typelevel
      artifactIds: [cats-kernel, cats-core]
      currentVersion: 1.0.0
      newerVersions: [1.0.1]
"""
    assert load_updates(text) == [SINGLE, GROUP]


def test_load_updates_from_json_list():
    text = json.dumps([to_dict(GROUP)])
    assert load_updates(text) == [GROUP]


def test_load_empty_document():
    assert load_updates("") == []


def test_load_rejects_scalar_document():
    with pytest.raises(UpdateFormatError):
        load_updates("just text")


def test_dump_then_load():
    updates = [SINGLE, GROUP]
    assert load_updates(dump_updates(updates)) == updates
