"""Tests for the cross-run snapshot."""

import json
from pathlib import Path

from meta_info.meta_snapshot import CURRENT_SCHEMA_VERSION, MetaSnapshot
from meta_info.owner_record import (
    OwnerRecord,
    owners_map_from_json,
    owners_map_to_json,
)


def test_load_save_roundtrip(tmp_path: Path) -> None:
    """Verify values survive a save and reload."""
    path = tmp_path / "snapshot.json"
    snapshot = MetaSnapshot(str(path))
    snapshot.update("applied_labels", ["project:app"])
    assert snapshot.dirty
    snapshot.save()

    reloaded = MetaSnapshot(str(path))
    reloaded.load()
    assert reloaded.get("applied_labels") == ["project:app"]
    assert reloaded.meta["run_id"] == 1


def test_missing_file_is_empty(tmp_path: Path) -> None:
    """Verify a first run starts from an empty snapshot."""
    snapshot = MetaSnapshot(str(tmp_path / "nested" / "snapshot.json"))
    snapshot.load()
    assert snapshot.get("applied_labels", []) == []

    snapshot.save()
    assert (tmp_path / "nested" / "snapshot.json").exists()


def test_update_same_value_not_dirty(tmp_path: Path) -> None:
    """Verify unchanged values do not mark the snapshot dirty."""
    snapshot = MetaSnapshot(str(tmp_path / "s.json"))
    snapshot.update("k", 1)
    snapshot.save()
    snapshot.update("k", 1)
    assert not snapshot.dirty


def test_ignore_schema_mismatch(tmp_path: Path) -> None:
    """Verify snapshots from another schema are ignored."""
    path = tmp_path / "s.json"
    path.write_text(
        json.dumps({"meta": {"schema_version": 999}, "values": {"k": "v"}}),
        encoding="utf-8",
    )
    snapshot = MetaSnapshot(str(path))
    snapshot.load()
    assert snapshot.get("k") is None


def test_legacy_migration(tmp_path: Path) -> None:
    """Verify a bare legacy mapping is migrated when accepted."""
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"applied_labels": ["a"]}), encoding="utf-8")

    ignored = MetaSnapshot(str(path))
    ignored.load()
    assert ignored.get("applied_labels") is None

    snapshot = MetaSnapshot(str(path))
    snapshot.load(accept_legacy=True)
    assert snapshot.get("applied_labels") == ["a"]
    snapshot.save()

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["meta"]["schema_version"] == CURRENT_SCHEMA_VERSION
    assert data["values"] == {"applied_labels": ["a"]}


def test_corrupt_file_ignored(tmp_path: Path) -> None:
    """Verify a corrupt snapshot does not raise."""
    path = tmp_path / "s.json"
    path.write_text("{not json", encoding="utf-8")
    snapshot = MetaSnapshot(str(path))
    snapshot.load()
    assert snapshot.values == {}


def test_owners_map_json() -> None:
    """Verify the owners map serializes with sorted lists and reloads."""
    owners_map = {
        "bob": OwnerRecord(sources={"/b/.owners", "/.owners"}, owned_files={"/b/x"}),
    }
    data = owners_map_to_json(owners_map)
    assert data == {
        "bob": {"sources": ["/.owners", "/b/.owners"], "ownedFiles": ["/b/x"]},
    }
    assert owners_map_from_json(data) == owners_map
