# -*- coding: utf-8 -*-
"""Tests for load-with-fallback, toggle and save."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import make_location_dict
from locationtracker.constants import DATA_FILE_NAME, LOCATION_FIELDS
from locationtracker.core.errors import ErrorKind, WriteFailure
from locationtracker.core.store import SOURCE_SEED, SOURCE_USER, LocationStore
from locationtracker.models.store_result import StoreResult


def _read(path: Path) -> list[dict]:
    return json.loads(path.read_text(encoding="utf-8"))


def test_new_store_is_empty_until_loaded(store: LocationStore, data_file: Path) -> None:
    assert store.locations == ()
    assert not data_file.exists()


def test_load_uses_seed_when_no_user_file(store: LocationStore, sample_records: list[dict]) -> None:
    result = store.load()
    assert result.ok
    assert result.source == SOURCE_SEED
    assert [location.to_dict() for location in store.locations] == sample_records


def test_load_from_seed_does_not_write_user_file(store: LocationStore, data_file: Path) -> None:
    store.load()
    assert not data_file.exists()


def test_load_prefers_user_file_even_when_empty(store: LocationStore, data_file: Path, write_json) -> None:
    write_json(data_file, [])
    result = store.load()
    assert result.ok
    assert result.source == SOURCE_USER
    assert len(store) == 0


def test_user_file_present_skips_seed_entirely(data_file: Path, tmp_path: Path, write_json) -> None:
    write_json(data_file, [make_location_dict(9, "Angels Landing")])
    broken_seed = tmp_path / "broken_seed.json"
    broken_seed.write_text("{not json", encoding="utf-8")

    store = LocationStore(data_file=data_file, seed_file=broken_seed)
    result = store.load()
    assert result.ok
    assert [location.id for location in store.locations] == [9]


def test_malformed_user_file_leaves_list_empty(store: LocationStore, data_file: Path) -> None:
    data_file.parent.mkdir(parents=True)
    data_file.write_text("[{\"id\": 1,", encoding="utf-8")

    result = store.load()
    assert not result.ok
    assert result.kind is ErrorKind.DECODE_FAILURE
    assert result.path == data_file
    assert store.locations == ()


def test_schema_mismatch_in_user_file_is_decode_failure(store: LocationStore, data_file: Path, write_json) -> None:
    record = make_location_dict(1, "Old Faithful")
    del record["imageName"]
    write_json(data_file, [record])

    result = store.load()
    assert result.kind is ErrorKind.DECODE_FAILURE
    assert len(store) == 0


def test_malformed_seed_reports_decode_failure(data_file: Path, tmp_path: Path) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text("not json at all", encoding="utf-8")
    store = LocationStore(data_file=data_file, seed_file=seed)

    result = store.load()
    assert result.kind is ErrorKind.DECODE_FAILURE
    assert store.locations == ()


def test_missing_seed_reports_read_failure(data_file: Path, tmp_path: Path) -> None:
    store = LocationStore(data_file=data_file, seed_file=tmp_path / "missing.json")
    result = store.load()
    assert result.kind is ErrorKind.READ_FAILURE
    assert store.locations == ()


def test_unreadable_user_file_reports_read_failure(store: LocationStore, data_file: Path) -> None:
    data_file.mkdir(parents=True)
    result = store.load()
    assert result.kind is ErrorKind.READ_FAILURE


def test_failed_reload_keeps_last_good_list(store: LocationStore, data_file: Path, sample_records: list[dict]) -> None:
    store.load()
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text("garbage", encoding="utf-8")

    result = store.load()
    assert result.kind is ErrorKind.DECODE_FAILURE
    assert [location.to_dict() for location in store.locations] == sample_records


def test_unusable_data_directory_is_storage_unavailable(tmp_path: Path, seed_file: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    store = LocationStore(data_file=blocker / "locationData.json", seed_file=seed_file)

    result = store.load()
    assert result.kind is ErrorKind.STORAGE_UNAVAILABLE
    assert store.locations == ()
    assert store.save().kind is ErrorKind.STORAGE_UNAVAILABLE


def test_save_then_load_round_trips(store: LocationStore, data_file: Path, seed_file: Path) -> None:
    store.load()
    store.toggle_completion(3)
    assert store.save().ok

    reloaded = LocationStore(data_file=data_file, seed_file=seed_file)
    result = reloaded.load()
    assert result.source == SOURCE_USER
    assert reloaded.locations == store.locations


def test_saved_file_has_exact_fields_in_order(store: LocationStore, data_file: Path) -> None:
    store.load()
    store.save()
    for record in _read(data_file):
        assert tuple(record.keys()) == LOCATION_FIELDS


def test_save_keeps_in_memory_order(data_file: Path, tmp_path: Path, write_json) -> None:
    seed = write_json(
        tmp_path / "seed.json",
        [make_location_dict(5, "E"), make_location_dict(2, "B"), make_location_dict(9, "I")],
    )
    store = LocationStore(data_file=data_file, seed_file=seed)
    store.load()
    store.save()
    assert [record["id"] for record in _read(data_file)] == [5, 2, 9]


def test_toggle_flips_and_persists(store: LocationStore, data_file: Path) -> None:
    store.load()
    result = store.toggle_completion(1)

    assert result.ok
    assert result.location is not None
    assert result.location.is_completed is True
    assert store.get(1).is_completed is True
    assert _read(data_file)[0]["isCompleted"] is True


def test_toggle_twice_restores_flag_and_other_fields(store: LocationStore) -> None:
    store.load()
    before = store.get(2)
    store.toggle_completion(2)
    store.toggle_completion(2)
    assert store.get(2) == before


def test_toggle_changes_only_the_matching_record(store: LocationStore) -> None:
    store.load()
    before = {location.id: location for location in store.locations}
    store.toggle_completion(1)
    after = {location.id: location for location in store.locations}
    assert after[2] == before[2]
    assert after[3] == before[3]
    assert after[1].name == before[1].name


def test_toggle_unknown_id_is_a_no_op(store: LocationStore, data_file: Path) -> None:
    store.load()
    before = store.locations

    result = store.toggle_completion(999)

    assert not result.ok
    assert result.kind is ErrorKind.NOT_FOUND
    assert store.locations == before
    assert not data_file.exists()


def test_toggle_unknown_id_leaves_existing_file_untouched(store: LocationStore, data_file: Path) -> None:
    store.load()
    store.save()
    snapshot = data_file.read_bytes()
    store.toggle_completion(42)
    assert data_file.read_bytes() == snapshot


def test_toggle_on_empty_store_does_not_raise(store: LocationStore) -> None:
    assert store.toggle_completion(1).kind is ErrorKind.NOT_FOUND


def test_toggle_bool_id_is_not_found(store: LocationStore, data_file: Path) -> None:
    store.load()
    before = store.locations

    result = store.toggle_completion(True)

    assert result.kind is ErrorKind.NOT_FOUND
    assert store.locations == before
    assert store.get(True) is None
    assert not data_file.exists()


def test_lone_surrogate_text_survives_toggle_and_reload(data_file: Path, tmp_path: Path) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text(
        '[{"id": 1, "name": "Old Faithful", "category": "Geyser", "city": "West Yellowstone",'
        ' "state": "Wyoming", "park": "Yellowstone National Park", "description": "Erupts \\ud83d",'
        ' "imageName": "oldfaithful", "isCompleted": false}]',
        encoding="utf-8",
    )
    store = LocationStore(data_file=data_file, seed_file=seed)
    assert store.load().ok

    result = store.toggle_completion(1)

    assert result.ok
    reloaded = LocationStore(data_file=data_file, seed_file=seed)
    assert reloaded.load().source == SOURCE_USER
    assert reloaded.locations == store.locations
    assert reloaded.get(1).description == "Erupts \ud83d"


def test_toggle_keeps_flip_when_save_fails(store: LocationStore, data_file: Path) -> None:
    store.load()
    data_file.mkdir(parents=True)

    result = store.toggle_completion(1)

    assert result.kind is ErrorKind.WRITE_FAILURE
    assert result.location is not None
    assert store.get(1).is_completed is True
    assert list(data_file.parent.glob("*.tmp")) == []


def test_failure_result_carries_error_kind_and_path(data_file: Path) -> None:
    result = StoreResult.failure(WriteFailure("disk full", data_file))
    assert not result.ok
    assert result.kind is ErrorKind.WRITE_FAILURE
    assert result.path == data_file
    assert result.location is None
    assert "disk full" in result.message


def test_non_atomic_save_reports_write_failure(data_file: Path, seed_file: Path) -> None:
    store = LocationStore(data_file=data_file, seed_file=seed_file, atomic_save=False)
    store.load()
    data_file.mkdir(parents=True)
    assert store.save().kind is ErrorKind.WRITE_FAILURE


def test_atomic_save_leaves_no_temp_file(store: LocationStore, data_file: Path) -> None:
    store.load()
    store.save()
    assert sorted(path.name for path in data_file.parent.iterdir()) == [DATA_FILE_NAME]


def test_snapshot_copies_do_not_leak_into_store(store: LocationStore) -> None:
    store.load()
    snapshot = store.locations
    snapshot[0].is_completed = True
    snapshot[0].name = "Renamed"
    assert store.get(1).is_completed is False
    assert store.get(1).name == "Old Faithful"


def test_get_unknown_id_returns_none(store: LocationStore) -> None:
    store.load()
    assert store.get(404) is None


def test_completed_count(store: LocationStore) -> None:
    store.load()
    assert store.completed_count() == 1
    store.toggle_completion(1)
    assert store.completed_count() == 2


def test_subscribers_notified_on_load_and_toggle(store: LocationStore) -> None:
    received: list[tuple] = []
    store.subscribe(received.append)

    store.load()
    store.toggle_completion(1)

    assert len(received) == 2
    assert len(received[0]) == 3
    assert received[1][0].is_completed is True


def test_subscribers_not_notified_for_unknown_id_or_failed_load(store: LocationStore, data_file: Path) -> None:
    data_file.parent.mkdir(parents=True)
    data_file.write_text("oops", encoding="utf-8")
    received: list[tuple] = []
    store.subscribe(received.append)

    store.load()
    store.toggle_completion(1)

    assert received == []


def test_unsubscribe_stops_notifications(store: LocationStore) -> None:
    received: list[tuple] = []
    unsubscribe = store.subscribe(received.append)
    unsubscribe()
    unsubscribe()
    store.load()
    assert received == []


def test_failing_subscriber_does_not_break_others(store: LocationStore) -> None:
    def _broken(snapshot) -> None:
        raise RuntimeError("boom")

    received: list[tuple] = []
    store.subscribe(_broken)
    store.subscribe(received.append)

    assert store.load().ok
    assert len(received) == 1


def test_default_data_dir_holds_persisted_file(tmp_path: Path, seed_file: Path) -> None:
    store = LocationStore(data_dir=tmp_path / "appdata", seed_file=seed_file)
    store.load()
    store.toggle_completion(1)
    assert (tmp_path / "appdata" / DATA_FILE_NAME).exists()


@pytest.mark.parametrize("first_toggle_count", [1, 3])
def test_old_faithful_scenario(tmp_path: Path, write_json, first_toggle_count: int) -> None:
    seed = write_json(tmp_path / "bundle" / DATA_FILE_NAME, [make_location_dict(1, "Old Faithful")])
    data_file = tmp_path / "documents" / DATA_FILE_NAME

    first = LocationStore(data_file=data_file, seed_file=seed)
    assert first.load().source == SOURCE_SEED
    assert len(first) == 1
    assert first.get(1).is_completed is False

    for _ in range(first_toggle_count):
        first.toggle_completion(1)
    assert first.get(1).is_completed is True

    second = LocationStore(data_file=data_file, seed_file=seed)
    assert second.load().source == SOURCE_USER
    assert len(second) == 1
    assert second.get(1).is_completed is True
