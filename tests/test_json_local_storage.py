"""Tests for the file-backed local storage."""

from carbon_tracker.adapters.json_local_storage import JsonFileLocalStorage


def test_values_persist_across_instances(tmp_path) -> None:
    path = tmp_path / "nested" / "storage.json"
    JsonFileLocalStorage(path).set_item("guestMode", "true")

    storage = JsonFileLocalStorage(path)

    assert storage.get_item("guestMode") == "true"
    storage.remove_item("guestMode")
    assert JsonFileLocalStorage(path).get_item("guestMode") is None


def test_missing_or_corrupt_file_reads_empty(tmp_path) -> None:
    path = tmp_path / "storage.json"
    storage = JsonFileLocalStorage(path)
    assert storage.get_item("guestEntries") is None

    path.write_text("[1, 2", encoding="utf-8")

    assert storage.get_item("guestEntries") is None
    storage.set_item("guestEntries", "[]")
    assert storage.get_item("guestEntries") == "[]"
