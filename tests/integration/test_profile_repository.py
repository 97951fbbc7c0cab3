"""
Integration tests for the profile repositories.

These tests verify:
1. Profiles round-trip through the JSON key-value file
2. Other keys in the shared file survive writes and clears
3. Corrupt or non-finite snapshots surface as ProfileStorageException
4. A failed write leaves no temp file behind
"""

import json

import pytest

from kuberx.domain.exceptions import ProfileStorageException
from kuberx.infrastructure.repositories import (
    InMemoryProfileRepository,
    JsonFileProfileRepository,
)


# =============================================================================
# JSON File Repository Tests
# =============================================================================

class TestJsonFileProfileRepository:
    """Tests for JsonFileProfileRepository."""

    def test_missing_file_means_no_profile(self, json_repository):
        assert json_repository.load_profile() is None

    def test_save_and_load(self, json_repository, healthy_profile):
        json_repository.save_profile(healthy_profile)

        assert json_repository.load_profile() == healthy_profile

    def test_snapshot_stored_under_storage_key(self, json_repository, default_profile):
        json_repository.save_profile(default_profile)

        store = json.loads(json_repository.path.read_text(encoding="utf-8"))
        assert store["kuberx-profile"]["monthlySalary"] == 50000

    def test_custom_storage_key(self, tmp_path, default_profile):
        repo = JsonFileProfileRepository(path=tmp_path / "s.json", storage_key="other")
        repo.save_profile(default_profile)

        store = json.loads((tmp_path / "s.json").read_text(encoding="utf-8"))
        assert list(store) == ["other"]

    def test_other_keys_are_preserved(self, json_repository, default_profile):
        json_repository.path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

        json_repository.save_profile(default_profile)
        json_repository.clear()

        store = json.loads(json_repository.path.read_text(encoding="utf-8"))
        assert store == {"theme": "dark"}

    def test_clear_removes_profile(self, json_repository, default_profile):
        json_repository.save_profile(default_profile)
        json_repository.clear()

        assert json_repository.load_profile() is None

    def test_clear_without_file_is_noop(self, json_repository):
        json_repository.clear()
        assert not json_repository.path.exists()

    def test_creates_parent_directories(self, tmp_path, default_profile):
        repo = JsonFileProfileRepository(path=tmp_path / "nested" / "dir" / "store.json")
        repo.save_profile(default_profile)

        assert repo.load_profile() == default_profile

    def test_invalid_json_raises(self, json_repository):
        json_repository.path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ProfileStorageException):
            json_repository.load_profile()

    def test_non_object_store_raises(self, json_repository):
        json_repository.path.write_text("[1, 2, 3]", encoding="utf-8")

        with pytest.raises(ProfileStorageException, match="not a JSON object"):
            json_repository.load_profile()

    def test_invalid_snapshot_raises(self, json_repository):
        json_repository.path.write_text(
            json.dumps({"kuberx-profile": {"name": "x"}}),
            encoding="utf-8",
        )

        with pytest.raises(ProfileStorageException) as exc_info:
            json_repository.load_profile()

        assert exc_info.value.code == "PROFILE_STORAGE_ERROR"
        assert "missing keys" in exc_info.value.message

    def test_non_finite_snapshot_raises(self, json_repository, default_profile):
        snapshot = default_profile.to_dict()
        snapshot["monthlySalary"] = float("nan")
        json_repository.path.write_text(
            json.dumps({"kuberx-profile": snapshot}),
            encoding="utf-8",
        )

        with pytest.raises(ProfileStorageException, match="monthly_salary must be finite"):
            json_repository.load_profile()

    def test_failed_write_leaves_no_temp_file(
        self,
        json_repository,
        default_profile,
        tmp_path,
        monkeypatch,
    ):
        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(
            "kuberx.infrastructure.repositories.json_profile_repository.os.replace",
            fail_replace,
        )

        with pytest.raises(ProfileStorageException, match="disk full"):
            json_repository.save_profile(default_profile)

        assert list(tmp_path.iterdir()) == []


# =============================================================================
# In-Memory Repository Tests
# =============================================================================

class TestInMemoryProfileRepository:
    """Tests for InMemoryProfileRepository."""

    def test_starts_empty(self):
        assert InMemoryProfileRepository().load_profile() is None

    def test_seeded_profile(self, healthy_profile):
        assert InMemoryProfileRepository(healthy_profile).load_profile() == healthy_profile

    def test_save_and_clear(self, default_profile):
        repo = InMemoryProfileRepository()
        repo.save_profile(default_profile)
        assert repo.load_profile() == default_profile

        repo.clear()
        assert repo.load_profile() is None
