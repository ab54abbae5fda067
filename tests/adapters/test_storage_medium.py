# tests\adapters\test_storage_medium.py
import pytest

from quote_scribe.adapters.persistence.storage_medium import (
    FileSystemStorageMedium,
    InMemoryStorageMedium,
    StorageMediumError,
    StorageQuotaExceededError,
    build_storage_medium,
)
from quote_scribe.shared.config import StorageBackend


class TestInMemoryStorageMedium:

    def test_set_get_remove(self):
        medium = InMemoryStorageMedium()
        medium.set_item("k", "v")

        assert medium.get_item("k") == "v"
        assert medium.keys() == ["k"]

        medium.remove_item("k")
        medium.remove_item("k")
        assert medium.get_item("k") is None

    def test_quota_counts_key_and_value(self):
        medium = InMemoryStorageMedium(quota_bytes=10)
        medium.set_item("ab", "12345678")

        with pytest.raises(StorageQuotaExceededError):
            medium.set_item("c", "1")

    def test_quota_ignores_value_being_replaced(self):
        medium = InMemoryStorageMedium(quota_bytes=10)
        medium.set_item("ab", "12345678")
        medium.set_item("ab", "87654321")

        assert medium.get_item("ab") == "87654321"


class TestFileSystemStorageMedium:

    def test_one_file_per_key(self, tmp_path):
        medium = FileSystemStorageMedium(str(tmp_path))
        medium.set_item("quote_scribe_quotes", "[]")

        assert (tmp_path / "quote_scribe_quotes.json").read_text(encoding="utf-8") == "[]"
        assert medium.get_item("quote_scribe_quotes") == "[]"
        assert medium.keys() == ["quote_scribe_quotes"]

    def test_no_temp_file_left_behind(self, tmp_path):
        medium = FileSystemStorageMedium(str(tmp_path))
        medium.set_item("k", "v")

        assert sorted(p.name for p in tmp_path.iterdir()) == ["k.json"]

    def test_survives_a_new_instance(self, tmp_path):
        FileSystemStorageMedium(str(tmp_path)).set_item("k", "\"é\"")
        assert FileSystemStorageMedium(str(tmp_path)).get_item("k") == "\"é\""

    def test_missing_key(self, tmp_path):
        medium = FileSystemStorageMedium(str(tmp_path))
        assert medium.get_item("absent") is None
        medium.remove_item("absent")

    def test_rejects_path_like_keys(self, tmp_path):
        medium = FileSystemStorageMedium(str(tmp_path / "store"))
        with pytest.raises(StorageMediumError):
            medium.set_item("../escape", "x")

    def test_quota(self, tmp_path):
        medium = FileSystemStorageMedium(str(tmp_path), quota_bytes=5)
        with pytest.raises(StorageQuotaExceededError):
            medium.set_item("key", "value")
        assert medium.get_item("key") is None

    def test_creates_base_directory_and_is_healthy(self, tmp_path):
        medium = FileSystemStorageMedium(str(tmp_path / "nested" / "dir"))
        assert medium.health_check()


class TestBuildStorageMedium:

    def test_memory_backend(self, tmp_path):
        medium = build_storage_medium("memory", str(tmp_path / "unused"))
        assert isinstance(medium, InMemoryStorageMedium)
        assert not (tmp_path / "unused").exists()

    def test_filesystem_backend(self, tmp_path):
        medium = build_storage_medium(StorageBackend.FILESYSTEM, str(tmp_path), quota_bytes=100)
        assert isinstance(medium, FileSystemStorageMedium)
        assert medium.quota_bytes == 100

    def test_unknown_backend(self, tmp_path):
        with pytest.raises(ValueError):
            build_storage_medium("redis", str(tmp_path))


class TestUnusableDirectory:

    @pytest.fixture
    def blocked_path(self, tmp_path):
        # A regular file where the storage directory's parent should be
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")
        return str(blocker / "storage")

    def test_construction_does_not_raise(self, blocked_path):
        medium = FileSystemStorageMedium(blocked_path)

        assert not medium.health_check()
        assert medium.get_item("key") is None
        assert medium.keys() == []

    def test_writes_fail_as_medium_errors(self, blocked_path):
        medium = FileSystemStorageMedium(blocked_path)

        with pytest.raises(StorageMediumError):
            medium.set_item("key", "value")

    def test_directory_is_retried_on_write(self, tmp_path):
        medium = FileSystemStorageMedium(str(tmp_path / "later"))
        (tmp_path / "later").rmdir()

        medium.set_item("key", "value")

        assert medium.get_item("key") == "value"
