# quote_scribe/adapters/persistence/storage_medium.py
import os
import re
from pathlib import Path
from typing import Dict, List, Optional
import structlog

from quote_scribe.core.ports.storage_medium import IStorageMedium
from quote_scribe.shared.config import StorageBackend

logger = structlog.get_logger()

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")

# --- Medium Errors ---

class StorageMediumError(Exception):
    """Base class for failures of the raw storage medium."""
    pass

class StorageQuotaExceededError(StorageMediumError):
    """Raised when a write would push the medium past its quota."""
    def __init__(self, key: str, required: int, quota: int):
        self.key = key
        self.required = required
        self.quota = quota
        super().__init__(f"Quota exceeded writing '{key}': {required} > {quota}")


def _check_quota(key: str, value: str, used_by_others: int, quota: int) -> None:
    # Usage is counted in characters of key + value, like the browser medium
    if quota <= 0:
        return
    required = used_by_others + len(key) + len(value)
    if required > quota:
        raise StorageQuotaExceededError(key, required, quota)


class InMemoryStorageMedium(IStorageMedium):
    """
    Dict-backed medium. Nothing survives the process.
    """

    def __init__(self, quota_bytes: int = 0):
        self.quota_bytes = quota_bytes
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        used = sum(len(k) + len(v) for k, v in self._items.items() if k != key)
        _check_quota(key, value, used, self.quota_bytes)
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._items)

    def health_check(self) -> bool:
        return True


class FileSystemStorageMedium(IStorageMedium):
    """
    Concrete medium storing each key as a UTF-8 file under base_path.
    Structure: {base_path}/{key}.json
    """

    SUFFIX = ".json"

    def __init__(self, base_path: str, quota_bytes: int = 0):
        self.base_path = Path(base_path)
        self.quota_bytes = quota_bytes
        try:
            self._ensure_directory()
        except StorageMediumError as e:
            # Reported through health_check; writes retry the directory
            logger.error("storage_directory_unavailable", path=str(self.base_path), error=str(e))

    def _ensure_directory(self) -> None:
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageMediumError(f"Could not create '{self.base_path}': {e}") from e

    def _get_file_path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise StorageMediumError(f"Invalid storage key: {key!r}")
        return self.base_path / f"{key}{self.SUFFIX}"

    def get_item(self, key: str) -> Optional[str]:
        path = self._get_file_path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageMediumError(f"Could not read '{key}': {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._get_file_path(key)
        _check_quota(key, value, self._usage(excluding=key), self.quota_bytes)
        self._ensure_directory()

        # Write to a sibling temp file first so a crash never leaves half a record
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, path)
        except OSError as e:
            raise StorageMediumError(f"Could not write '{key}': {e}") from e

    def remove_item(self, key: str) -> None:
        path = self._get_file_path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageMediumError(f"Could not remove '{key}': {e}") from e

    def keys(self) -> List[str]:
        return sorted(p.name[: -len(self.SUFFIX)] for p in self.base_path.glob(f"*{self.SUFFIX}"))

    def _usage(self, excluding: str) -> int:
        if self.quota_bytes <= 0:
            return 0
        used = 0
        for key in self.keys():
            if key == excluding:
                continue
            value = self.get_item(key) or ""
            used += len(key) + len(value)
        return used

    def health_check(self) -> bool:
        """Checks if the storage directory is accessible."""
        return self.base_path.is_dir() and os.access(self.base_path, os.R_OK | os.W_OK)


def build_storage_medium(backend, base_path: str, quota_bytes: int = 0) -> IStorageMedium:
    """Chooses the medium named by the STORAGE_BACKEND setting."""
    backend = StorageBackend(backend)
    logger.info("storage_medium_selected", backend=backend.value, path=base_path)
    if backend == StorageBackend.MEMORY:
        return InMemoryStorageMedium(quota_bytes=quota_bytes)
    return FileSystemStorageMedium(base_path=base_path, quota_bytes=quota_bytes)
