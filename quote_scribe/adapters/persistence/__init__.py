# quote_scribe\adapters\persistence\__init__.py
"""
Persistence Adapters.

This package implements the storage ports defined in the core.
It handles the translation between JSON-serializable values and the
underlying string-keyed medium.

Components:
- InMemoryStorageMedium / FileSystemStorageMedium: raw mediums (IStorageMedium).
- JsonStorageAdapter: the Persistence Adapter (IKeyValueStore).
"""

from .storage_medium import (
    FileSystemStorageMedium,
    InMemoryStorageMedium,
    StorageMediumError,
    StorageQuotaExceededError,
    build_storage_medium,
)
from .json_adapter import JsonStorageAdapter

__all__ = [
    "FileSystemStorageMedium",
    "InMemoryStorageMedium",
    "StorageMediumError",
    "StorageQuotaExceededError",
    "build_storage_medium",
    "JsonStorageAdapter",
]
