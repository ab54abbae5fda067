# quote_scribe/adapters/persistence/json_adapter.py
import json
from typing import Any, Iterable
import structlog

from quote_scribe.core.ports.key_value_store import IKeyValueStore
from quote_scribe.core.ports.storage_medium import IStorageMedium
from quote_scribe.adapters.persistence.storage_medium import StorageMediumError

logger = structlog.get_logger()

class JsonStorageAdapter(IKeyValueStore):
    """
    Persistence Adapter: typed get/set/remove over a raw string medium.

    This is the only place storage failures are handled. Quota errors,
    serialization errors and an unavailable medium are logged here and
    reported as False (or the read default); nothing is raised past it.
    """

    def __init__(self, medium: IStorageMedium):
        self.medium = medium

    def write(self, key: str, value: Any) -> bool:
        try:
            payload = json.dumps(value, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            logger.error("storage_serialize_failed", key=key, error=str(e))
            return False

        try:
            self.medium.set_item(key, payload)
        except StorageMediumError as e:
            logger.error("storage_write_failed", key=key, error=str(e))
            return False
        return True

    def read(self, key: str, default: Any = None) -> Any:
        try:
            raw = self.medium.get_item(key)
        except StorageMediumError as e:
            logger.error("storage_read_failed", key=key, error=str(e))
            return default

        if raw is None:
            return default

        try:
            return json.loads(raw)
        except ValueError as e:
            # Corrupt is treated exactly like absent
            logger.warning("storage_value_corrupt", key=key, error=str(e))
            return default

    def remove(self, key: str) -> bool:
        try:
            self.medium.remove_item(key)
        except StorageMediumError as e:
            logger.error("storage_remove_failed", key=key, error=str(e))
            return False
        return True

    def clear_all(self, known_keys: Iterable[str]) -> bool:
        results = [self.remove(key) for key in known_keys]
        cleared = all(results)
        logger.info("storage_cleared", keys=len(results), success=cleared)
        return cleared

    def health_check(self) -> bool:
        try:
            return self.medium.health_check()
        except StorageMediumError as e:
            logger.error("storage_health_failed", error=str(e))
            return False
