# quote_scribe/services/credentials.py
import structlog

from quote_scribe.core.domain.models import StorageKey
from quote_scribe.core.ports.key_value_store import IKeyValueStore

logger = structlog.get_logger()

CREDENTIAL_PREFIX = "sk-or-"
CREDENTIAL_MIN_LENGTH = 21


class CredentialHolder:
    """
    The OpenRouter API key, stored in plaintext through the Persistence
    Adapter under its own key. Single local user, no encryption.
    """

    def __init__(self, storage: IKeyValueStore):
        self.storage = storage

    @staticmethod
    def is_valid_format(value) -> bool:
        return (
            isinstance(value, str)
            and len(value) >= CREDENTIAL_MIN_LENGTH
            and value.startswith(CREDENTIAL_PREFIX)
        )

    def get(self) -> str:
        value = self.storage.read(StorageKey.API_KEY.value, "")
        return value if isinstance(value, str) else ""

    def has(self) -> bool:
        return len(self.get()) > 0

    def set(self, value: str) -> bool:
        saved = self.storage.write(StorageKey.API_KEY.value, value)
        logger.info("credential_saved", success=saved)
        return saved

    def remove(self) -> bool:
        removed = self.storage.remove(StorageKey.API_KEY.value)
        logger.info("credential_removed", success=removed)
        return removed

    def masked(self) -> str:
        value = self.get()
        if not value:
            return ""
        if len(value) <= 10:
            return "*" * len(value)
        return f"{value[:6]}...{value[-4:]}"
