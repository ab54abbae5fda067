# quote_scribe/core/domain/identifiers.py
import uuid
from datetime import datetime, timezone
from typing import Protocol


class IdGenerator(Protocol):
    """
    Generates an identifier unique across the lifetime of the store
    with overwhelming probability.
    """

    def new_id(self) -> str:
        ...


class UUIDGenerator:
    """Random (version 4) UUIDs rendered as canonical strings."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


def utc_now() -> datetime:
    """Timezone-aware creation timestamp."""
    return datetime.now(timezone.utc)
