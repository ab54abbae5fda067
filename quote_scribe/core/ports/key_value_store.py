# quote_scribe\core\ports\key_value_store.py
from typing import Any, Iterable, Protocol

class IKeyValueStore(Protocol):
    """
    Port for the typed Persistence Adapter used by the Entity Store.

    No method raises: failures (quota, serialization, unavailable medium)
    are logged by the adapter and reported as False or as the default.
    """

    def write(self, key: str, value: Any) -> bool:
        """
        Serializes value and stores it under key.

        Returns:
            True on success, False on any storage or serialization failure.
        """
        ...

    def read(self, key: str, default: Any = None) -> Any:
        """
        Returns the deserialized value at key.
        Absent and corrupt values both yield `default`.
        """
        ...

    def remove(self, key: str) -> bool:
        """Deletes key. Idempotent: an absent key is a success."""
        ...

    def clear_all(self, known_keys: Iterable[str]) -> bool:
        """Removes every key the application recognizes (full local reset)."""
        ...

    def health_check(self) -> bool:
        ...
