# quote_scribe\core\ports\storage_medium.py
from typing import List, Optional, Protocol

class IStorageMedium(Protocol):
    """
    Port for the durable, synchronous, string-keyed storage medium.
    Implementations:
    - InMemoryStorageMedium (tests, ephemeral runs)
    - FileSystemStorageMedium (one file per key)

    Implementations signal failures with StorageMediumError (or its
    StorageQuotaExceededError subclass). Only the Persistence Adapter
    talks to a medium.
    """

    def get_item(self, key: str) -> Optional[str]:
        """Returns the raw stored text, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Stores raw text under key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Deletes key. Removing an absent key is not an error."""
        ...

    def keys(self) -> List[str]:
        """Lists every key currently stored."""
        ...

    def health_check(self) -> bool:
        """Returns True if the medium is readable and writable."""
        ...
