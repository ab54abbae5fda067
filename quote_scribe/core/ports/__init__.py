# quote_scribe\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement. These interfaces allow the core to interact with the outside
world (storage medium, remote generation service) without knowing the
implementation details.
"""

from .storage_medium import IStorageMedium
from .key_value_store import IKeyValueStore
from .quote_generator import IQuoteGenerator, QuoteGeneratorFactory

__all__ = [
    "IStorageMedium",
    "IKeyValueStore",
    "IQuoteGenerator",
    "QuoteGeneratorFactory",
]
