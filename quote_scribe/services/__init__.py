# quote_scribe\services\__init__.py
"""
The Entity Store.

Collections of quotes, favorites and reflections built on the Persistence
Adapter, plus the credential holder and preference records.
"""

from .collections import EntityCollection, FavoriteSet, QuoteCollection, ReflectionCollection
from .credentials import CredentialHolder
from .entity_store import EntityStore

__all__ = [
    "EntityCollection",
    "FavoriteSet",
    "QuoteCollection",
    "ReflectionCollection",
    "CredentialHolder",
    "EntityStore",
]
