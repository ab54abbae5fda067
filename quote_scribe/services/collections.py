# quote_scribe/services/collections.py
from typing import Generic, List, Optional, Type, TypeVar
import structlog
from pydantic import BaseModel, ValidationError

from quote_scribe.core.domain.models import (
    Quote,
    QuotePatch,
    Reflection,
    ReflectionPatch,
    StorageKey,
)
from quote_scribe.core.ports.key_value_store import IKeyValueStore

logger = structlog.get_logger()

EntityT = TypeVar("EntityT", bound=BaseModel)
PatchT = TypeVar("PatchT", bound=BaseModel)


class EntityCollection(Generic[EntityT, PatchT]):
    """
    One insertion-ordered collection stored as a JSON array under one key.

    Newest entities are prepended, so storage order is display order.
    Nothing is cached: every call re-reads, mutates and writes back.
    Mutators return the boolean outcome of the underlying write.
    """

    def __init__(self, storage: IKeyValueStore, key: StorageKey, model: Type[EntityT]):
        self.storage = storage
        self.key = key
        self.model = model

    # --- Serialization ---

    def _load(self) -> List[EntityT]:
        raw = self.storage.read(self.key.value, [])
        if not isinstance(raw, list):
            logger.warning("collection_not_a_list", key=self.key.value, type=type(raw).__name__)
            return []

        items: List[EntityT] = []
        for entry in raw:
            try:
                items.append(self.model.model_validate(entry))
            except ValidationError as e:
                logger.warning("collection_entry_skipped", key=self.key.value, error=str(e))
        return items

    def _save(self, items: List[EntityT]) -> bool:
        payload = [item.model_dump(mode="json", by_alias=True) for item in items]
        return self.storage.write(self.key.value, payload)

    # --- CRUD ---

    def create(self, entity: EntityT) -> bool:
        items = self._load()
        if any(item.id == entity.id for item in items):
            logger.warning("entity_duplicate_id", key=self.key.value, id=entity.id)
            return False
        items.insert(0, entity)
        return self._save(items)

    def get_all(self) -> List[EntityT]:
        return self._load()

    def get(self, entity_id: str) -> Optional[EntityT]:
        for item in self._load():
            if item.id == entity_id:
                return item
        return None

    def update(self, entity_id: str, patch: PatchT) -> bool:
        items = self._load()
        for index, item in enumerate(items):
            if item.id == entity_id:
                items[index] = patch.apply_to(item)
                return self._save(items)
        logger.info("entity_update_missing", key=self.key.value, id=entity_id)
        return False

    def delete(self, entity_id: str) -> bool:
        items = self._load()
        remaining = [item for item in items if item.id != entity_id]
        if len(remaining) == len(items):
            return True
        return self._save(remaining)

    def replace_all(self, entities: List[EntityT]) -> bool:
        """Wholesale replacement, used by snapshot import."""
        return self._save(entities)


class FavoriteSet:
    """
    The authoritative set of favorite Quote ids, kept in insertion order.

    Membership is the only source of favorite status. Reads that return
    quotes filter against the live quote collection, so a dangling id left
    by an interrupted delete is never surfaced.
    """

    def __init__(self, storage: IKeyValueStore, quotes: "QuoteCollection"):
        self.storage = storage
        self.quotes = quotes

    def _load(self) -> List[str]:
        raw = self.storage.read(StorageKey.FAVORITES.value, [])
        if not isinstance(raw, list):
            return []
        ids: List[str] = []
        for quote_id in raw:
            if isinstance(quote_id, str) and quote_id not in ids:
                ids.append(quote_id)
        return ids

    def _save(self, ids: List[str]) -> bool:
        return self.storage.write(StorageKey.FAVORITES.value, ids)

    def add(self, quote_id: str) -> bool:
        ids = self._load()
        if quote_id in ids:
            return True
        if self.quotes.get(quote_id) is None:
            logger.warning("favorite_add_unknown_quote", id=quote_id)
            return False
        ids.append(quote_id)
        return self._save(ids)

    def remove(self, quote_id: str) -> bool:
        ids = self._load()
        if quote_id not in ids:
            return True
        return self._save([i for i in ids if i != quote_id])

    def contains(self, quote_id: str) -> bool:
        return quote_id in self._load()

    def list(self) -> List[str]:
        return self._load()

    def toggle(self, quote_id: str) -> Optional[bool]:
        """
        Flips membership. Returns the new state, or None if the write failed.
        """
        if self.contains(quote_id):
            return False if self.remove(quote_id) else None
        return True if self.add(quote_id) else None

    def resolve(self) -> List[Quote]:
        ids = set(self._load())
        return [quote for quote in self.quotes.get_all() if quote.id in ids]

    def prune(self) -> bool:
        """Drops ids that no longer name a live quote."""
        ids = self._load()
        live = {quote.id for quote in self.quotes.get_all()}
        kept = [i for i in ids if i in live]
        if len(kept) == len(ids):
            return True
        logger.info("favorites_pruned", removed=len(ids) - len(kept))
        return self._save(kept)

    def replace_all(self, ids: List[str]) -> bool:
        return self._save(ids)


class QuoteCollection(EntityCollection[Quote, QuotePatch]):
    """
    Quotes plus their favorite set. Deleting a quote also removes it from
    the favorites; the two writes are issued together but are not atomic.
    """

    def __init__(self, storage: IKeyValueStore):
        super().__init__(storage, StorageKey.QUOTES, Quote)
        self.favorites = FavoriteSet(storage, self)

    def delete(self, entity_id: str) -> bool:
        deleted = super().delete(entity_id)
        unfavorited = self.favorites.remove(entity_id)
        return deleted and unfavorited


class ReflectionCollection(EntityCollection[Reflection, ReflectionPatch]):
    """
    Reflections are not removed when their quote is deleted; the dangling
    reference is kept for display.
    """

    def __init__(self, storage: IKeyValueStore, quotes: QuoteCollection):
        super().__init__(storage, StorageKey.REFLECTIONS, Reflection)
        self.quotes = quotes

    def list_for_quote(self, quote_id: str) -> List[Reflection]:
        # A deleted quote matches nothing, even if reflections still point at it
        if self.quotes.get(quote_id) is None:
            return []
        return [r for r in self._load() if r.quote_id == quote_id]
