# quote_scribe/services/entity_store.py
from typing import Any, Callable, Dict, List
import structlog
from pydantic import TypeAdapter, ValidationError

from quote_scribe.core.domain.identifiers import utc_now
from quote_scribe.core.domain.models import (
    ImportResult,
    Quote,
    Reflection,
    Snapshot,
    StorageKey,
    StoreStats,
    Theme,
)
from quote_scribe.core.ports.key_value_store import IKeyValueStore
from quote_scribe.services.collections import (
    FavoriteSet,
    QuoteCollection,
    ReflectionCollection,
)
from quote_scribe.services.credentials import CredentialHolder

logger = structlog.get_logger()

_quote_list = TypeAdapter(List[Quote])
_reflection_list = TypeAdapter(List[Reflection])
_id_list = TypeAdapter(List[str])

CREDENTIAL_MASK = "***"


def _repeated_ids(items: list) -> List[str]:
    """Ids occurring more than once among entity records; favorites (plain ids) have none."""
    seen, repeated = set(), []
    for item in items:
        item_id = getattr(item, "id", None)
        if item_id is None:
            continue
        if item_id in seen and item_id not in repeated:
            repeated.append(item_id)
        seen.add(item_id)
    return repeated


class EntityStore:
    """
    The sole owner of the persisted collections.

    Quotes, favorites and reflections are exposed as collection objects;
    the aggregate operations (stats, snapshot, reset, preferences) live here
    because they span more than one record.
    """

    def __init__(self, storage: IKeyValueStore):
        self.storage = storage
        self.quotes = QuoteCollection(storage)
        self.favorites: FavoriteSet = self.quotes.favorites
        self.reflections = ReflectionCollection(storage, self.quotes)
        self.credential = CredentialHolder(storage)

    # --- Preferences ---

    def get_theme(self) -> Theme:
        raw = self.storage.read(StorageKey.THEME.value, Theme.AUTO.value)
        try:
            return Theme(raw)
        except ValueError:
            return Theme.AUTO

    def set_theme(self, theme: Theme) -> bool:
        return self.storage.write(StorageKey.THEME.value, Theme(theme).value)

    # --- Aggregates ---

    def stats(self) -> StoreStats:
        return StoreStats(
            total_quotes=len(self.quotes.get_all()),
            total_favorites=len(self.favorites.list()),
            total_reflections=len(self.reflections.get_all()),
            has_api_key=self.credential.has(),
        )

    def export_snapshot(self) -> Snapshot:
        return Snapshot(
            api_key=CREDENTIAL_MASK if self.credential.has() else None,
            quotes=self.quotes.get_all(),
            favorites=self.favorites.list(),
            reflections=self.reflections.get_all(),
            export_date=utc_now(),
        )

    def import_snapshot(self, data: Dict[str, Any]) -> ImportResult:
        """
        Replaces each collection present in `data`.

        Collections are handled one at a time; a failure in one is recorded
        and does not undo or block the others.
        """
        result = ImportResult()
        steps: List[tuple] = [
            ("quotes", _quote_list, self.quotes.replace_all),
            ("favorites", _id_list, self._replace_favorites),
            ("reflections", _reflection_list, self.reflections.replace_all),
        ]

        for name, adapter, writer in steps:
            if data.get(name) is None:
                continue
            self._import_one(result, name, data[name], adapter, writer)

        if result.ok:
            logger.info("snapshot_imported", collections=result.imported)
        else:
            logger.warning("snapshot_import_partial", imported=result.imported, failed=result.failed)
        return result

    def _import_one(
        self,
        result: ImportResult,
        name: str,
        payload: Any,
        adapter: TypeAdapter,
        writer: Callable[[list], bool],
    ) -> None:
        try:
            items = adapter.validate_python(payload)
        except ValidationError as e:
            result.failed[name] = f"invalid {name}: {e.error_count()} error(s)"
            return

        repeated = _repeated_ids(items)
        if repeated:
            result.failed[name] = f"duplicate ids in {name}: {', '.join(repeated)}"
            return

        if writer(items):
            result.imported.append(name)
        else:
            result.failed[name] = f"could not write {name}"

    def _replace_favorites(self, ids: List[str]) -> bool:
        unique: List[str] = []
        for quote_id in ids:
            if quote_id not in unique:
                unique.append(quote_id)
        return self.favorites.replace_all(unique)

    def clear_all(self) -> bool:
        """Full local reset of every record the application knows about."""
        return self.storage.clear_all([key.value for key in StorageKey])

    def health_check(self) -> bool:
        return self.storage.health_check()
