# quote_scribe/core/use_cases/favorites.py
import structlog

from quote_scribe.core.domain.exceptions import QuoteNotFoundError, StorageWriteError
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class AddFavorite:
    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self, quote_id: str) -> None:
        with tracer.start_as_current_span("use_case.add_favorite"):
            if self.store.quotes.get(quote_id) is None:
                raise QuoteNotFoundError(quote_id)
            if not self.store.favorites.add(quote_id):
                raise StorageWriteError("add favorite")
            logger.info("favorite_added", quote_id=quote_id)


class RemoveFavorite:
    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self, quote_id: str) -> None:
        with tracer.start_as_current_span("use_case.remove_favorite"):
            if not self.store.favorites.remove(quote_id):
                raise StorageWriteError("remove favorite")
            logger.info("favorite_removed", quote_id=quote_id)


class ToggleFavorite:
    """Use Case: flips favorite membership of a live quote, returning the new state."""

    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self, quote_id: str) -> bool:
        with tracer.start_as_current_span("use_case.toggle_favorite") as span:
            span.set_attribute("app.quote_id", quote_id)
            if self.store.quotes.get(quote_id) is None:
                raise QuoteNotFoundError(quote_id)

            state = self.store.favorites.toggle(quote_id)
            if state is None:
                raise StorageWriteError("toggle favorite")

            logger.info("favorite_toggled", quote_id=quote_id, is_favorite=state)
            return state
