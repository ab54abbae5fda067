# quote_scribe/core/use_cases/quotes.py
import structlog

from quote_scribe.core.domain.exceptions import (
    EmptyTextError,
    QuoteNotFoundError,
    StorageWriteError,
)
from quote_scribe.core.domain.identifiers import IdGenerator, utc_now
from quote_scribe.core.domain.models import Quote, QuotePatch
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class SaveQuote:
    """
    Use Case: stores a new quote, either typed by the user or accepted
    from the generator.

    The id and creation timestamp are assigned here, never by the store.
    """

    def __init__(self, store: EntityStore, id_generator: IdGenerator):
        self.store = store
        self.id_generator = id_generator

    def execute(self, text: str) -> Quote:
        with tracer.start_as_current_span("use_case.save_quote") as span:
            body = (text or "").strip()
            if not body:
                raise EmptyTextError("quote")

            quote = Quote(id=self.id_generator.new_id(), text=body, created_at=utc_now())
            span.set_attribute("app.quote_id", quote.id)

            if not self.store.quotes.create(quote):
                raise StorageWriteError("save quote")

            logger.info("quote_saved", quote_id=quote.id, length=len(body))
            return quote


class UpdateQuote:
    """Use Case: merge-patches a stored quote and returns the fresh record."""

    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self, quote_id: str, patch: QuotePatch) -> Quote:
        with tracer.start_as_current_span("use_case.update_quote") as span:
            span.set_attribute("app.quote_id", quote_id)

            if patch.text is not None:
                body = patch.text.strip()
                if not body:
                    raise EmptyTextError("quote")
                patch = patch.model_copy(update={"text": body})

            if self.store.quotes.get(quote_id) is None:
                raise QuoteNotFoundError(quote_id)

            if not self.store.quotes.update(quote_id, patch):
                raise StorageWriteError("update quote")

            logger.info("quote_updated", quote_id=quote_id)
            return self.store.quotes.get(quote_id)


class DeleteQuote:
    """
    Use Case: removes a quote and its favorite membership.
    Reflections that point at it are kept. Deleting an absent id succeeds.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self, quote_id: str) -> None:
        with tracer.start_as_current_span("use_case.delete_quote") as span:
            span.set_attribute("app.quote_id", quote_id)
            if not self.store.quotes.delete(quote_id):
                raise StorageWriteError("delete quote")
            logger.info("quote_deleted", quote_id=quote_id)
