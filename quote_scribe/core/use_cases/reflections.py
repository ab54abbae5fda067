# quote_scribe/core/use_cases/reflections.py
from typing import Optional
import structlog

from quote_scribe.core.domain.exceptions import (
    EmptyTextError,
    MissingQuoteReferenceError,
    QuoteNotFoundError,
    ReflectionNotFoundError,
    StorageWriteError,
)
from quote_scribe.core.domain.identifiers import IdGenerator, utc_now
from quote_scribe.core.domain.models import Reflection, ReflectionPatch
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class SaveReflection:
    """
    Use Case: attaches a new reflection to a quote.

    The quote must exist when the reflection is written; afterwards the
    link is allowed to dangle.
    """

    def __init__(self, store: EntityStore, id_generator: IdGenerator):
        self.store = store
        self.id_generator = id_generator

    def execute(self, quote_id: Optional[str], text: str) -> Reflection:
        with tracer.start_as_current_span("use_case.save_reflection") as span:
            if not quote_id or not quote_id.strip():
                raise MissingQuoteReferenceError()

            body = (text or "").strip()
            if not body:
                raise EmptyTextError("reflection")

            if self.store.quotes.get(quote_id) is None:
                raise QuoteNotFoundError(quote_id)

            reflection = Reflection(
                id=self.id_generator.new_id(),
                quote_id=quote_id,
                text=body,
                created_at=utc_now(),
            )
            span.set_attribute("app.reflection_id", reflection.id)

            if not self.store.reflections.create(reflection):
                raise StorageWriteError("save reflection")

            logger.info("reflection_saved", reflection_id=reflection.id, quote_id=quote_id)
            return reflection


class UpdateReflection:
    """Use Case: merge-patches a reflection; relinking requires a live quote."""

    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self, reflection_id: str, patch: ReflectionPatch) -> Reflection:
        with tracer.start_as_current_span("use_case.update_reflection") as span:
            span.set_attribute("app.reflection_id", reflection_id)

            if patch.text is not None:
                body = patch.text.strip()
                if not body:
                    raise EmptyTextError("reflection")
                patch = patch.model_copy(update={"text": body})

            if patch.quote_id is not None and self.store.quotes.get(patch.quote_id) is None:
                raise QuoteNotFoundError(patch.quote_id)

            if self.store.reflections.get(reflection_id) is None:
                raise ReflectionNotFoundError(reflection_id)

            if not self.store.reflections.update(reflection_id, patch):
                raise StorageWriteError("update reflection")

            logger.info("reflection_updated", reflection_id=reflection_id)
            return self.store.reflections.get(reflection_id)


class DeleteReflection:
    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self, reflection_id: str) -> None:
        with tracer.start_as_current_span("use_case.delete_reflection"):
            if not self.store.reflections.delete(reflection_id):
                raise StorageWriteError("delete reflection")
            logger.info("reflection_deleted", reflection_id=reflection_id)
