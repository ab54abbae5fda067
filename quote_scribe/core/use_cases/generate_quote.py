# quote_scribe/core/use_cases/generate_quote.py
import structlog
from typing import Optional

from quote_scribe.core.domain.exceptions import GenerationError, MissingCredentialError
from quote_scribe.core.ports.quote_generator import QuoteGeneratorFactory
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class GenerateQuote:
    """
    Use Case: asks the remote service for a new quote.

    Responsibilities:
    1. Reads the stored credential (the only source of it).
    2. Builds a Generation Client bound to that credential via the factory.
    3. Returns the cleaned text. Nothing is saved; the user decides that.
    """

    def __init__(self, store: EntityStore, generator_factory: QuoteGeneratorFactory):
        self.store = store
        self.generator_factory = generator_factory

    async def execute(self, prompt: Optional[str] = None) -> str:
        with tracer.start_as_current_span("use_case.generate_quote") as span:
            api_key = self.store.credential.get()
            if not api_key:
                raise MissingCredentialError()

            prompt = (prompt or "").strip() or None
            span.set_attribute("app.custom_prompt", prompt is not None)
            logger.info("quote_generation_started", custom_prompt=prompt is not None)

            generator = self.generator_factory(api_key=api_key)
            try:
                text = await generator.generate_quote(prompt)
            except GenerationError as e:
                logger.warning("quote_generation_failed", error_type=type(e).__name__, error=e.message)
                raise

            span.set_attribute("app.quote_length", len(text))
            return text
