# quote_scribe/core/use_cases/credentials.py
import structlog

from quote_scribe.core.domain.exceptions import (
    AuthenticationError,
    InvalidCredentialFormatError,
    MissingCredentialError,
    StorageWriteError,
)
from quote_scribe.core.ports.quote_generator import QuoteGeneratorFactory
from quote_scribe.services.credentials import CredentialHolder
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class SaveCredential:
    """
    Use Case: checks a new API key locally and remotely, then stores it.
    Returns the masked form for display.
    """

    def __init__(self, store: EntityStore, generator_factory: QuoteGeneratorFactory):
        self.store = store
        self.generator_factory = generator_factory

    async def execute(self, api_key: str) -> str:
        with tracer.start_as_current_span("use_case.save_credential"):
            api_key = (api_key or "").strip()
            if not CredentialHolder.is_valid_format(api_key):
                raise InvalidCredentialFormatError()

            accepted = await self.generator_factory(api_key=api_key).validate_credential()
            if not accepted:
                raise AuthenticationError("Invalid API key")

            if not self.store.credential.set(api_key):
                raise StorageWriteError("save API key")

            return self.store.credential.masked()


class TestCredential:
    """Use Case: asks the remote service whether the stored key is accepted."""

    # Keep pytest from collecting this as a test class
    __test__ = False

    def __init__(self, store: EntityStore, generator_factory: QuoteGeneratorFactory):
        self.store = store
        self.generator_factory = generator_factory

    async def execute(self) -> bool:
        with tracer.start_as_current_span("use_case.test_credential") as span:
            api_key = self.store.credential.get()
            if not api_key:
                raise MissingCredentialError()

            valid = await self.generator_factory(api_key=api_key).validate_credential()
            span.set_attribute("app.credential_valid", valid)
            logger.info("credential_tested", valid=valid)
            return valid


class DeleteCredential:
    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self) -> None:
        with tracer.start_as_current_span("use_case.delete_credential"):
            if not self.store.credential.remove():
                raise StorageWriteError("delete API key")
