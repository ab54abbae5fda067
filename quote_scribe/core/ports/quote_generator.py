# quote_scribe/core/ports/quote_generator.py
from typing import Any, Callable, Dict, List, Optional, Protocol

class IQuoteGenerator(Protocol):
    """
    Port for the remote text-generation service.
    Implementations: OpenRouterClient.
    """

    async def generate_quote(self, prompt: Optional[str] = None) -> str:
        """
        Requests one quote and returns its cleaned text.

        Raises:
            MissingCredentialError: no credential was configured.
            AuthenticationError: the service rejected the credential.
            NetworkError: the service could not be reached.
            EmptyResponseError: the answer carried no usable text.
        """
        ...

    async def validate_credential(self) -> bool:
        """Issues a minimal-cost request to confirm the credential is accepted."""
        ...

    async def list_models(self) -> List[Dict[str, Any]]:
        ...

    async def get_usage(self) -> Dict[str, Any]:
        ...


# Builds a generator bound to one credential (the key is read from the store per call)
QuoteGeneratorFactory = Callable[..., IQuoteGenerator]
