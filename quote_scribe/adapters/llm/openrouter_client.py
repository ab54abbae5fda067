# quote_scribe\adapters\llm\openrouter_client.py
import httpx
import structlog
from typing import Any, Dict, List, Optional

from quote_scribe.core.domain.exceptions import (
    AuthenticationError,
    EmptyResponseError,
    InsufficientCreditsError,
    MissingCredentialError,
    NetworkError,
    RateLimitError,
    UpstreamServiceError,
)
from quote_scribe.core.ports.quote_generator import IQuoteGenerator
from quote_scribe.adapters.llm.prompts import (
    BOILERPLATE_PREFIXES,
    DEFAULT_USER_PROMPT,
    QUOTE_PAIRS,
    SYSTEM_PROMPT,
    VALIDATION_PROMPT,
)
from quote_scribe.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


def clean_quote(raw: str) -> str:
    """
    Strips one pair of surrounding quotation marks and the usual
    boilerplate lead-ins ("Here is", "Quote:", ...) from model output.
    """
    cleaned = raw.strip()

    for opening, closing in QUOTE_PAIRS:
        if len(cleaned) >= 2 and cleaned.startswith(opening) and cleaned.endswith(closing):
            cleaned = cleaned[1:-1]
            break

    for prefix in BOILERPLATE_PREFIXES:
        if cleaned.lower().startswith(prefix.lower()):
            cleaned = cleaned[len(prefix):].strip()

    return cleaned.strip()


def extract_text(payload: Dict[str, Any]) -> str:
    """
    Finds the completion text across the response shapes different
    models return. Empty string when none of them carries text.
    """
    choices = payload.get("choices")
    first = choices[0] if isinstance(choices, list) and choices else {}
    if not isinstance(first, dict):
        first = {}
    message = first.get("message")
    if not isinstance(message, dict):
        message = {}

    candidates = [
        message.get("content"),
        message.get("reasoning"),
        first.get("text"),
        payload.get("output"),
        payload.get("result"),
    ]
    for candidate in candidates:
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    return ""


class OpenRouterClient(IQuoteGenerator):
    """
    Driven Adapter for the OpenRouter chat-completions API.

    One instance is bound to one credential; the container builds a fresh
    client from the stored key whenever a use case needs one. Each call
    opens its own httpx.AsyncClient with the configured timeout.
    No retries: a failure is categorized and raised to the caller.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = "https://openrouter.ai/api/v1",
        model: str = "openai/chatgpt-4o-latest",
        timeout: float = 30.0,
        max_tokens: int = 3000,
        temperature: float = 0.8,
        top_p: float = 0.9,
        referer: str = "http://localhost:8000",
        title: str = "Quote Scribe Reflect",
    ):
        self.api_key = api_key or None
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.top_p = top_p
        self.referer = referer
        self.title = title

    # --- Public API ---

    async def generate_quote(self, prompt: Optional[str] = None) -> str:
        body = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt or DEFAULT_USER_PROMPT},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
        }

        with tracer.start_as_current_span("openrouter.generate_quote") as span:
            span.set_attribute("llm.model", self.model)
            payload = await self._post("/chat/completions", body)

            text = extract_text(payload)
            if not text:
                logger.warning("openrouter_empty_completion", keys=sorted(payload.keys()))
                raise EmptyResponseError("No quote generated - API returned empty response")

            quote = clean_quote(text)
            if not quote:
                raise EmptyResponseError("No quote generated - API returned only boilerplate")

            span.set_attribute("llm.quote_length", len(quote))
            logger.info("openrouter_quote_generated", model=self.model, length=len(quote))
            return quote

    async def validate_credential(self) -> bool:
        if not self.api_key:
            return False

        body = {
            "model": self.model,
            "messages": [{"role": "user", "content": VALIDATION_PROMPT}],
            "max_tokens": 1,
        }
        with tracer.start_as_current_span("openrouter.validate_credential"):
            try:
                await self._post("/chat/completions", body)
            except AuthenticationError:
                logger.info("openrouter_credential_rejected")
                return False
        return True

    async def list_models(self) -> List[Dict[str, Any]]:
        payload = await self._get("/models")
        return payload.get("data") or []

    async def get_usage(self) -> Dict[str, Any]:
        return await self._get("/usage")

    # --- Transport ---

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": self.referer,
            "X-Title": self.title,
        }

    def _require_key(self) -> None:
        if not self.api_key:
            raise MissingCredentialError()

    async def _post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        self._require_key()
        url = f"{self.base_url}{path}"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(url, json=body, headers=self._headers())
            except httpx.TransportError as e:
                logger.error("openrouter_network_error", url=url, error=str(e))
                raise NetworkError(f"Could not reach {url}: {e}") from e
        return self._handle_response(response)

    async def _get(self, path: str) -> Dict[str, Any]:
        self._require_key()
        url = f"{self.base_url}{path}"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(url, headers=self._headers())
            except httpx.TransportError as e:
                logger.error("openrouter_network_error", url=url, error=str(e))
                raise NetworkError(f"Could not reach {url}: {e}") from e
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Dict[str, Any]:
        if not response.is_success:
            self._raise_for_status(response)

        try:
            payload = response.json()
        except ValueError as e:
            raise EmptyResponseError("Response body was not valid JSON") from e

        if not isinstance(payload, dict):
            raise EmptyResponseError("Response body was not a JSON object")
        return payload

    def _raise_for_status(self, response: httpx.Response) -> None:
        status = response.status_code
        message = f"HTTP {status}: {response.reason_phrase}"
        try:
            error = response.json().get("error") or {}
            if isinstance(error, dict) and error.get("message"):
                message = error["message"]
        except (ValueError, AttributeError):
            pass

        logger.warning("openrouter_request_rejected", status=status, message=message)

        if status in (401, 403):
            raise AuthenticationError(message)
        if status == 402:
            raise InsufficientCreditsError(message)
        if status == 429:
            raise RateLimitError(message)
        raise UpstreamServiceError(message, status)
