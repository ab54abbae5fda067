# tests\adapters\test_openrouter_client.py
import httpx
import pytest
from unittest.mock import AsyncMock, patch

from quote_scribe.adapters.llm.openrouter_client import (
    OpenRouterClient,
    clean_quote,
    extract_text,
)
from quote_scribe.adapters.llm.prompts import DEFAULT_USER_PROMPT, SYSTEM_PROMPT
from quote_scribe.core.domain.exceptions import (
    AuthenticationError,
    EmptyResponseError,
    InsufficientCreditsError,
    MissingCredentialError,
    NetworkError,
    RateLimitError,
    UpstreamServiceError,
)
from tests.conftest import VALID_KEY

# Sample chat-completions response from OpenRouter
MOCK_COMPLETION = {
    "id": "gen-1",
    "choices": [
        {"message": {"role": "assistant", "content": "\"Quote: Fall seven times, stand up eight.\""}}
    ],
}


def completion(content=None, **extra):
    message = {"role": "assistant"}
    if content is not None:
        message["content"] = content
    message.update(extra)
    return {"choices": [{"message": message}]}


class TestCleanQuote:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("  Be kind.  ", "Be kind."),
            ("\"Be kind.\"", "Be kind."),
            ("'Be kind.'", "Be kind."),
            ("“Be kind.”", "Be kind."),
            ("Quote: Be kind.", "Be kind."),
            ("INSPIRATIONAL QUOTE: Be kind.", "Be kind."),
            ("Here's Wise words: Be kind.", "Be kind."),
            ("\"Be kind.", "\"Be kind."),
        ],
    )
    def test_cleaning(self, raw, expected):
        assert clean_quote(raw) == expected

    def test_prefixes_checked_once_in_order(self):
        # "Quote:" has already been checked when "Wise words:" is removed
        assert clean_quote("Wise words: Quote: x") == "Quote: x"


class TestExtractText:

    def test_content_first(self):
        assert extract_text(completion("a", reasoning="b")) == "a"

    def test_falls_back_to_reasoning(self):
        assert extract_text(completion("  ", reasoning=" thought ")) == "thought"

    def test_falls_back_to_choice_text(self):
        assert extract_text({"choices": [{"text": "legacy"}]}) == "legacy"

    def test_falls_back_to_output_and_result(self):
        assert extract_text({"output": "o"}) == "o"
        assert extract_text({"choices": [], "result": "r"}) == "r"

    def test_nothing_usable(self):
        assert extract_text({"choices": [{"message": {"content": None}}]}) == ""

    @pytest.mark.parametrize(
        "payload",
        [
            {"choices": [{"message": "plain string"}]},
            {"choices": {"0": {}}},
            {"choices": ["text only"]},
            {"choices": "nope"},
            {"choices": [{"message": ["a", "b"]}]},
        ],
    )
    def test_unexpected_shapes_yield_nothing(self, payload):
        assert extract_text(payload) == ""

    def test_unexpected_message_still_falls_back(self):
        assert extract_text({"choices": [{"message": "x", "text": "legacy"}]}) == "legacy"


@pytest.mark.asyncio
class TestOpenRouterClient:

    async def test_generate_quote_success(self):
        """
        Scenario: the service returns a completion wrapped in boilerplate.
        Expected: the cleaned text, and a request carrying the configured options.
        """
        client = OpenRouterClient(api_key=VALID_KEY)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(return_value=httpx.Response(200, json=MOCK_COMPLETION))

            result = await client.generate_quote()

        assert result == "Fall seven times, stand up eight."
        mock_client_cls.assert_called_once_with(timeout=30.0)

        args, kwargs = mock_client.post.call_args
        assert args[0] == "https://openrouter.ai/api/v1/chat/completions"
        body = kwargs["json"]
        assert body["model"] == "openai/chatgpt-4o-latest"
        assert body["messages"] == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": DEFAULT_USER_PROMPT},
        ]
        assert (body["max_tokens"], body["temperature"], body["top_p"]) == (3000, 0.8, 0.9)
        assert kwargs["headers"]["Authorization"] == f"Bearer {VALID_KEY}"
        assert kwargs["headers"]["X-Title"] == "Quote Scribe Reflect"

    async def test_custom_prompt_and_model(self):
        client = OpenRouterClient(api_key=VALID_KEY, model="other/model", base_url="http://local/api/")

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(return_value=httpx.Response(200, json=completion("Be bold.")))

            assert await client.generate_quote("courage") == "Be bold."

        args, kwargs = mock_client.post.call_args
        assert args[0] == "http://local/api/chat/completions"
        assert kwargs["json"]["model"] == "other/model"
        assert kwargs["json"]["messages"][1]["content"] == "courage"

    async def test_missing_credential(self):
        with patch("httpx.AsyncClient") as mock_client_cls:
            with pytest.raises(MissingCredentialError):
                await OpenRouterClient(api_key="").generate_quote()
            mock_client_cls.assert_not_called()

    @pytest.mark.parametrize(
        "status_code, error_cls",
        [
            (401, AuthenticationError),
            (403, AuthenticationError),
            (402, InsufficientCreditsError),
            (429, RateLimitError),
            (500, UpstreamServiceError),
        ],
    )
    async def test_status_categorization(self, status_code, error_cls):
        client = OpenRouterClient(api_key=VALID_KEY)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(
                return_value=httpx.Response(status_code, json={"error": {"message": "nope"}})
            )

            with pytest.raises(error_cls) as excinfo:
                await client.generate_quote()

        assert excinfo.value.message == "nope"

    async def test_upstream_message_without_error_body(self):
        client = OpenRouterClient(api_key=VALID_KEY)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(return_value=httpx.Response(503, text="down"))

            with pytest.raises(UpstreamServiceError) as excinfo:
                await client.generate_quote()

        assert excinfo.value.message == "HTTP 503: Service Unavailable"
        assert excinfo.value.status_code == 503

    async def test_network_error(self):
        client = OpenRouterClient(api_key=VALID_KEY)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(side_effect=httpx.ConnectError("Network Down"))

            with pytest.raises(NetworkError):
                await client.generate_quote()

    async def test_timeout_is_a_network_error(self):
        client = OpenRouterClient(api_key=VALID_KEY, timeout=1.0)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(side_effect=httpx.ReadTimeout("slow"))

            with pytest.raises(NetworkError):
                await client.generate_quote()

        mock_client_cls.assert_called_once_with(timeout=1.0)

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, json=completion("")),
            httpx.Response(200, json={"choices": []}),
            httpx.Response(200, json=completion("Here is")),
            httpx.Response(200, text="<html>not json</html>"),
            httpx.Response(200, json={"choices": [{"message": "plain string"}]}),
            httpx.Response(200, json={"choices": {"0": {}}}),
        ],
    )
    async def test_empty_response(self, response):
        client = OpenRouterClient(api_key=VALID_KEY)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(return_value=response)

            with pytest.raises(EmptyResponseError):
                await client.generate_quote()

    async def test_validate_credential(self):
        client = OpenRouterClient(api_key=VALID_KEY)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(return_value=httpx.Response(200, json=completion("ok")))

            assert await client.validate_credential() is True

        body = mock_client.post.call_args.kwargs["json"]
        assert body["max_tokens"] == 1
        assert body["messages"] == [{"role": "user", "content": "Test"}]

    async def test_validate_credential_rejected(self):
        client = OpenRouterClient(api_key=VALID_KEY)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(return_value=httpx.Response(401, json={}))

            assert await client.validate_credential() is False

    async def test_validate_credential_other_errors_propagate(self):
        client = OpenRouterClient(api_key=VALID_KEY)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.post = AsyncMock(return_value=httpx.Response(429, json={}))

            with pytest.raises(RateLimitError):
                await client.validate_credential()

    async def test_validate_without_key(self):
        assert await OpenRouterClient().validate_credential() is False

    async def test_list_models_and_usage(self):
        client = OpenRouterClient(api_key=VALID_KEY)

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__aenter__.return_value
            mock_client.get = AsyncMock(side_effect=[
                httpx.Response(200, json={"data": [{"id": "openai/chatgpt-4o-latest"}]}),
                httpx.Response(200, json={"usage": 1.5}),
            ])

            models = await client.list_models()
            usage = await client.get_usage()

        assert models == [{"id": "openai/chatgpt-4o-latest"}]
        assert usage == {"usage": 1.5}
        assert mock_client.get.call_args_list[0].args[0] == "https://openrouter.ai/api/v1/models"
        assert mock_client.get.call_args_list[1].args[0] == "https://openrouter.ai/api/v1/usage"
