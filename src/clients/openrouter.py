"""OpenRouter chat-completions client.

This module provides the OpenRouterClient class, a single-attempt async
wrapper around the OpenRouter /chat/completions endpoint. It classifies
failures at the point they happen:

- Non-2xx status: RemoteServiceError (carries status code and remote message)
- 2xx without choices or content: EmptyResponseError
- 2xx with a non-JSON body: ParseError

Transport errors (timeouts, refused connections) propagate as httpx.HTTPError.
No retries are attempted here.
"""

from typing import Any, Dict, Optional

import httpx

from src.utils.config import config
from src.utils.errors import EmptyResponseError, MissingCredentialError, ParseError, RemoteServiceError
from src.utils.logger import logger


def _extract_error_message(response: httpx.Response) -> Optional[str]:
    """Best-effort read of `error.message` from an error body."""
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return str(message) if message else None
    return None


class OpenRouterClient:
    """Send recipe prompts to OpenRouter and return the raw reply text.

    An instance without an API key is valid: `has_credential` is False and the
    generator serves fallback recipes without ever calling `complete`.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://openrouter.ai/api/v1",
        model: str = "google/gemma-3n-e4b-it:free",
        temperature: float = 0.7,
        surprise_temperature: float = 0.9,
        max_tokens: int = 2000,
        timeout: float = 60.0,
        app_url: str = "http://localhost:3000",
        app_title: str = "SmartChef Recipe Generator",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize OpenRouterClient with configuration.

        Args:
            api_key: OpenRouter API key. Empty string selects fallback-only mode.
            base_url: API root, without trailing /chat/completions.
            model: Model identifier sent with every request.
            temperature: Sampling temperature for normal (three-recipe) requests.
            surprise_temperature: Sampling temperature for surprise requests.
            max_tokens: Completion token ceiling.
            timeout: Request timeout in seconds.
            app_url: Value for the HTTP-Referer attribution header.
            app_title: Value for the X-Title attribution header.
            transport: Optional httpx transport (used by tests to stub the network).
        """
        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.surprise_temperature = surprise_temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.app_url = app_url
        self.app_title = app_title
        self._transport = transport

        if not self.api_key:
            logger.warning("OpenRouter API key not found. Using fallback recipes.")

    @classmethod
    def from_config(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "OpenRouterClient":
        """Build a client from the module-level configuration."""
        return cls(
            api_key=config.OPENROUTER_API_KEY,
            base_url=config.OPENROUTER_BASE_URL,
            model=config.OPENROUTER_MODEL,
            temperature=config.TEMPERATURE,
            surprise_temperature=config.SURPRISE_TEMPERATURE,
            max_tokens=config.MAX_TOKENS,
            timeout=config.REQUEST_TIMEOUT,
            app_url=config.APP_URL,
            app_title=config.APP_TITLE,
            transport=transport,
        )

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.app_url,
            "X-Title": self.app_title,
        }

    def build_payload(self, prompt: str, surprise: bool = False) -> Dict[str, Any]:
        """Build the JSON request body for one completion call."""
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.surprise_temperature if surprise else self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def complete(self, prompt: str, surprise: bool = False) -> str:
        """Send a single completion request and return the reply content.

        Args:
            prompt: Prompt text from build_recipe_prompt().
            surprise: Selects the surprise-mode temperature.

        Returns:
            str: Content of the first choice's message.

        Raises:
            MissingCredentialError: If no API key is configured (no request is made).
            RemoteServiceError: If the endpoint returns a non-2xx status.
            EmptyResponseError: If the reply has no choices or no message content.
            ParseError: If a 2xx reply body is not JSON.
            httpx.HTTPError: On transport failures.
        """
        if not self.has_credential:
            raise MissingCredentialError("OpenRouter API key is not configured")

        payload = self.build_payload(prompt, surprise=surprise)
        logger.debug(f"Requesting completion: model={self.model}, temperature={payload['temperature']}")

        async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport) as client:
            response = await client.post(self.completions_url, headers=self._headers(), json=payload)

        if not response.is_success:
            raise RemoteServiceError(response.status_code, _extract_error_message(response))

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Completion endpoint returned a non-JSON body: {e}") from e

        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices or not isinstance(choices, list):
            raise EmptyResponseError("No response from AI model")

        first = choices[0] if isinstance(choices[0], dict) else {}
        message = first.get("message") or {}
        content = message.get("content") if isinstance(message, dict) else None
        if not content or not isinstance(content, str):
            raise EmptyResponseError("AI model returned an empty message")

        logger.debug(f"Completion received: {len(content)} chars")
        return content
