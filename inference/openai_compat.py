import logging

import requests

from extraction.errors import ParsingError, ProviderCallError
from .base import ModelBackend
from .types import ModelRequest, ModelResponse

logger = logging.getLogger(__name__)

# OpenRouter uses these for app attribution; other providers ignore them.
_ATTRIBUTION_HEADERS = {
    "HTTP-Referer": "https://mini-app-builder.local",
    "X-Title": "Mini AI App Builder",
}


class OpenAICompatibleBackend(ModelBackend):
    """
    Chat-completions backend for any OpenAI-compatible endpoint
    (OpenRouter, OpenAI, Gemini's OpenAI shim, local proxies).

    One POST per request. No retries, no streaming.
    """

    def __init__(self, api_key: str, model_name: str, base_url: str = "https://openrouter.ai/api/v1"):
        """
        Args:
            api_key:    Bearer token for the provider
            model_name: Provider model identifier
            base_url:   API root, without the trailing /chat/completions
        """
        self.api_key = api_key
        self.model_name = model_name
        self.base_url = base_url.rstrip("/")

    def generate(self, request: ModelRequest) -> ModelResponse:
        """
        POST /chat/completions and return the first choice's content.

        Transport failures are translated into ProviderCallError so the
        status code (504 for timeouts) survives to the classifier.
        """
        payload = {
            "model": self.model_name,
            "messages": [
                {"role": "system", "content": request.system_prompt},
                {"role": "user", "content": request.prompt},
            ],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            **_ATTRIBUTION_HEADERS,
        }

        try:
            resp = requests.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers=headers,
                timeout=request.timeout_s,
            )
        except requests.Timeout as e:
            raise ProviderCallError("LLM API request timed out", 504, e) from e
        except requests.ConnectionError as e:
            raise ProviderCallError(f"network error contacting LLM provider: {e}", 500, e) from e

        if not resp.ok:
            logger.warning(f"LLM provider returned HTTP {resp.status_code}: {resp.text[:200]}")
            raise ProviderCallError(f"LLM API request failed with HTTP {resp.status_code}", 500)

        try:
            data = resp.json()
        except ValueError as e:
            raise ParsingError("Invalid JSON envelope from LLM API", 500, e) from e

        if not isinstance(data, dict):
            raise ParsingError("Invalid JSON envelope from LLM API", 500)

        choices = data.get("choices") or [{}]
        if not isinstance(choices, list) or not isinstance(choices[0], dict):
            raise ParsingError("Invalid JSON envelope from LLM API", 500)

        message = choices[0].get("message") or {}
        if not isinstance(message, dict):
            raise ParsingError("Invalid JSON envelope from LLM API", 500)

        # Multi-part content (list of parts) is not a usable JSON reply
        content = message.get("content")
        output = content if isinstance(content, str) else None

        return ModelResponse(
            output=output,
            metadata={
                "backend": "openai_compat",
                "model": data.get("model", self.model_name),
                "usage": data.get("usage"),
            },
        )
