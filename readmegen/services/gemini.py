"""Client for the Gemini generateContent REST endpoint."""

from typing import Any, Dict, Optional
import logging

import httpx

from ..core.errors import ConfigurationError, GenerationFailed, InvalidGenerationResponse

logger = logging.getLogger(__name__)

GEMINI_API_BASE_URL = "https://generativelanguage.googleapis.com"
GEMINI_MODEL = "gemini-1.5-flash-latest"

# Fixed sampling parameters for README generation
GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 8192,
}


class GeminiClient:
    """Thin async wrapper over ``models/{model}:generateContent``."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = GEMINI_API_BASE_URL,
        model: str = GEMINI_MODEL,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1beta/models/{self.model}:generateContent"

    @staticmethod
    def build_payload(prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": dict(GENERATION_CONFIG),
        }

    async def generate_content(self, prompt: str) -> str:
        """Generate text for a prompt.

        Args:
            prompt: Input prompt

        Returns:
            Generated text, verbatim

        Raises:
            ConfigurationError: No API key configured
            GenerationFailed: Non-success response or network failure
            InvalidGenerationResponse: Response lacks the generated text
        """
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY is not configured")

        logger.info(f"Requesting generation from {self.model} ({len(prompt)} prompt chars)")

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=None) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=self.build_payload(prompt),
                    headers={"Content-Type": "application/json"}
                )
        except httpx.HTTPError as e:
            raise GenerationFailed(f"Failed to generate README: {e}") from e

        if not response.is_success:
            message = _error_message(response) or response.reason_phrase
            logger.error(f"Generation failed with status {response.status_code}: {message}")
            raise GenerationFailed(f"Failed to generate README: {message}")

        try:
            data = response.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise InvalidGenerationResponse("Invalid response from Gemini API") from e
        if not isinstance(text, str):
            raise InvalidGenerationResponse("Invalid response from Gemini API")
        return text


def _error_message(response: httpx.Response) -> Optional[str]:
    """Pull ``error.message`` out of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("message")
    return None
