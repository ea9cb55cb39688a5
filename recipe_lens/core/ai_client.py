import base64
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..errors import ConfigError, GatewayTransportError, InvalidCompletionError, UpstreamStatusError
from ..settings import Settings

logger = logging.getLogger("recipe_lens.ai")

MOCK_COMPLETION = """Here is a recipe inspired by your photo:

```json
{
  "title": "Rustic Tomato Basil Pasta",
  "description": "A quick weeknight pasta with a bright tomato sauce and fresh basil.",
  "ingredients": [
    "300 g spaghetti",
    "2 tbsp olive oil",
    "3 cloves garlic, sliced",
    "400 g canned whole tomatoes",
    "1 handful fresh basil leaves",
    "Salt and pepper to taste"
  ],
  "instructions": [
    "Bring a large pot of salted water to a boil and cook the spaghetti until al dente.",
    "Warm the olive oil in a pan and gently fry the garlic until fragrant.",
    "Add the tomatoes, crush them with a spoon and simmer for 10 minutes.",
    "Toss the drained pasta with the sauce, season and finish with torn basil."
  ],
  "prepTime": "10 minutes",
  "cookTime": "20 minutes",
  "servings": "4 servings",
  "difficulty": "Easy"
}
```"""


def image_data_url(image_base64: str) -> str:
    return f"data:image/jpeg;base64,{image_base64}"


class VisionGateway(ABC):
    """Single-turn image + prompt call to a multimodal chat model."""

    provider: str = "unknown"
    model: str = ""
    api_key: Optional[str] = None

    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def generate(self, image_base64: str, prompt: str) -> str:
        """
        Send the prompt and the inlined image, return the raw completion text.

        Raises:
            UpstreamStatusError: provider answered with a non-success status
            InvalidCompletionError: provider answered without a completion
            GatewayTransportError: provider could not be reached
        """

    def _require_image(self, image_base64: str) -> None:
        if not image_base64:
            raise ValueError("image_base64 must be non-empty")


class OpenRouterGateway(VisionGateway):
    provider = "openrouter"

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        url: str,
        site_url: str,
        app_title: str,
        max_tokens: int,
        temperature: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.url = url
        self.site_url = site_url
        self.app_title = app_title
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, image_base64: str, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {"type": "image_url", "image_url": {"url": image_data_url(image_base64)}},
                    ],
                }
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    async def generate(self, image_base64: str, prompt: str) -> str:
        self._require_image(image_base64)
        if not self.api_key:
            raise ConfigError()

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.site_url,
            "X-Title": self.app_title,
        }
        payload = self.build_payload(image_base64, prompt)

        logger.info(f"Requesting completion from OpenRouter model={self.model}")
        try:
            # No timeout and no retries: the hosting transport owns request deadlines
            async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
                response = await client.post(self.url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"OpenRouter request failed: {e.__class__.__name__}: {e}")
            raise GatewayTransportError() from e

        if not response.is_success:
            logger.error(f"OpenRouter API error: {response.status_code} {response.text}")
            raise UpstreamStatusError(
                f"Failed to generate recipe: {response.status_code} {response.reason_phrase}",
                status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"OpenRouter returned a non-JSON body: {response.text[:500]}")
            raise InvalidCompletionError(status=response.status_code) from e

        content = completion_text(data)
        if content is None:
            logger.error(f"Unexpected API response structure: {data}")
            raise InvalidCompletionError(status=response.status_code)
        return content


def completion_text(data: Any) -> Optional[str]:
    """Pull choices[0].message.content out of a chat-completions body."""
    try:
        message = data["choices"][0]["message"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(message, dict):
        return None

    content = message.get("content")
    # Some providers answer with a list of typed content parts
    if isinstance(content, list):
        content = "".join(
            part.get("text") or "" for part in content if isinstance(part, dict) and part.get("type") == "text"
        )
    if not isinstance(content, str):
        return None
    return content


class GeminiGateway(VisionGateway):
    provider = "gemini"

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        max_tokens: int,
        temperature: float,
        client: Optional[genai.Client] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = client
        if self._client is None and api_key:
            self._client = genai.Client(api_key=api_key)

    def is_configured(self) -> bool:
        return self._client is not None

    async def generate(self, image_base64: str, prompt: str) -> str:
        self._require_image(image_base64)
        if self._client is None:
            raise ConfigError()

        image_part = types.Part.from_bytes(data=base64.b64decode(image_base64), mime_type="image/jpeg")
        config = types.GenerateContentConfig(
            max_output_tokens=self.max_tokens,
            temperature=self.temperature,
        )

        logger.info(f"Requesting completion from Gemini model={self.model}")
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=[prompt, image_part],
                config=config,
            )
        except genai_errors.APIError as e:
            logger.error(f"Gemini API error: {e.code} {e.message}")
            raise UpstreamStatusError(
                f"Failed to generate recipe: {e.code} {e.status or e.message}",
                status=e.code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed: {e.__class__.__name__}: {e}")
            raise GatewayTransportError() from e

        if not response.text:
            logger.error(f"Gemini returned empty response from model {self.model}")
            raise InvalidCompletionError()
        return response.text


class MockGateway(VisionGateway):
    """Offline backend returning a canned completion."""

    provider = "mock"
    model = "mock"

    def __init__(self, completion: str = MOCK_COMPLETION):
        self.completion = completion

    async def generate(self, image_base64: str, prompt: str) -> str:
        self._require_image(image_base64)
        logger.info("AI mode is mock, returning canned completion")
        return self.completion


def build_gateway(config: Settings) -> VisionGateway:
    mode = config.ai_mode.lower()

    if mode == "mock":
        return MockGateway()

    if mode == "gemini":
        return GeminiGateway(
            api_key=config.gemini_api_key,
            model=config.gemini_model,
            max_tokens=config.ai_max_tokens,
            temperature=config.ai_temperature,
        )

    if mode == "openrouter":
        return OpenRouterGateway(
            api_key=config.openrouter_api_key,
            model=config.openrouter_model,
            url=config.openrouter_url,
            site_url=config.site_url,
            app_title=config.app_title,
            max_tokens=config.ai_max_tokens,
            temperature=config.ai_temperature,
        )

    raise ValueError(f"Unknown AI_MODE '{config.ai_mode}' (expected openrouter, gemini or mock)")
