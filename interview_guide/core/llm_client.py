"""
LLM client for Interview Guide

Thin async wrapper around an OpenAI-compatible chat completions endpoint.
Every call sends one system message and one user message and returns the
completion text. Transport failures and timeouts surface as LlmUnavailable.
"""

import logging

import httpx

from interview_guide.config.settings import Settings, get_settings
from interview_guide.core.exceptions import LlmUnavailable

logger = logging.getLogger(__name__)


class LLMClient:
    """
    Chat completion client.

    One request per call: no streaming, no multi-turn history, no tools.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client from settings.

        Args:
            settings: Application settings (defaults to the cached instance)
            transport: Optional httpx transport, used by tests
        """
        self.settings = settings or get_settings()
        self.headers = {
            "Authorization": f"Bearer {self.settings.llm_api_key}",
            "Content-Type": "application/json",
        }

        self.client = httpx.AsyncClient(
            base_url=self.settings.llm_base_url.rstrip("/"),
            headers=self.headers,
            timeout=self.settings.llm_timeout_seconds,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    def _extract_content(self, result: dict) -> str:
        """Extract text content from API response, handling list/dict formats."""
        content = result.get("choices", [{}])[0].get("message", {}).get("content", "")

        # Handle case where content is a list (multi-part response)
        if isinstance(content, list):
            text_parts = []
            for part in content:
                if isinstance(part, str):
                    text_parts.append(part)
                elif isinstance(part, dict) and "text" in part:
                    text_parts.append(part["text"])
            content = "".join(text_parts)

        if content is None:
            return ""
        return content if isinstance(content, str) else str(content)

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Run a single chat completion.

        Args:
            system_prompt: Instruction for the system role
            user_prompt: Content for the user role

        Returns:
            Model response text

        Raises:
            LlmUnavailable: On HTTP errors, timeouts or an unreadable body
        """
        payload = {
            "model": self.settings.llm_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": self.settings.llm_max_tokens,
            "temperature": self.settings.llm_temperature,
        }

        try:
            response = await self.client.post(
                self.settings.llm_chat_endpoint,
                json=payload,
            )
            response.raise_for_status()
            result = response.json()
        except httpx.TimeoutException as e:
            logger.error(f"LLM request timed out: {e}")
            raise LlmUnavailable(f"LLM request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"LLM API error: {e}")
            raise LlmUnavailable(f"LLM API error: {e}") from e
        except ValueError as e:
            logger.error(f"LLM API returned a non-JSON body: {e}")
            raise LlmUnavailable(f"LLM API returned a non-JSON body: {e}") from e

        try:
            return self._extract_content(result)
        except (AttributeError, IndexError, TypeError) as e:
            raise LlmUnavailable(f"Unexpected LLM response shape: {e}") from e
