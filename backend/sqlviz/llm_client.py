"""
LLM Client — OpenAI-compatible wrapper for the hosted explanation model
(Gemini's OpenAI endpoint by default). Sends standard /chat/completions
requests with Bearer token auth.
"""

import logging
from collections.abc import Mapping
from typing import Optional

import openai
from openai import OpenAI

from config import config

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Server configuration error: API key missing."
GENERIC_SERVICE_MESSAGE = "Something went wrong on the server."


class LLMServiceError(Exception):
    """The model service could not produce a response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


_client: OpenAI | None = None


def _get_client() -> OpenAI:
    """Lazily build the client so a missing key is reported per call, not at import."""
    global _client
    if not config.LLM_API_KEY:
        logger.error("LLM API key is not set (GEMINI_API_KEY).")
        raise LLMServiceError(MISSING_KEY_MESSAGE)
    if _client is None:
        _client = OpenAI(
            api_key=config.LLM_API_KEY,
            base_url=config.LLM_BASE_URL,
            timeout=config.LLM_TIMEOUT,
            max_retries=0,
        )
    return _client


def call_llm(
    prompt: str,
    system_prompt: str = "",
    temperature: float = 0.7,
    max_tokens: int = 2000,
) -> str:
    """Send a chat completion request and return the text response."""
    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    client = _get_client()
    try:
        response = client.chat.completions.create(
            model=config.LLM_MODEL,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
    except openai.APIStatusError as e:
        raise LLMServiceError(_service_message(e.body), e.status_code) from e
    except openai.OpenAIError as e:
        raise LLMServiceError(str(e) or GENERIC_SERVICE_MESSAGE) from e

    if not response.choices:
        # Blocked prompts come back with no candidates.
        logger.warning("LLM response had no choices.")
        raise LLMServiceError(GENERIC_SERVICE_MESSAGE)
    content = response.choices[0].message.content
    return (content or "").strip()


def _service_message(body) -> str:
    """Pull the service-provided error text out of a failed response body."""
    if isinstance(body, list) and body:
        body = body[0]
    if isinstance(body, Mapping):
        error = body.get("error", body)
        if isinstance(error, Mapping):
            message = error.get("message")
        else:
            message = error
        if isinstance(message, str) and message:
            return message
    if isinstance(body, str) and body:
        return body
    return GENERIC_SERVICE_MESSAGE


def reset_client() -> None:
    """Drop the cached client (after config changes, and in tests)."""
    global _client
    _client = None
