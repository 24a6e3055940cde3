"""Async Claude client used by the bullet rewriter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anthropic
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from cv_arbiter.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"

# Failures worth another attempt; auth and request errors are not
TRANSIENT_ERRORS = (
    anthropic.APIConnectionError,
    anthropic.APITimeoutError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
)


@dataclass
class LLMResponse:
    text: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Thin wrapper over AsyncAnthropic with retries and token accounting.

    Args:
        api_key: Anthropic key; read from ANTHROPIC_API_KEY when omitted.
        timeout: Per-request timeout in seconds.
        max_retries: Attempts per call for transient failures (>= 1).
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        max_retries: int = 3,
    ):
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.max_retries = max(1, max_retries)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input, output)

    async def _create(self, **request) -> anthropic.types.Message:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(min=1, max=10),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            reraise=True,
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning(
                        "Retrying Claude request (attempt %d/%d)",
                        attempt.retry_state.attempt_number,
                        self.max_retries,
                    )
                return await self.client.messages.create(**request)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        request: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            request["system"] = system

        logger.debug("Claude request: model=%s temperature=%.2f", model, temperature)
        try:
            message = await self._create(**request)
        except anthropic.APIError:
            logger.error("Claude request failed", exc_info=True)
            raise

        usage = message.usage
        self._token_log.append((model, usage.input_tokens, usage.output_tokens))
        text = "".join(getattr(block, "text", "") for block in message.content)
        return LLMResponse(text=text, input_tokens=usage.input_tokens, output_tokens=usage.output_tokens)

    async def generate_json(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ) -> dict | list:
        """Like generate(), but parse the reply as JSON (object or array)."""
        response = await self.generate(prompt, system, model, temperature, max_tokens)
        return extract_json(response.text)

    def get_token_summary(self) -> dict:
        """Totals since the last call; the log is reset afterwards."""
        summary = {
            "input": sum(entry[1] for entry in self._token_log),
            "output": sum(entry[2] for entry in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
