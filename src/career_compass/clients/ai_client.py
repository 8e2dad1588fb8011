"""Schema-constrained Claude API client with tiered model escalation."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

import anthropic

from career_compass.config import AIConfig
from career_compass.errors import (
    AIClientError,
    AuthError,
    EmptyResponse,
    NetworkError,
    QuotaExceeded,
)
from career_compass.schemas.descriptor import Object, Schema, validate_or_raise
from career_compass.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

PERMISSION_MARKERS = ("PERMISSION_DENIED", "API_KEY_INVALID")
QUOTA_MARKER = "RESOURCE_EXHAUSTED"

RESPONSE_TOOL = "emit_response"
JSON_ONLY = "Respond ONLY with a single valid JSON document. No prose, no markdown."

Strategy = Callable[[str, Schema | None], Awaitable[dict | list]]


@dataclass(frozen=True)
class Tier:
    """One backend configuration in the escalation ladder."""

    name: str
    model: str
    beta: bool = False  # route through the beta Messages API surface
    schema_in_prompt: bool = False  # serialize schema into the prompt instead of a tool


def default_tiers(config: AIConfig) -> list[Tier]:
    return [
        Tier("primary", config.primary_model),
        Tier("primary-beta", config.primary_model, beta=True),
        Tier("fallback-model", config.fallback_model, schema_in_prompt=True),
    ]


async def first_success(
    strategies: Sequence[tuple[str, Strategy]],
    prompt: str,
    schema: Schema | None,
) -> dict | list:
    """Run strategies in order and return the first parsed result.

    AuthError stops the chain at once. Any other AIClientError moves on to
    the next strategy; when all fail, the last error is raised.
    """
    if not strategies:
        raise AIClientError("No escalation tiers configured")

    last_error: AIClientError | None = None
    for name, strategy in strategies:
        logger.debug("AI call: tier=%s", name)
        try:
            return await strategy(prompt, schema)
        except AuthError:
            logger.error("AI call rejected on tier %s: credential invalid", name)
            raise
        except AIClientError as e:
            logger.warning("AI tier %s failed: %s", name, e)
            last_error = e

    logger.error("All %d AI tiers failed", len(strategies), exc_info=last_error)
    raise last_error


class AIClient:
    """Async Claude client that returns schema-validated JSON."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        *,
        config: AIConfig | None = None,
        tiers: Sequence[Tier] | None = None,
    ):
        self.config = config or AIConfig()
        key = api_key or self.config.resolve_api_key()
        if timeout is None:
            timeout = self.config.timeout
        self.client: anthropic.AsyncAnthropic | None = None
        if key:
            self.client = anthropic.AsyncAnthropic(api_key=key, timeout=timeout)
        self.tiers = list(tiers) if tiers is not None else default_tiers(self.config)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    @property
    def has_credentials(self) -> bool:
        return self.client is not None

    async def invoke(self, prompt: str, schema: Schema | None = None) -> dict | list:
        """Send a prompt and return parsed JSON, escalating across tiers."""
        if self.client is None:
            raise AuthError(
                f"AI API key is missing. Set {self.config.api_key_env} or llm.api_key in config.yaml."
            )
        strategies = [(tier.name, self._strategy(tier)) for tier in self.tiers]
        return await first_success(strategies, prompt, schema)

    async def generate_json(self, prompt: str, schema: Schema | None = None) -> dict | list:
        """Send a prompt and parse JSON from response."""
        return await self.invoke(prompt, schema)

    def _strategy(self, tier: Tier) -> Strategy:
        async def attempt(prompt: str, schema: Schema | None) -> dict | list:
            text = await self._call_tier(tier, prompt, schema)
            return decode_response(text, schema)

        return attempt

    async def _call_tier(self, tier: Tier, prompt: str, schema: Schema | None) -> str:
        """Make the API call for one tier and return the raw response text."""
        structured = (
            schema is not None
            and isinstance(schema, Object)
            and not tier.schema_in_prompt
        )
        kwargs: dict = {
            "model": tier.model,
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
            "messages": [{"role": "user", "content": build_prompt(prompt, schema, structured)}],
        }
        if structured:
            kwargs["tools"] = [
                {
                    "name": RESPONSE_TOOL,
                    "description": "Return the requested data as structured JSON.",
                    "input_schema": schema.to_json_schema(),
                }
            ]
            kwargs["tool_choice"] = {"type": "tool", "name": RESPONSE_TOOL}

        api = self.client.beta.messages if tier.beta else self.client.messages
        try:
            message = await api.create(**kwargs)
        except (anthropic.AuthenticationError, anthropic.PermissionDeniedError) as e:
            raise AuthError(str(e)) from e
        except anthropic.RateLimitError as e:
            raise QuotaExceeded(str(e)) from e
        except anthropic.APIConnectionError as e:
            raise NetworkError(str(e)) from e
        except anthropic.APIError as e:
            raise AIClientError(f"{tier.name} ({tier.model}): {e}") from e

        usage = getattr(message, "usage", None)
        if usage is not None:
            logger.debug(
                "AI response: %d input, %d output tokens", usage.input_tokens, usage.output_tokens
            )
            self._token_log.append((tier.model, usage.input_tokens, usage.output_tokens))
        return response_text(message)

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary


def build_prompt(prompt: str, schema: Schema | None, structured: bool) -> str:
    """Final user message for a tier; embeds the schema when not sent as a tool."""
    if structured:
        return prompt
    if schema is None:
        return f"{prompt}\n\n{JSON_ONLY}"
    return (
        f"{prompt}\n\nIMPORTANT: Respond with VALID JSON matching this schema: "
        f"{json.dumps(schema.to_json_schema())}\n{JSON_ONLY}"
    )


def response_text(message) -> str:
    """Extract text from a Messages API response; tool input is re-serialized."""
    parts: list[str] = []
    for block in message.content or []:
        if getattr(block, "type", None) == "tool_use":
            return json.dumps(block.input)
        text = getattr(block, "text", None)
        if isinstance(text, str):
            parts.append(text)
    return "".join(parts)


def decode_response(text: str, schema: Schema | None) -> dict | list:
    """Turn raw response text into trusted JSON or raise the matching error."""
    if not text or not text.strip():
        raise EmptyResponse("Empty response from AI")
    if any(marker in text for marker in PERMISSION_MARKERS):
        raise AuthError("Invalid API key or permission denied")
    if QUOTA_MARKER in text:
        raise QuotaExceeded("AI quota exhausted")

    data = extract_json(text)
    if schema is not None:
        validate_or_raise(schema, data)
    return data
