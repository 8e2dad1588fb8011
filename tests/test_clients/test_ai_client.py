"""Tests for AIClient (schema-constrained Claude wrapper)."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import anthropic
import httpx
import pytest

from career_compass.clients.ai_client import (
    RESPONSE_TOOL,
    AIClient,
    Tier,
    decode_response,
    first_success,
    response_text,
)
from career_compass.config import AIConfig
from career_compass.errors import (
    AIClientError,
    AuthError,
    EmptyResponse,
    NetworkError,
    ParseError,
    SchemaValidationError,
)
from career_compass.fallback.roadmap import synthesize_skill_roadmap
from career_compass.schemas import Number, Object, String
from career_compass.schemas.catalog import SKILL_ROADMAP
from conftest import make_message, make_sdk_client

SCHEMA = Object({"name": String(), "score": Number()})
GOOD = {"name": "ok", "score": 1}

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _client_with(sdk) -> AIClient:
    with patch("career_compass.clients.ai_client.anthropic.AsyncAnthropic", return_value=sdk):
        return AIClient(api_key="test-key")


class TestAIClientInit:
    def test_init_passes_key_and_timeout(self):
        with patch("career_compass.clients.ai_client.anthropic.AsyncAnthropic") as mock_cls:
            AIClient(api_key="test-key", timeout=30.0)
            mock_cls.assert_called_once_with(api_key="test-key", timeout=30.0)

    def test_timeout_defaults_to_config(self):
        with patch("career_compass.clients.ai_client.anthropic.AsyncAnthropic") as mock_cls:
            AIClient(config=AIConfig(api_key="cfg-key", timeout=15))
            mock_cls.assert_called_once_with(api_key="cfg-key", timeout=15)

    def test_key_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "env-key")
        with patch("career_compass.clients.ai_client.anthropic.AsyncAnthropic") as mock_cls:
            client = AIClient()
        assert client.has_credentials
        assert mock_cls.call_args.kwargs["api_key"] == "env-key"

    def test_no_key_means_no_sdk_client(self, no_api_key):
        with patch("career_compass.clients.ai_client.anthropic.AsyncAnthropic") as mock_cls:
            client = AIClient()
        mock_cls.assert_not_called()
        assert not client.has_credentials

    def test_default_tier_ladder(self):
        with patch("career_compass.clients.ai_client.anthropic.AsyncAnthropic"):
            client = AIClient(api_key="k")
        assert [t.name for t in client.tiers] == ["primary", "primary-beta", "fallback-model"]
        assert client.tiers[1].beta
        assert client.tiers[2].schema_in_prompt
        assert client.tiers[2].model == "claude-sonnet-4-5-20250929"


class TestInvoke:
    async def test_missing_key_raises_auth_error(self, no_api_key):
        client = AIClient()
        with pytest.raises(AuthError, match="ANTHROPIC_API_KEY"):
            await client.invoke("prompt", SCHEMA)

    async def test_primary_tier_sends_schema_as_tool(self):
        sdk = make_sdk_client(stable=[make_message(tool_input=GOOD)])
        client = _client_with(sdk)

        result = await client.invoke("rate it", SCHEMA)

        assert result == GOOD
        kwargs = sdk.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-haiku-4-5-20251001"
        assert kwargs["tools"][0]["input_schema"] == SCHEMA.to_json_schema()
        assert kwargs["tool_choice"] == {"type": "tool", "name": RESPONSE_TOOL}
        sdk.beta.messages.create.assert_not_called()

    async def test_escalates_to_beta_then_fallback_model(self):
        sdk = make_sdk_client(
            stable=[make_message(text=""), make_message(text=json.dumps(GOOD))],
            beta=[make_message(text="not json at all")],
        )
        client = _client_with(sdk)

        result = await client.invoke("rate it", SCHEMA)

        assert result == GOOD
        assert sdk.beta.messages.create.await_count == 1
        assert sdk.messages.create.await_count == 2
        final = sdk.messages.create.call_args.kwargs
        assert final["model"] == "claude-sonnet-4-5-20250929"
        assert "tools" not in final
        assert "Respond with VALID JSON matching this schema" in final["messages"][0]["content"]

    async def test_schema_mismatch_escalates(self):
        sdk = make_sdk_client(
            stable=[make_message(tool_input={"name": "x"})],
            beta=[make_message(tool_input=GOOD)],
        )
        client = _client_with(sdk)
        assert await client.invoke("p", SCHEMA) == GOOD

    async def test_all_tiers_fail_raises_last_error(self):
        sdk = make_sdk_client(
            stable=[make_message(text=""), make_message(text="still no json")],
            beta=[make_message(text="")],
        )
        client = _client_with(sdk)
        with pytest.raises(ParseError):
            await client.invoke("p", SCHEMA)

    async def test_permission_marker_stops_escalation(self):
        sdk = make_sdk_client(stable=[make_message(text="Error: PERMISSION_DENIED")])
        client = _client_with(sdk)
        with pytest.raises(AuthError):
            await client.invoke("p", SCHEMA)
        sdk.beta.messages.create.assert_not_called()

    async def test_sdk_authentication_error_maps_to_auth_error(self):
        error = anthropic.AuthenticationError(
            "invalid x-api-key",
            response=httpx.Response(401, request=_REQUEST),
            body=None,
        )
        sdk = make_sdk_client(stable=[error])
        client = _client_with(sdk)
        with pytest.raises(AuthError):
            await client.invoke("p", SCHEMA)
        assert sdk.messages.create.await_count == 1

    async def test_connection_error_escalates_as_network_error(self):
        sdk = make_sdk_client(
            stable=[anthropic.APIConnectionError(request=_REQUEST), anthropic.APIConnectionError(request=_REQUEST)],
            beta=[anthropic.APIConnectionError(request=_REQUEST)],
        )
        client = _client_with(sdk)
        with pytest.raises(NetworkError):
            await client.invoke("p", SCHEMA)
        assert sdk.messages.create.await_count == 2
        assert sdk.beta.messages.create.await_count == 1

    async def test_without_schema_asks_for_json_only(self):
        sdk = make_sdk_client(stable=[make_message(text='```json\n["a", "b"]\n```')])
        client = _client_with(sdk)

        result = await client.invoke("list things")

        assert result == ["a", "b"]
        kwargs = sdk.messages.create.call_args.kwargs
        assert "tools" not in kwargs
        assert "Respond ONLY with a single valid JSON document" in kwargs["messages"][0]["content"]

    async def test_generate_json_is_invoke(self):
        sdk = make_sdk_client(stable=[make_message(tool_input=GOOD)])
        client = _client_with(sdk)
        assert await client.generate_json(prompt="p", schema=SCHEMA) == GOOD

    async def test_custom_tiers(self):
        sdk = make_sdk_client(stable=[make_message(tool_input=GOOD)])
        with patch("career_compass.clients.ai_client.anthropic.AsyncAnthropic", return_value=sdk):
            client = AIClient(api_key="k", tiers=[Tier("only", "my-model")])
        await client.invoke("p", SCHEMA)
        assert sdk.messages.create.call_args.kwargs["model"] == "my-model"


class TestTokenSummary:
    async def test_token_log_records_each_tier_call(self):
        sdk = make_sdk_client(
            stable=[make_message(text="", input_tokens=10, output_tokens=1)],
            beta=[make_message(tool_input=GOOD, input_tokens=20, output_tokens=8)],
        )
        client = _client_with(sdk)
        await client.invoke("p", SCHEMA)

        summary = client.get_token_summary()

        assert summary["input"] == 30
        assert summary["output"] == 9
        assert len(summary["calls"]) == 2

    def test_summary_clears_log(self):
        with patch("career_compass.clients.ai_client.anthropic.AsyncAnthropic"):
            client = AIClient(api_key="k")
        client._token_log = [("claude-haiku-4-5-20251001", 50, 25)]

        client.get_token_summary()
        second = client.get_token_summary()

        assert second == {"input": 0, "output": 0, "calls": []}


class TestFirstSuccess:
    async def test_stops_at_first_success(self):
        second = AsyncMock(return_value={"tier": 2})
        third = AsyncMock(return_value={"tier": 3})
        strategies = [
            ("one", AsyncMock(side_effect=EmptyResponse("empty"))),
            ("two", second),
            ("three", third),
        ]
        assert await first_success(strategies, "p", None) == {"tier": 2}
        third.assert_not_awaited()

    async def test_empty_chain_raises(self):
        with pytest.raises(AIClientError):
            await first_success([], "p", None)

    async def test_non_client_errors_propagate(self):
        strategies = [("boom", AsyncMock(side_effect=RuntimeError("bug")))]
        with pytest.raises(RuntimeError):
            await first_success(strategies, "p", None)


class TestDecodeResponse:
    def test_empty(self):
        with pytest.raises(EmptyResponse):
            decode_response("  ", None)

    def test_api_key_invalid_marker(self):
        with pytest.raises(AuthError):
            decode_response('{"error": "API_KEY_INVALID"}', None)

    def test_prose_wrapped_json_validated(self):
        assert decode_response('Result: {"name": "a", "score": 2} ok', SCHEMA) == {"name": "a", "score": 2}

    def test_schema_failure(self):
        with pytest.raises(SchemaValidationError):
            decode_response('{"name": "a"}', SCHEMA)

    def test_response_text_prefers_tool_input(self):
        message = make_message(text="ignored", tool_input={"a": 1})
        assert json.loads(response_text(message)) == {"a": 1}

    def test_tool_input_with_code_fences_survives(self):
        payload = synthesize_skill_roadmap("Docker").to_wire()
        payload.pop("source")
        payload["phases"][0]["skills"][0]["details"] = "Use ```docker run``` often"
        message = make_message(tool_input=payload)

        result = decode_response(response_text(message), SKILL_ROADMAP)

        assert result["phases"][0]["skills"][0]["details"] == "Use ```docker run``` often"
        assert result == payload
