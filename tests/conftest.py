"""Shared test fixtures."""

from __future__ import annotations

import random
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from career_compass.clients.ai_client import AIClient
from career_compass.errors import ParseError


def make_message(
    text: str | None = None,
    tool_input: dict | None = None,
    input_tokens: int = 100,
    output_tokens: int = 50,
) -> SimpleNamespace:
    """Build a Messages API response-like object."""
    content = []
    if tool_input is not None:
        content.append(SimpleNamespace(type="tool_use", input=tool_input))
    if text is not None:
        content.append(SimpleNamespace(type="text", text=text))
    return SimpleNamespace(
        content=content,
        usage=SimpleNamespace(input_tokens=input_tokens, output_tokens=output_tokens),
    )


def make_sdk_client(stable=None, beta=None) -> MagicMock:
    """Mock AsyncAnthropic with separate stable and beta ``messages.create``."""
    client = MagicMock()
    client.messages.create = AsyncMock(side_effect=stable)
    client.beta.messages.create = AsyncMock(side_effect=beta)
    return client


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def mock_ai_client() -> AIClient:
    """Create a mock AI client."""
    client = AsyncMock(spec=AIClient)
    client.generate_json = AsyncMock(return_value={})
    client.invoke = AsyncMock(return_value={})
    return client


@pytest.fixture
def failing_ai_client() -> AIClient:
    """Mock AI client whose every call fails."""
    client = AsyncMock(spec=AIClient)
    client.generate_json = AsyncMock(side_effect=ParseError("no JSON"))
    client.invoke = AsyncMock(side_effect=ParseError("no JSON"))
    return client


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)


def market_pulse_payload(points: int = 6, spotlight: bool = False) -> dict:
    months = ["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]
    payload = {
        "timestamp": "2026-10-01T00:00:00Z",
        "stats": {
            "marketCap": "$2.1T",
            "marketCapGrowth": "14%",
            "activeTools": "15,000",
            "weeklyNewTools": "510",
            "avgFunding": "$30M",
            "fundingLabel": "Avg. Series A Funding",
        },
        "chartData": [
            {
                "month": months[i % 12],
                "growth": 40 + i,
                "label": "+10%",
                "demandTrend": "increasing",
                "timeRate": 4.2,
            }
            for i in range(points)
        ],
        "insights": [{"tag": "Chips", "time": "1h ago", "title": "GPU supply", "content": "Improving."}],
        "categories": [{"name": "Agents", "growth": "+90%", "percentage": 30}],
        "growingTools": [{"name": "Cursor", "growth": "+70%", "reason": "Agentic editing"}],
        "bestOverallTool": "Claude",
        "cagr": "41% CAGR",
    }
    if spotlight:
        payload["toolSpotlight"] = {
            "name": "Cursor",
            "category": "Coding Tools",
            "rating": "4.9",
            "description": "AI-first editor.",
            "pros": ["Fast"],
            "cons": ["Paid"],
            "industryNeed": "Developer productivity.",
            "competitors": ["Copilot"],
            "useCase": "Coding",
            "pricing": "$20/mo",
            "website": "https://cursor.com",
        }
    return payload


def learning_roadmap_payload(tech: str = "Go") -> dict:
    step = {"title": "T", "description": "D", "keyTopics": ["goroutines"], "estimatedTime": "2 weeks"}
    return {
        "techName": tech,
        "objective": "Ship services",
        "phases": {"foundations": step, "intermediate": step, "advanced": step},
        "projects": [{"title": "KV store", "description": "Raft", "difficulty": "Advanced"}],
        "careerPaths": [{"role": "Backend", "salaryRange": "$150k", "requiredSkills": ["Go"]}],
        "resources": [{"name": "Tour of Go", "type": "Docs", "url": "https://go.dev/tour"}],
    }


@pytest.fixture
def sample_market_pulse() -> dict:
    return market_pulse_payload(6)
