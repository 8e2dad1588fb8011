"""Market Analyst - synthesizes the AI market pulse for a query and time range."""

from __future__ import annotations

import logging
import random

from career_compass.builders.base import expect_object, mark_live
from career_compass.clients.ai_client import AIClient
from career_compass.fallback.market import synthesize_market_pulse
from career_compass.models.market import MarketPulse
from career_compass.schemas.catalog import market_pulse_schema
from career_compass.utils.timeline import POINTS_BY_RANGE, points_for_range

logger = logging.getLogger(__name__)


def build_prompt(query: str, time_range: str, points: int) -> str:
    if query:
        return f"""Generate a deep-dive AI market report for "{query}" over a {time_range} period.
- Pivot all growth stats and the main chart data specifically to "{query}" for {time_range}.
- Provide exactly {points} data points in 'chartData' (one per month, oldest first, ending with the current month).
- Fill 'toolSpotlight' with a sharp "Industry Need" analysis explaining WHY "{query}" is critical right now.
- List top market competitors for "{query}".
- Include relevant market stats (Market Cap effect, Active Solutions, etc.) within the context of "{query}"."""

    return f"""Generate a comprehensive AI market report for the general tech landscape today over a {time_range} period.
- Provide exactly {points} data points in 'chartData' (one per month, oldest first, ending with the current month).
- Identify 4 specific "growingTools" that are trending right now with their names, growth %, and a 1-sentence reason.
- Include broad metrics, growth trends, and trending industry insights."""


class MarketAnalyst:
    def __init__(self, ai: AIClient, *, rng: random.Random | None = None):
        self.ai = ai
        self.rng = rng

    async def pulse(self, query: str = "", time_range: str = "6M") -> MarketPulse:
        """Live market pulse, or a synthesized one with the same chart length."""
        query = str(query or "").strip()
        time_range = str(time_range or "").upper()
        if time_range not in POINTS_BY_RANGE:
            time_range = "6M"
        points = points_for_range(time_range)

        try:
            data = await self.ai.generate_json(
                prompt=build_prompt(query, time_range, points),
                schema=market_pulse_schema(points),
            )
            return MarketPulse.model_validate(mark_live(expect_object(data)))
        except Exception as e:
            logger.warning("Market pulse unavailable (query=%r, range=%s), using fallback: %s", query, time_range, e)
            return synthesize_market_pulse(query, time_range, rng=self.rng)
