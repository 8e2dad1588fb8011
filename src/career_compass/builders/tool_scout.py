"""Tool Scout - fetches trending AI tools for the directory."""

from __future__ import annotations

import logging

from career_compass.builders.base import expect_object
from career_compass.clients.ai_client import AIClient
from career_compass.models.tool import AITool
from career_compass.schemas.catalog import TOOLS_RESPONSE

logger = logging.getLogger(__name__)


class ToolScout:
    def __init__(self, ai: AIClient, count: int = 20):
        self.ai = ai
        self.count = count

    async def fetch(self) -> list[AITool] | None:
        """Return live tools, or None so the caller keeps what it already shows."""
        prompt = (
            f"Generate a list of {self.count} trending and newly launched AI tools. "
            "Use a Font Awesome class for 'icon', the official website for 'url', "
            "a rating between 0 and 5, and pricing of Free, Freemium or Paid."
        )
        try:
            data = await self.ai.generate_json(prompt=prompt, schema=TOOLS_RESPONSE)
            tools = expect_object(data).get("tools")
            if tools is None:
                logger.warning("AI tool response had no tools list")
                return None
            return [AITool.model_validate(t) for t in tools]
        except Exception as e:
            logger.warning("AI tool fetch failed: %s", e)
            return None
