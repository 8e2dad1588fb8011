"""Entry point that wires one AI client into every request builder."""

from __future__ import annotations

import random

from career_compass.builders.job_scout import JobScout
from career_compass.builders.market_analyst import MarketAnalyst
from career_compass.builders.product_strategist import ProductStrategist
from career_compass.builders.roadmap_mentor import RoadmapMentor
from career_compass.builders.tool_scout import ToolScout
from career_compass.clients.ai_client import AIClient
from career_compass.config import AppConfig
from career_compass.models.job import Job
from career_compass.models.market import MarketPulse
from career_compass.models.roadmap import LearningRoadmap, SkillRoadmap
from career_compass.models.strategy import ProductStrategy
from career_compass.models.tool import AITool


class CareerInsights:
    """Facade over the AI-backed features.

    Every read degrades to synthesized data instead of raising, except
    ``fetch_tools`` which returns None so callers keep their current list.
    """

    def __init__(
        self,
        ai: AIClient,
        config: AppConfig | None = None,
        *,
        rng: random.Random | None = None,
    ):
        self.ai = ai
        self.config = config or AppConfig()
        self.tool_scout = ToolScout(ai, count=self.config.tools.count)
        self.job_scout = JobScout(ai, count=self.config.jobs.count)
        self.market_analyst = MarketAnalyst(ai, rng=rng)
        self.product_strategist = ProductStrategist(ai)
        self.roadmap_mentor = RoadmapMentor(ai)

    @classmethod
    def from_config(cls, config: AppConfig) -> CareerInsights:
        return cls(AIClient(config=config.llm), config)

    async def fetch_tools(self) -> list[AITool] | None:
        return await self.tool_scout.fetch()

    async def fetch_jobs(self, query: str = "") -> list[Job]:
        return await self.job_scout.fetch(query)

    async def get_market_pulse(self, query: str = "", time_range: str | None = None) -> MarketPulse:
        return await self.market_analyst.pulse(
            query, time_range or self.config.market.default_time_range
        )

    async def get_product_strategy(self, name: str, description: str = "") -> ProductStrategy:
        return await self.product_strategist.plan(name, description)

    async def get_learning_roadmap(self, tech_name: str, goal: str = "") -> LearningRoadmap:
        return await self.roadmap_mentor.learning_roadmap(tech_name, goal)

    async def get_skill_roadmap(self, skill_name: str) -> SkillRoadmap:
        return await self.roadmap_mentor.skill_roadmap(skill_name)
