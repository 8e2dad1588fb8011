"""Job Scout - generates current job listings for a search query."""

from __future__ import annotations

import logging

from career_compass.builders.base import expect_object
from career_compass.clients.ai_client import AIClient
from career_compass.fallback.jobs import DEFAULT_TITLE, synthesize_jobs
from career_compass.models.job import Job
from career_compass.schemas.catalog import JOBS_RESPONSE

logger = logging.getLogger(__name__)


class JobScout:
    def __init__(self, ai: AIClient, count: int = 20):
        self.ai = ai
        self.count = count

    async def fetch(self, query: str = "") -> list[Job]:
        """Always returns a non-empty list; synthesized listings on failure."""
        query = str(query or "").strip()
        prompt = (
            f'Generate {self.count} highly realistic, current job listings for '
            f'"{query or DEFAULT_TITLE}" positions. Use "Full-time", "Internship" or '
            '"Contract" for type and a relative time such as "2 days ago" for postedAt.'
        )
        try:
            data = await self.ai.generate_json(prompt=prompt, schema=JOBS_RESPONSE)
            jobs = expect_object(data).get("jobs")
            if not jobs:
                raise ValueError("AI returned no job listings")
            return [Job.model_validate(j) for j in jobs]
        except Exception as e:
            logger.warning("Job search unavailable (query=%r), using fallback: %s", query, e)
            return synthesize_jobs(query, self.count)
