"""Roadmap Mentor - learning roadmaps for a technology and skill plans."""

from __future__ import annotations

import logging

from career_compass.builders.base import expect_object, mark_live
from career_compass.clients.ai_client import AIClient
from career_compass.fallback.roadmap import synthesize_learning_roadmap, synthesize_skill_roadmap
from career_compass.models.roadmap import LearningRoadmap, SkillRoadmap
from career_compass.schemas.catalog import LEARNING_ROADMAP, SKILL_ROADMAP

logger = logging.getLogger(__name__)

LEARNING_PROMPT = """\
Act as a senior technology mentor and career expert. Create a hyper-specific, deep-dive learning roadmap for mastering "{tech}".
Goal: {goal}

IMPORTANT REQUIREMENTS:
1. Respond ONLY with a VALID JSON object matching the provided schema.
2. BE SPECIFIC: Instead of generic topics like "Fundamentals", mention actual libraries, frameworks, syntax (e.g., "React Hooks & Context API", "Rust Ownership & Borrowing").
3. PHASES: Include specialized deep-dives. Phase 3 should focus on high-scale architecture, performance optimization, and industry-standard security patterns.
4. PROJECTS: Suggest specific, non-trivial projects (e.g., "Build a distributed key-value store" instead of "Build a web app").
5. CAREER: Provide realistic salary ranges based on current high-tier global tech markets (SF/London/Remote)."""

SKILL_PROMPT = """\
Create a highly personalized learning roadmap for mastering "{skill}".
Split it into sequential phases, each with a period, a description and concrete skills.
Every skill needs a Font Awesome icon class, details, numbered critical steps and mastery content.
Respond ONLY with JSON."""


class RoadmapMentor:
    def __init__(self, ai: AIClient):
        self.ai = ai

    async def learning_roadmap(self, tech_name: str, goal: str = "") -> LearningRoadmap:
        tech_name = _require(tech_name, "tech_name")
        prompt = LEARNING_PROMPT.format(
            tech=tech_name,
            goal=str(goal or "").strip() or f"Become a job-ready {tech_name} professional.",
        )
        try:
            data = await self.ai.generate_json(prompt=prompt, schema=LEARNING_ROADMAP)
            return LearningRoadmap.model_validate(mark_live(expect_object(data)))
        except Exception as e:
            logger.warning("Learning roadmap unavailable for %r, using fallback: %s", tech_name, e)
            return synthesize_learning_roadmap(tech_name)

    async def skill_roadmap(self, skill_name: str) -> SkillRoadmap:
        skill_name = _require(skill_name, "skill_name")
        try:
            data = await self.ai.generate_json(
                prompt=SKILL_PROMPT.format(skill=skill_name),
                schema=SKILL_ROADMAP,
            )
            return SkillRoadmap.model_validate(mark_live(expect_object(data)))
        except Exception as e:
            logger.warning("Skill roadmap unavailable for %r, using fallback: %s", skill_name, e)
            return synthesize_skill_roadmap(skill_name)


def _require(value: str, name: str) -> str:
    value = str(value or "").strip()
    if not value:
        raise ValueError(f"{name} must not be empty")
    return value
