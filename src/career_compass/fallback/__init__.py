"""Deterministic offline generators that stand in for failed AI calls."""

from career_compass.fallback.jobs import synthesize_jobs
from career_compass.fallback.market import synthesize_market_pulse
from career_compass.fallback.roadmap import synthesize_learning_roadmap, synthesize_skill_roadmap
from career_compass.fallback.strategy import synthesize_product_strategy
from career_compass.fallback.tools import default_tools

__all__ = [
    "default_tools",
    "synthesize_jobs",
    "synthesize_learning_roadmap",
    "synthesize_market_pulse",
    "synthesize_product_strategy",
    "synthesize_skill_roadmap",
]
