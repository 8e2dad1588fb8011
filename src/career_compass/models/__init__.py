"""Data models for AI-backed career insights."""

from career_compass.models.job import Job
from career_compass.models.market import (
    CategoryShare,
    ChartPoint,
    GrowingTool,
    Insight,
    MarketPulse,
    MarketStats,
    ToolSpotlight,
)
from career_compass.models.roadmap import LearningRoadmap, SkillRoadmap
from career_compass.models.strategy import ProductStrategy
from career_compass.models.tool import AITool

__all__ = [
    "AITool",
    "CategoryShare",
    "ChartPoint",
    "GrowingTool",
    "Insight",
    "Job",
    "LearningRoadmap",
    "MarketPulse",
    "MarketStats",
    "ProductStrategy",
    "SkillRoadmap",
    "ToolSpotlight",
]
