"""Pydantic models for the market pulse report."""

from __future__ import annotations

from typing import Literal

from career_compass.models.base import Source, WireModel


class MarketStats(WireModel):
    market_cap: str
    market_cap_growth: str
    active_tools: str
    weekly_new_tools: str
    avg_funding: str
    funding_label: str


class ChartPoint(WireModel):
    month: str
    growth: float
    label: str
    demand_trend: Literal["increasing", "stable", "decreasing"]
    time_rate: float


class Insight(WireModel):
    tag: str
    time: str
    title: str
    content: str


class CategoryShare(WireModel):
    name: str
    growth: str
    percentage: float  # shares need not sum to 100


class GrowingTool(WireModel):
    name: str
    growth: str
    reason: str


class ToolSpotlight(WireModel):
    name: str
    category: str
    rating: str
    description: str
    pros: list[str]
    cons: list[str]
    industry_need: str
    competitors: list[str]
    use_case: str
    pricing: str
    website: str


class MarketPulse(WireModel):
    timestamp: str
    stats: MarketStats
    chart_data: list[ChartPoint]
    insights: list[Insight]
    categories: list[CategoryShare]
    growing_tools: list[GrowingTool]
    tool_spotlight: ToolSpotlight | None = None
    best_overall_tool: str
    cagr: str
    source: Source = "live"
