"""Pydantic models for Product Strategist output."""

from __future__ import annotations

from career_compass.models.base import Source, WireModel


class CurrentState(WireModel):
    analysis: str
    strengths: list[str]
    weaknesses: list[str]


class MarketAnalysis(WireModel):
    competitors: list[str]
    trends: list[str]
    differentiation: str


class StrategyPhase(WireModel):
    title: str
    timeline: str
    focus: list[str]
    details: str


class StrategyRoadmap(WireModel):
    short_term: StrategyPhase
    mid_term: StrategyPhase
    long_term: StrategyPhase


class Risk(WireModel):
    risk: str
    mitigation: str


class KPI(WireModel):
    metric: str
    target: str


class ProductStrategy(WireModel):
    product_name: str
    current_state: CurrentState
    market_analysis: MarketAnalysis
    roadmap: StrategyRoadmap
    technical_upgrades: list[str]
    ux_strategy: str
    monetization: str
    risks: list[Risk]
    kpis: list[KPI]
    source: Source = "live"
