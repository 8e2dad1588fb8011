"""Pydantic model for the AI-tool directory."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from career_compass.models.base import WireModel


class AITool(WireModel):
    id: str
    name: str
    category: str
    description: str
    rating: float = Field(ge=0, le=5)
    pricing: Literal["Free", "Freemium", "Paid"]
    tags: list[str]
    icon: str  # Font Awesome class
    url: str
