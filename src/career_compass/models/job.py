"""Pydantic model for job board listings."""

from __future__ import annotations

from typing import Literal

from career_compass.models.base import WireModel


class Job(WireModel):
    id: str
    title: str
    company: str
    location: str
    salary: str
    type: Literal["Full-time", "Internship", "Contract"] = "Full-time"
    tags: list[str]
    description: str
    stack: list[str]
    posted_at: str
    logo: str
    apply_url: str | None = None
