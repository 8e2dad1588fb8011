"""Pydantic models for learning and skill roadmaps."""

from __future__ import annotations

from career_compass.models.base import Source, WireModel


class LearningStep(WireModel):
    title: str
    description: str
    key_topics: list[str]
    estimated_time: str


class LearningPhases(WireModel):
    foundations: LearningStep
    intermediate: LearningStep
    advanced: LearningStep


class ProjectIdea(WireModel):
    title: str
    description: str
    difficulty: str


class CareerPath(WireModel):
    role: str
    salary_range: str
    required_skills: list[str]


class Resource(WireModel):
    name: str
    type: str  # "Docs", "Course", "Book", ...
    url: str


class LearningRoadmap(WireModel):
    tech_name: str
    objective: str
    phases: LearningPhases
    projects: list[ProjectIdea]
    career_paths: list[CareerPath]
    resources: list[Resource]
    source: Source = "live"


class SkillItem(WireModel):
    name: str
    icon: str
    details: str
    critical_steps: list[str]
    mastery_content: list[str]


class SkillPhase(WireModel):
    title: str
    period: str
    description: str
    skills: list[SkillItem]


class SkillRoadmap(WireModel):
    title: str
    subtitle: str
    description: str
    key_topics: list[str]
    phases: list[SkillPhase]
    source: Source = "live"
