"""Helpers shared by the request builders."""

from __future__ import annotations


def expect_object(data: object) -> dict:
    """Ensure the AI returned a JSON object before it is mapped onto a model."""
    if not isinstance(data, dict):
        raise ValueError(f"Expected dict from AI, got {type(data).__name__}")
    return data


def mark_live(data: dict) -> dict:
    """Copy of ``data`` tagged as coming from the live backend."""
    return {**data, "source": "live"}
