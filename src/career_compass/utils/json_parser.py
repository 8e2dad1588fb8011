"""Utility to extract JSON from AI responses."""

from __future__ import annotations

import json

from career_compass.errors import ParseError


def extract_json(text: str) -> dict | list:
    """Extract JSON from an AI response, handling ```json blocks.

    Tries in order:
    1. Direct json.loads on the full text
    2. Strip an enclosing code fence and parse
    3. Find first '{' to last '}' and parse
    4. Find first '[' to last ']' and parse (JSON array)
    """
    if not text or not text.strip():
        raise ParseError("Could not extract JSON from empty text")
    text = text.strip()

    # 1) Direct parse
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    # 2) Strip the enclosing fence lines only; fences inside values stay intact
    stripped = strip_code_fences(text)
    if stripped != text:
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            pass
        result = _extract_braces(stripped)
        if result is not None:
            return result

    # 3) First '{' to last '}' on original
    result = _extract_braces(text)
    if result is not None:
        return result

    # 4) First '[' to last ']' (JSON array)
    result = _extract_brackets(text)
    if result is not None:
        return result

    raise ParseError(f"Could not extract JSON from text: {text[:200]}...")


def strip_code_fences(text: str) -> str:
    """Remove a leading fence line (```json, ```) and trailing closing fence."""
    lines = text.strip().split("\n")

    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]

    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]

    return "\n".join(lines).strip()


def _extract_braces(text: str) -> dict | None:
    """Try to extract JSON object from first '{' to last '}'."""
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1 and end > start:
        try:
            return json.loads(text[start : end + 1])
        except json.JSONDecodeError:
            pass
    return None


def _extract_brackets(text: str) -> list | None:
    """Try to extract JSON array from first '[' to last ']'."""
    start = text.find("[")
    end = text.rfind("]")
    if start != -1 and end != -1 and end > start:
        try:
            return json.loads(text[start : end + 1])
        except json.JSONDecodeError:
            pass
    return None
