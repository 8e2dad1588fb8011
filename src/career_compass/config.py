"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

TIME_RANGES = ("3M", "6M", "1Y")


@dataclass(frozen=True)
class AIConfig:
    primary_model: str = "claude-haiku-4-5-20251001"
    fallback_model: str = "claude-sonnet-4-5-20250929"
    timeout: int = 60
    max_tokens: int = 8192
    temperature: float = 0.4
    api_key_env: str = "ANTHROPIC_API_KEY"
    api_key: str | None = None

    def __post_init__(self):
        if self.timeout < 1:
            raise ValueError(f"timeout must be at least 1 second, got {self.timeout}")
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be within [0, 1], got {self.temperature}")

    def resolve_api_key(self) -> str | None:
        """Explicit key first, then the configured environment variable."""
        return self.api_key or os.environ.get(self.api_key_env) or None


@dataclass(frozen=True)
class MarketConfig:
    default_time_range: str = "6M"

    def __post_init__(self):
        if self.default_time_range not in TIME_RANGES:
            raise ValueError(
                f"default_time_range must be one of {TIME_RANGES}, got {self.default_time_range!r}"
            )


@dataclass(frozen=True)
class JobsConfig:
    count: int = 20

    def __post_init__(self):
        _check_count("jobs.count", self.count)


@dataclass(frozen=True)
class ToolsConfig:
    count: int = 20

    def __post_init__(self):
        _check_count("tools.count", self.count)


def _check_count(name: str, value: int) -> None:
    if not 1 <= value <= 50:
        raise ValueError(f"{name} must be between 1 and 50, got {value}")


@dataclass(frozen=True)
class AppConfig:
    llm: AIConfig = field(default_factory=AIConfig)
    market: MarketConfig = field(default_factory=MarketConfig)
    jobs: JobsConfig = field(default_factory=JobsConfig)
    tools: ToolsConfig = field(default_factory=ToolsConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=AIConfig(**raw.get("llm", {})),
        market=MarketConfig(**raw.get("market", {})),
        jobs=JobsConfig(**raw.get("jobs", {})),
        tools=ToolsConfig(**raw.get("tools", {})),
    )
