"""Offline market pulse synthesis used when the AI backend is unavailable."""

from __future__ import annotations

import random
from datetime import datetime, timezone

from career_compass.models.market import MarketPulse
from career_compass.utils.timeline import month_labels, points_for_range

SPOTLIGHTS: dict[str, dict] = {
    "chatgpt": {
        "name": "ChatGPT",
        "category": "LLM & Conversational AI",
        "rating": "5",
        "description": "The industry-leading conversational AI by OpenAI.",
        "pros": ["Exceptional reasoning", "Massive ecosystem"],
        "cons": ["Subscription required", "Hallucinations"],
        "industryNeed": "Critical for automation.",
        "competitors": ["Claude", "Gemini"],
        "useCase": "Coding, content",
        "pricing": "Free / $20/mo",
        "website": "https://chatgpt.com",
    },
    "claude": {
        "name": "Claude",
        "category": "LLM & Conversational AI",
        "rating": "4.9",
        "description": "Anthropic's assistant known for long-context reasoning and coding.",
        "pros": ["Long context window", "Strong coding performance"],
        "cons": ["Usage caps on free tier", "Fewer plugins"],
        "industryNeed": "Backbone for document-heavy and agentic workflows.",
        "competitors": ["ChatGPT", "Gemini"],
        "useCase": "Coding, analysis, writing",
        "pricing": "Free / $20/mo",
        "website": "https://claude.ai",
    },
    "gemini": {
        "name": "Gemini",
        "category": "LLM & Conversational AI",
        "rating": "4.7",
        "description": "Google's multimodal model family integrated across Workspace.",
        "pros": ["Native multimodality", "Workspace integration"],
        "cons": ["Inconsistent regional availability", "Evolving API surface"],
        "industryNeed": "Multimodal search and productivity at scale.",
        "competitors": ["ChatGPT", "Claude"],
        "useCase": "Research, productivity",
        "pricing": "Free / $19.99/mo",
        "website": "https://gemini.google.com",
    },
    "midjourney": {
        "name": "Midjourney",
        "category": "Image Generation",
        "rating": "4.9",
        "description": "Leading text-to-image generative engine.",
        "pros": ["Photorealistic output", "Strong community"],
        "cons": ["No free tier", "Limited fine control"],
        "industryNeed": "Rapid visual prototyping for creative teams.",
        "competitors": ["DALL-E 3", "Stable Diffusion", "Firefly"],
        "useCase": "Concept art, marketing visuals",
        "pricing": "From $10/mo",
        "website": "https://www.midjourney.com",
    },
    "copilot": {
        "name": "GitHub Copilot",
        "category": "Coding Tools",
        "rating": "4.8",
        "description": "AI pair programmer for writing better code.",
        "pros": ["Deep IDE integration", "Broad language support"],
        "cons": ["Paid for most users", "Occasional insecure suggestions"],
        "industryNeed": "Developer productivity is the top enterprise AI use case.",
        "competitors": ["Cursor", "CodeWhisperer"],
        "useCase": "Code completion, refactoring",
        "pricing": "$10/mo",
        "website": "https://github.com/features/copilot",
    },
}

INSIGHTS = [
    {
        "tag": "Efficiency",
        "time": "2h ago",
        "title": "LLM inference costs dropping",
        "content": "New techniques are lowering barriers.",
    },
    {
        "tag": "Hiring",
        "time": "5h ago",
        "title": "AI engineering roles keep outpacing supply",
        "content": "Demand for applied ML and LLM ops skills grows quarter over quarter.",
    },
    {
        "tag": "Funding",
        "time": "1d ago",
        "title": "Agent startups dominate seed rounds",
        "content": "Investors favor vertical agents with clear workflow ownership.",
    },
]

CATEGORIES = [
    {"name": "Language Models", "growth": "+82%", "percentage": 40},
    {"name": "Coding Assistants", "growth": "+71%", "percentage": 22},
    {"name": "Image & Video", "growth": "+64%", "percentage": 24},
    {"name": "Audio & Voice", "growth": "+38%", "percentage": 14},
]

GROWING_TOOLS = [
    {"name": "Sora", "growth": "+120%", "reason": "Text-to-video breakthrough"},
    {"name": "Claude 3.5 Sonnet", "growth": "+85%", "reason": "Top-tier coding performance"},
    {"name": "Perplexity", "growth": "+65%", "reason": "AI search adoption"},
    {"name": "Midjourney v6", "growth": "+45%", "reason": "Photorealistic generations"},
]


def find_spotlight(query: str) -> dict | None:
    """Spotlight for a recognized keyword, a generic one for anything else."""
    q = query.strip()
    if not q:
        return None
    lowered = q.lower()
    for keyword, spotlight in SPOTLIGHTS.items():
        if keyword in lowered:
            return dict(spotlight)
    return {
        "name": q,
        "category": "Emerging AI",
        "rating": "4.5",
        "description": f"{q} is an emerging solution gaining traction in the AI market.",
        "pros": ["Focused feature set", "Active development"],
        "cons": ["Smaller ecosystem", "Limited track record"],
        "industryNeed": f"Teams are evaluating {q} to automate specialized workflows.",
        "competitors": ["ChatGPT", "Claude", "Gemini"],
        "useCase": "Workflow automation",
        "pricing": "Varies",
        "website": "#",
    }


def synthesize_market_pulse(
    query: str = "",
    time_range: str = "6M",
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> MarketPulse:
    """Build a plausible market pulse with exactly the range's chart points."""
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    query = str(query or "")
    points = points_for_range(time_range)

    chart_data = []
    for i, month in enumerate(month_labels(points, now)):
        base_growth = 30 + rng.random() * 40
        chart_data.append(
            {
                "month": month,
                "growth": round(base_growth + i * 5),
                "label": f"+{round(5 + rng.random() * 15)}%",
                "demandTrend": "increasing" if rng.random() > 0.3 else "stable",
                "timeRate": round(4.0 + i * 0.1, 1),
            }
        )

    return MarketPulse.model_validate(
        {
            "timestamp": now.isoformat(),
            "stats": {
                "marketCap": "$1.82T",
                "marketCapGrowth": f"{10 + rng.random() * 5:.1f}%",
                "activeTools": "14,290",
                "weeklyNewTools": str(400 + rng.randint(0, 60)),
                "avgFunding": "$24.5M",
                "fundingLabel": "Avg. Series A Funding",
            },
            "chartData": chart_data,
            "insights": INSIGHTS,
            "categories": CATEGORIES,
            "growingTools": GROWING_TOOLS,
            "toolSpotlight": find_spotlight(query),
            "bestOverallTool": "ChatGPT",
            "cagr": "38% CAGR",
            "source": "fallback",
        }
    )
