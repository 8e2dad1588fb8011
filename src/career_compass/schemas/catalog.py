"""Response schemas for every AI-backed feature."""

from __future__ import annotations

from career_compass.schemas.descriptor import Array, Enum, Number, Object, String

PRICING_TIERS = ("Free", "Freemium", "Paid")
JOB_TYPES = ("Full-time", "Internship", "Contract")
DEMAND_TRENDS = ("increasing", "stable", "decreasing")


def _strings() -> Array:
    return Array(String())


# --- Tool discovery ---

AI_TOOL = Object(
    {
        "id": String(),
        "name": String(),
        "category": String(),
        "description": String(),
        "rating": Number(minimum=0, maximum=5),
        "pricing": Enum(PRICING_TIERS),
        "tags": _strings(),
        "icon": String(description="Font Awesome icon class, e.g. fa-robot"),
        "url": String(),
    }
)

TOOLS_RESPONSE = Object({"tools": Array(AI_TOOL)})


# --- Job search ---

JOB = Object(
    {
        "id": String(),
        "title": String(),
        "company": String(),
        "location": String(),
        "salary": String(),
        "type": Enum(JOB_TYPES),
        "tags": _strings(),
        "description": String(),
        "stack": _strings(),
        "postedAt": String(),
        "logo": String(),
        "applyUrl": String(),
    },
    required=(
        "id", "title", "company", "location", "salary", "type",
        "tags", "description", "stack", "postedAt", "logo",
    ),
)

JOBS_RESPONSE = Object({"jobs": Array(JOB)})


# --- Market pulse ---

MARKET_STATS = Object(
    {
        "marketCap": String(),
        "marketCapGrowth": String(),
        "activeTools": String(),
        "weeklyNewTools": String(),
        "avgFunding": String(),
        "fundingLabel": String(),
    }
)

CHART_POINT = Object(
    {
        "month": String(description="Three-letter upper-case month, e.g. JAN"),
        "growth": Number(),
        "label": String(),
        "demandTrend": Enum(DEMAND_TRENDS),
        "timeRate": Number(),
    }
)

INSIGHT = Object(
    {
        "tag": String(),
        "time": String(),
        "title": String(),
        "content": String(),
    }
)

CATEGORY = Object(
    {
        "name": String(),
        "growth": String(),
        "percentage": Number(minimum=0, maximum=100),
    }
)

GROWING_TOOL = Object(
    {
        "name": String(),
        "growth": String(),
        "reason": String(),
    }
)

TOOL_SPOTLIGHT = Object(
    {
        "name": String(),
        "category": String(),
        "rating": String(),
        "description": String(),
        "pros": _strings(),
        "cons": _strings(),
        "industryNeed": String(),
        "competitors": _strings(),
        "useCase": String(),
        "pricing": String(),
        "website": String(),
    }
)


def market_pulse_schema(points: int) -> Object:
    """Market pulse schema whose chart must hold exactly ``points`` entries."""
    return Object(
        {
            "timestamp": String(),
            "stats": MARKET_STATS,
            "chartData": Array(CHART_POINT, min_items=points, max_items=points),
            "insights": Array(INSIGHT),
            "categories": Array(CATEGORY),
            "growingTools": Array(GROWING_TOOL),
            "toolSpotlight": TOOL_SPOTLIGHT,
            "bestOverallTool": String(),
            "cagr": String(),
        },
        required=(
            "timestamp", "stats", "chartData", "insights", "categories",
            "growingTools", "bestOverallTool", "cagr",
        ),
    )


# --- Product strategy ---

STRATEGY_PHASE = Object(
    {
        "title": String(),
        "timeline": String(),
        "focus": _strings(),
        "details": String(),
    }
)

PRODUCT_STRATEGY = Object(
    {
        "productName": String(),
        "currentState": Object(
            {
                "analysis": String(),
                "strengths": _strings(),
                "weaknesses": _strings(),
            }
        ),
        "marketAnalysis": Object(
            {
                "competitors": _strings(),
                "trends": _strings(),
                "differentiation": String(),
            }
        ),
        "roadmap": Object(
            {
                "shortTerm": STRATEGY_PHASE,
                "midTerm": STRATEGY_PHASE,
                "longTerm": STRATEGY_PHASE,
            }
        ),
        "technicalUpgrades": _strings(),
        "uxStrategy": String(),
        "monetization": String(),
        "risks": Array(Object({"risk": String(), "mitigation": String()})),
        "kpis": Array(Object({"metric": String(), "target": String()})),
    }
)


# --- Learning roadmap ---

LEARNING_STEP = Object(
    {
        "title": String(),
        "description": String(),
        "keyTopics": _strings(),
        "estimatedTime": String(),
    }
)

LEARNING_ROADMAP = Object(
    {
        "techName": String(),
        "objective": String(),
        "phases": Object(
            {
                "foundations": LEARNING_STEP,
                "intermediate": LEARNING_STEP,
                "advanced": LEARNING_STEP,
            }
        ),
        "projects": Array(
            Object({"title": String(), "description": String(), "difficulty": String()})
        ),
        "careerPaths": Array(
            Object({"role": String(), "salaryRange": String(), "requiredSkills": _strings()})
        ),
        "resources": Array(Object({"name": String(), "type": String(), "url": String()})),
    }
)


# --- Skill roadmap ---

SKILL_ROADMAP = Object(
    {
        "title": String(),
        "subtitle": String(),
        "description": String(),
        "keyTopics": _strings(),
        "phases": Array(
            Object(
                {
                    "title": String(),
                    "period": String(),
                    "description": String(),
                    "skills": Array(
                        Object(
                            {
                                "name": String(),
                                "icon": String(),
                                "details": String(),
                                "criticalSteps": _strings(),
                                "masteryContent": _strings(),
                            }
                        )
                    ),
                }
            ),
            min_items=1,
        ),
    }
)
