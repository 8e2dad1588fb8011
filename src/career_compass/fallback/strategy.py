"""Offline product strategy used when the AI backend is unavailable."""

from __future__ import annotations

from career_compass.models.strategy import ProductStrategy

AI_MARKERS = ("ai", "gpt", "llm")


def is_ai_product(product_name: str) -> bool:
    name = product_name.lower()
    return any(marker in name for marker in AI_MARKERS)


def synthesize_product_strategy(product_name: str) -> ProductStrategy:
    """Template a three-phase strategy, with AI-specific hurdles where relevant."""
    is_ai = is_ai_product(product_name)
    if is_ai:
        hurdles = ["LLM Inference Latency", "Vector DB Optimization", "Context Window Management"]
    else:
        hurdles = [
            "Auto-scaling Cloud Architectures",
            "High-Throughput API Gateways",
            "Distributed Database Consistency",
        ]
    segment = "intelligent automation" if is_ai else "innovative infrastructure"

    return ProductStrategy.model_validate(
        {
            "productName": product_name,
            "currentState": {
                "analysis": (
                    f"Market analysis reveals that {product_name} is entering a high-growth "
                    f"segment with significant demand for {segment}."
                ),
                "strengths": [
                    f"Novel {'AI' if is_ai else 'System'} Logic",
                    "Clear Competitive Niche",
                    "Strong Technical Vision",
                ],
                "weaknesses": [
                    "Global Market Awareness",
                    "Infrastructure Elasticity",
                    "Onboarding Conversion",
                ],
            },
            "marketAnalysis": {
                "competitors": ["Current Market Incumbents", "Segment-Specific Challengers"],
                "trends": [
                    "Small Language Model (SLM) Efficiency" if is_ai else "Serverless Edge Computing",
                    "Proactive User Support",
                ],
                "differentiation": (
                    f"Pivoting to {'deterministic AI outputs' if is_ai else 'zero-latency operations'} "
                    "to outperform established market leaders."
                ),
            },
            "roadmap": {
                "shortTerm": {
                    "title": "Strategic MVP Core",
                    "timeline": "0-4 Months",
                    "focus": ["Core Logic Engine", "Target Segment Validation"],
                    "details": f"Deploy the foundational version of {product_name} to high-value early adopters.",
                },
                "midTerm": {
                    "title": "Ecosystem Expansion",
                    "timeline": "4-9 Months",
                    "focus": ["High-Impact Integrations", "Security Hardening"],
                    "details": f"Scale {product_name} by integrating with major enterprise workflows and platforms.",
                },
                "longTerm": {
                    "title": "Vertical Domain Authority",
                    "timeline": "12+ Months",
                    "focus": ["Internal Marketplace", "Global Distribution"],
                    "details": f"Establish {product_name} as the primary platform for its domain.",
                },
            },
            "technicalUpgrades": hurdles,
            "uxStrategy": (
                f"Implement {'proactive AI suggestions' if is_ai else 'hyper-responsive interactions'} "
                "and a minimalist command-palette interface."
            ),
            "monetization": "Hybrid usage-based model with an emphasis on high-throughput enterprise tiers.",
            "risks": [
                {"risk": "Rapid Technological Shift", "mitigation": "Modular architecture for fast updates"},
                {"risk": "Vendor Lock-in", "mitigation": "Abstract third-party APIs behind internal adapters"},
            ],
            "kpis": [
                {"metric": "User Retention Rate", "target": "Above 45% (MoM)"},
                {"metric": "Activation Rate", "target": "60% of sign-ups within 7 days"},
            ],
            "source": "fallback",
        }
    )
