"""Product Strategist - builds a forward-looking product roadmap."""

from __future__ import annotations

import logging

from career_compass.builders.base import expect_object, mark_live
from career_compass.clients.ai_client import AIClient
from career_compass.fallback.strategy import synthesize_product_strategy
from career_compass.models.strategy import ProductStrategy
from career_compass.schemas.catalog import PRODUCT_STRATEGY

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """\
Act as a world-class Product Architect and Market Strategist. Create a hyper-specific, forward-looking technical roadmap for the product: "{name}".
Description: {description}

CRITICAL REQUIREMENTS:
1. Respond ONLY with a VALID JSON object matching the provided schema.
2. TECHNICAL HURDLES: Instead of generic speed/scaling, identify actual technical constraints for THIS product (e.g., "WebGPU acceleration", "Vector database indexing for LLMs").
3. COMPETITIVE EDGE: Provide a unique differentiation strategy based on current market gaps.
4. KPIS: Use realistic, data-driven targets (e.g., "Reduction in inference latency by 40%" or "Retaining 35% of power users").
5. USER EXPERIENCE: Suggest specific interface transitions or interaction patterns (e.g., "Command-K palette implementation")."""


class ProductStrategist:
    def __init__(self, ai: AIClient):
        self.ai = ai

    async def plan(self, product_name: str, description: str = "") -> ProductStrategy:
        product_name = str(product_name or "").strip()
        if not product_name:
            raise ValueError("product_name must not be empty")
        prompt = PROMPT_TEMPLATE.format(
            name=product_name,
            description=str(description or "").strip() or "Not provided.",
        )
        try:
            data = await self.ai.generate_json(prompt=prompt, schema=PRODUCT_STRATEGY)
            return ProductStrategy.model_validate(mark_live(expect_object(data)))
        except Exception as e:
            logger.warning("Product strategy unavailable for %r, using fallback: %s", product_name, e)
            return synthesize_product_strategy(product_name)
