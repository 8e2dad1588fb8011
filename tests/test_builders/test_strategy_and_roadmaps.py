"""Tests for ProductStrategist and RoadmapMentor."""

import pytest

from career_compass.builders.product_strategist import ProductStrategist
from career_compass.builders.roadmap_mentor import RoadmapMentor
from career_compass.fallback.strategy import synthesize_product_strategy
from career_compass.models.roadmap import LearningRoadmap, SkillRoadmap
from career_compass.models.strategy import ProductStrategy
from career_compass.schemas.catalog import LEARNING_ROADMAP, PRODUCT_STRATEGY, SKILL_ROADMAP
from conftest import learning_roadmap_payload


class TestProductStrategist:
    async def test_live_strategy(self, mock_ai_client):
        payload = synthesize_product_strategy("Notely").to_wire()
        payload.pop("source")
        mock_ai_client.generate_json.return_value = payload

        result = await ProductStrategist(mock_ai_client).plan("Notely", "Note taking app")

        assert isinstance(result, ProductStrategy)
        assert result.source == "live"
        prompt = mock_ai_client.generate_json.call_args.kwargs["prompt"]
        assert '"Notely"' in prompt
        assert "Note taking app" in prompt

    async def test_failure_falls_back(self, failing_ai_client):
        result = await ProductStrategist(failing_ai_client).plan("GPT Writer", "")

        assert result.source == "fallback"
        assert result.product_name == "GPT Writer"
        assert "LLM Inference Latency" in result.technical_upgrades
        assert PRODUCT_STRATEGY.validate(result.to_wire()) == []

    async def test_missing_description_uses_placeholder(self, mock_ai_client):
        mock_ai_client.generate_json.return_value = {}
        result = await ProductStrategist(mock_ai_client).plan("Notely", None)
        assert result.source == "fallback"
        assert "Description: Not provided." in mock_ai_client.generate_json.call_args.kwargs["prompt"]

    async def test_empty_name_rejected(self, mock_ai_client):
        with pytest.raises(ValueError, match="product_name"):
            await ProductStrategist(mock_ai_client).plan("  ")
        mock_ai_client.generate_json.assert_not_called()


class TestRoadmapMentor:
    async def test_live_learning_roadmap(self, mock_ai_client):
        mock_ai_client.generate_json.return_value = learning_roadmap_payload("Go")

        result = await RoadmapMentor(mock_ai_client).learning_roadmap("Go", "Backend services")

        assert isinstance(result, LearningRoadmap)
        assert result.source == "live"
        assert result.phases.advanced.key_topics == ["goroutines"]
        assert "Goal: Backend services" in mock_ai_client.generate_json.call_args.kwargs["prompt"]

    async def test_incomplete_live_payload_falls_back(self, mock_ai_client):
        payload = learning_roadmap_payload("Go")
        del payload["phases"]
        mock_ai_client.generate_json.return_value = payload

        result = await RoadmapMentor(mock_ai_client).learning_roadmap("Go")

        assert result.source == "fallback"
        assert result.phases.foundations.key_topics[0] == "Go Core Architecture"

    async def test_learning_fallback_matches_schema(self, failing_ai_client):
        result = await RoadmapMentor(failing_ai_client).learning_roadmap("React", "Frontend")
        assert LEARNING_ROADMAP.validate(result.to_wire()) == []
        assert result.phases.foundations.key_topics[0] == "Hooks & Context API"

    async def test_skill_roadmap_fallback(self, failing_ai_client):
        result = await RoadmapMentor(failing_ai_client).skill_roadmap("Kubernetes")

        assert isinstance(result, SkillRoadmap)
        assert result.source == "fallback"
        assert result.title == "Learning Path for Kubernetes"
        assert SKILL_ROADMAP.validate(result.to_wire()) == []

    async def test_empty_tech_rejected(self, mock_ai_client):
        with pytest.raises(ValueError, match="tech_name"):
            await RoadmapMentor(mock_ai_client).learning_roadmap("")

    async def test_missing_goal_uses_default(self, mock_ai_client):
        mock_ai_client.generate_json.return_value = learning_roadmap_payload("Go")
        await RoadmapMentor(mock_ai_client).learning_roadmap("Go", None)
        prompt = mock_ai_client.generate_json.call_args.kwargs["prompt"]
        assert "Goal: Become a job-ready Go professional." in prompt
