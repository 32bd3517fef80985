"""
Tests for project recommendations.
"""

import pytest

from matcher.models import ProjectInput
from matcher.recommendation import DEFAULT_FOCUS, RecommendationEngine


@pytest.fixture
def recommender(config, extractor):
    return RecommendationEngine(config, extractor)


class TestRecommendationEngine:
    """Test stage, signal, timeline and budget heuristics."""

    def test_missing_stage_uses_idea_rules(self, recommender):
        rec = recommender.generate(ProjectInput(description=""))

        assert rec.recommended_actions[:2] == ("User discovery interviews", "Problem validation")
        assert "Clarify technical scope" in rec.recommended_actions
        assert rec.suggested_roles == ("product_manager", "technical_consultant", "software_engineer")
        assert "Technical requirements are not clearly defined" in rec.insights
        assert "Budget favors lean team composition" in rec.insights
        assert rec.focus == DEFAULT_FOCUS

    def test_mvp_with_complex_scope_and_urgent_timeline(self, recommender):
        project = ProjectInput(
            description="Machine learning dashboards, Docker deployment and a mobile app",
            budget_range="50000_plus",
            project_stage="mvp",
            timeline="asap",
        )

        rec = recommender.generate(project)

        assert rec.suggested_roles == (
            "software_engineer", "ui_ux_designer", "software_architect", "project_manager",
        )
        assert "Complex feature set detected" in rec.insights
        assert "Urgent timeline detected" in rec.insights
        assert "Lean execution with minimal handoffs" in rec.recommended_actions
        assert "Budget favors lean team composition" not in rec.insights
        assert rec.focus.startswith("Focus on delivering a functional core product")

    def test_growth_stage(self, recommender):
        rec = recommender.generate(ProjectInput(
            description="Analytics for a hospital network",
            budget_range="25000_50000",
            project_stage="growth",
        ))

        assert rec.suggested_roles[:2] == ("data_analyst", "growth_marketer")
        assert rec.suggested_roles[-1] == "software_engineer"
        assert "Industry-specific language detected" in rec.insights
        assert rec.focus == "Focus on scaling, analytics, and system robustness."

    def test_launch_stage_keeps_single_core_role(self, recommender):
        rec = recommender.generate(ProjectInput(
            description="API backend",
            budget_range="10000_25000",
            project_stage="launch",
        ))

        assert rec.suggested_roles.count("software_engineer") == 1
        assert rec.recommended_actions == ("Stability and QA testing", "Deployment readiness")
        assert rec.focus == DEFAULT_FOCUS

    def test_unknown_stage(self, recommender):
        rec = recommender.generate(ProjectInput(
            description="API backend",
            budget_range="10000_25000",
            project_stage="scaling",
        ))

        assert rec.suggested_roles == ("software_engineer",)
        assert rec.recommended_actions == ()

    def test_default_extractor(self, config):
        rec = RecommendationEngine(config).generate(ProjectInput(project_stage="idea"))
        assert rec.focus.startswith("Focus on validating the problem")
