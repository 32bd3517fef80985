"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest
from typing import Any, Dict

from config import load_config
from matcher.engine import ScoringEngine
from matcher.extractor import SignalExtractor
from matcher.models import ProfessionalProfile, ScoreBreakdown, ScoredCandidate
from matcher.pipeline import MatchingPipeline
from matcher.signals import SignalSet


@pytest.fixture(scope="session")
def config():
    """Bundled default configuration."""
    return load_config()


@pytest.fixture
def extractor(config) -> SignalExtractor:
    return SignalExtractor(config)


@pytest.fixture
def engine(config, extractor) -> ScoringEngine:
    return ScoringEngine(config, extractor)


@pytest.fixture
def pipeline(config) -> MatchingPipeline:
    return MatchingPipeline(config)


@pytest.fixture
def make_profile():
    """Factory for professional profiles with sensible defaults."""
    def _make(id: str, **overrides: Any) -> ProfessionalProfile:
        fields: Dict[str, Any] = {
            "primary_role": "backend_developer",
            "years_experience": "3_5",
            "industry_experience": (),
            "hourly_rate_range": "50-75",
            "availability": "part_time",
            "professional_summary": "",
        }
        fields.update(overrides)
        return ProfessionalProfile(id=id, **fields)
    return _make


@pytest.fixture
def make_scored():
    """Factory for scored candidates with a neutral breakdown."""
    breakdown = ScoreBreakdown(
        capability_overlap=(),
        capability_overlap_count=0,
        capability_score=8,
        industry_score=0,
        tfidf_similarity=0.0,
        tfidf_score=0.0,
        experience_score=2,
        availability_score=1,
        project_signals=SignalSet(),
        candidate_signals=SignalSet(),
    )

    def _make(id: str, role: str, score: float) -> ScoredCandidate:
        return ScoredCandidate(
            candidate=ProfessionalProfile(id=id, primary_role=role),
            score=score,
            breakdown=breakdown,
        )
    return _make


@pytest.fixture
def professional_docs():
    """Professional documents as stored by the persistence layer."""
    return [
        {
            "id": "pro-ml",
            "primary_role": "data_analyst",
            "years_experience": "7_10",
            "industry_experience": ["fintech"],
            "hourly_rate_range": "50-75",
            "availability": "full_time",
            "professional_summary": "Forecasting and dashboards for lending teams",
            "email": "ml@example.com",
        },
        {
            "id": "pro-web",
            "primary_role": "frontend_developer",
            "years_experience": "3_5",
            "industry_experience": ["ecommerce"],
            "hourly_rate_range": "40-60",
            "availability": "part_time",
            "professional_summary": "React website development for online store owners",
        },
        {
            "id": "pro-expensive",
            "primary_role": "technical_lead",
            "years_experience": "10_plus",
            "industry_experience": ["fintech"],
            "hourly_rate_range": "100-150",
            "availability": "full_time",
            "professional_summary": "Machine learning and data analysis lead for fintech lending",
        },
    ]


@pytest.fixture
def root_logger():
    """Root logger whose handlers and level are restored after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
