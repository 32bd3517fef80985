"""
Matcher package for founder/professional team matching.
Provides signal extraction, TF-IDF similarity, scoring and team assembly.
"""

from .engine import ScoringEngine
from .extractor import SignalExtractor
from .models import (
    STATUS_NO_ELIGIBLE,
    STATUS_OK,
    ProfessionalProfile,
    ProjectInput,
    Recommendation,
    ScoreBreakdown,
    ScoredCandidate,
    TeamResult,
)
from .pipeline import MatchingPipeline, generate_team
from .recommendation import RecommendationEngine
from .signals import SignalSet

__all__ = [
    'ScoringEngine',
    'SignalExtractor',
    'SignalSet',
    'ProjectInput',
    'ProfessionalProfile',
    'ScoreBreakdown',
    'ScoredCandidate',
    'TeamResult',
    'Recommendation',
    'RecommendationEngine',
    'MatchingPipeline',
    'generate_team',
    'STATUS_OK',
    'STATUS_NO_ELIGIBLE',
]
