"""
Scoring engine for team matching.
Combines capability overlap, industry overlap, TF-IDF similarity, experience
and availability into one additive score with an auditable breakdown.
"""

import logging
from typing import Dict, Sequence

from .extractor import SignalExtractor
from .models import ProfessionalProfile, ProjectInput, ScoreBreakdown, ScoredCandidate
from .signals import SignalSet
from .tfidf import Vector, cosine_similarity, vectorize
from config import MatchingConfig

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Calculates match scores for candidate professionals."""
    
    def __init__(self, config: MatchingConfig, extractor: SignalExtractor):
        """
        Initialize scoring engine.
        
        Args:
            config: Configuration object with scoring weights
            extractor: SignalExtractor instance for extracting signals
        """
        self.config = config
        self.extractor = extractor
    
    def score(
        self,
        candidate: ProfessionalProfile,
        project: ProjectInput,
        project_signals: SignalSet,
        project_vector: Vector,
        idf: Dict[str, float],
        candidate_tokens: Sequence[str]
    ) -> ScoredCandidate:
        """
        Calculate the score for one candidate against a project.
        
        Args:
            candidate: Professional to score
            project: Project being staffed
            project_signals: Signals extracted from the project description
            project_vector: TF-IDF vector of the project description
            idf: IDF table shared by the project and candidate vectors
            candidate_tokens: Tokenized professional summary
            
        Returns:
            ScoredCandidate with total score rounded to 2 decimals
        """
        candidate_signals = self.extractor.extract_all(candidate.professional_summary)
        
        overlap = project_signals.capabilities & candidate_signals.capabilities
        capability_score = self._capability_score(len(overlap))
        industry_score = self._industry_score(
            project, candidate, project_signals, candidate_signals
        )
        
        candidate_vector = vectorize(candidate_tokens, idf)
        similarity = cosine_similarity(project_vector, candidate_vector)
        max_text = self.config.scoring_weights.text_similarity_max
        tfidf_score = min(max_text, similarity * max_text)
        
        experience_score = self._experience_score(candidate.years_experience)
        availability_score = self._availability_score(candidate.availability)
        
        total = (
            capability_score
            + industry_score
            + tfidf_score
            + experience_score
            + availability_score
        )
        
        breakdown = ScoreBreakdown(
            capability_overlap=tuple(sorted(overlap)),
            capability_overlap_count=len(overlap),
            capability_score=capability_score,
            industry_score=industry_score,
            tfidf_similarity=round(similarity, 4),
            tfidf_score=round(tfidf_score, 2),
            experience_score=experience_score,
            availability_score=availability_score,
            project_signals=project_signals,
            candidate_signals=candidate_signals
        )
        
        logger.debug(f"Scored {candidate.id}: {round(total, 2)} {breakdown.to_dict()}")
        
        return ScoredCandidate(
            candidate=candidate,
            score=round(total, 2),
            breakdown=breakdown
        )
    
    def _capability_score(self, overlap_count: int) -> float:
        """
        Tiered points for shared capabilities.
        
        No overlap still earns the configured floor score.
        """
        weights = self.config.scoring_weights
        if overlap_count >= 2:
            return weights.capability_strong
        elif overlap_count == 1:
            return weights.capability_partial
        return weights.capability_floor
    
    def _industry_score(
        self,
        project: ProjectInput,
        candidate: ProfessionalProfile,
        project_signals: SignalSet,
        candidate_signals: SignalSet
    ) -> float:
        """Declared industry match first, then overlap of extracted industries."""
        weights = self.config.scoring_weights
        if project.industry and project.industry in candidate.industry_experience:
            return weights.industry_declared
        if project_signals.industries & candidate_signals.industries:
            return weights.industry_signal
        return 0
    
    def _experience_score(self, years_experience: str) -> float:
        weights = self.config.scoring_weights
        return weights.experience.get(years_experience, weights.experience_default)
    
    def _availability_score(self, availability: str) -> float:
        weights = self.config.scoring_weights
        return weights.availability.get(availability, weights.availability_default)
